"""Relational database service infos and their JDBC URL formats."""

from typing import ClassVar, override
from urllib.parse import quote

from cloud_connector.service_info.base import ServiceInfo
from cloud_connector.service_info.registry import ServiceKindRegistry


class RelationalServiceInfo(ServiceInfo):
    """Service info for relational databases.

    Subclasses set ``jdbc_url_database_type`` and override ``jdbc_url`` when
    their driver does not use the generic
    ``jdbc:{type}://{host}:{port}/{database}?user=..&password=..`` format.
    """

    jdbc_url_database_type: ClassVar[str] = ""

    @property
    def database(self) -> str:
        """Get the database name (the URI path)."""
        return self.path

    @property
    def jdbc_url(self) -> str:
        """Build the driver-specific JDBC URL."""
        url = f"jdbc:{self.jdbc_url_database_type}://{self._host_and_port()}/{self.path}"
        credentials = self._credential_parameters("&", "=")
        if credentials:
            url += "?" + credentials
        return url

    @override
    def connection_string(self) -> str:
        """Return the JDBC URL."""
        return self.jdbc_url

    def _host_and_port(self) -> str:
        return f"{self.host}:{self.port}" if self.port else self.host

    def _credential_parameters(self, separator: str, assign: str) -> str:
        parameters = []
        if self.user_name:
            parameters.append(f"user{assign}{quote(self.user_name, safe='')}")
        if self.password:
            parameters.append(f"password{assign}{quote(self.password, safe='')}")
        return separator.join(parameters)


@ServiceKindRegistry.register
class MysqlServiceInfo(RelationalServiceInfo):
    """MySQL database service info."""

    label: ClassVar[str] = "mysql"
    schemes: ClassVar[tuple[str, ...]] = ("mysql",)
    jdbc_url_database_type: ClassVar[str] = "mysql"


@ServiceKindRegistry.register
class PostgresqlServiceInfo(RelationalServiceInfo):
    """PostgreSQL database service info."""

    label: ClassVar[str] = "postgresql"
    schemes: ClassVar[tuple[str, ...]] = ("postgres", "postgresql")
    jdbc_url_database_type: ClassVar[str] = "postgresql"


@ServiceKindRegistry.register
class OracleServiceInfo(RelationalServiceInfo):
    """Oracle database service info using the thin driver URL format."""

    label: ClassVar[str] = "oracle"
    schemes: ClassVar[tuple[str, ...]] = ("oracle",)
    jdbc_url_database_type: ClassVar[str] = "oracle"

    @property
    @override
    def jdbc_url(self) -> str:
        """Build ``jdbc:oracle:thin:{user}/{password}@{host}:{port}/{database}``."""
        return (
            f"jdbc:{self.jdbc_url_database_type}:thin:"
            f"{self.user_name}/{self.password}@{self.host}:{self.port}/{self.path}"
        )


@ServiceKindRegistry.register
class SqlServerServiceInfo(RelationalServiceInfo):
    """Microsoft SQL Server service info."""

    label: ClassVar[str] = "sqlserver"
    schemes: ClassVar[tuple[str, ...]] = ("sqlserver",)
    jdbc_url_database_type: ClassVar[str] = "sqlserver"

    @property
    @override
    def jdbc_url(self) -> str:
        """Build ``jdbc:sqlserver://{host}:{port};database={database};user=..;password=..``."""
        url = f"jdbc:{self.jdbc_url_database_type}://{self._host_and_port()}"
        if self.path:
            url += f";database={self.path}"
        credentials = self._credential_parameters(";", "=")
        if credentials:
            url += ";" + credentials
        return url


@ServiceKindRegistry.register
class Db2ServiceInfo(RelationalServiceInfo):
    """IBM DB2 service info."""

    label: ClassVar[str] = "db2"
    schemes: ClassVar[tuple[str, ...]] = ("db2",)
    jdbc_url_database_type: ClassVar[str] = "db2"

    @property
    @override
    def jdbc_url(self) -> str:
        """Build ``jdbc:db2://{host}:{port}/{database}:user=..;password=..;``."""
        url = f"jdbc:{self.jdbc_url_database_type}://{self._host_and_port()}/{self.path}"
        credentials = self._credential_parameters(";", "=")
        if credentials:
            url += f":{credentials};"
        return url
