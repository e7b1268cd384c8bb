"""Addressable resources a query runs against, and the identities and contexts around them."""

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, slots=True)
class Org:
    name: str


@dataclass(frozen=True, slots=True)
class AuthIdUser:
    """An authenticated user."""

    name: str

    def display(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.display()


@dataclass(frozen=True, slots=True)
class AuthIdUnknown:
    """Identity used when the host did not report a user."""

    def display(self) -> str:
        return "unknown"

    def __str__(self) -> str:
        return self.display()


AuthId = AuthIdUser | AuthIdUnknown


@dataclass(frozen=True, slots=True)
class Session:
    """A session property, optionally pinned to a value."""

    category: ClassVar[str] = "session"

    property: str | None = None
    value: str | None = None

    @classmethod
    def any_property(cls) -> "Session":
        return cls()

    def display(self) -> str:
        if self.property is None:
            return "any-property"
        if self.value is None:
            return f"property:{self.property}"
        return f"property:{self.property}={self.value}"

    def __str__(self) -> str:
        return self.display()


@dataclass(frozen=True, slots=True)
class Catalog:
    category: ClassVar[str] = "catalog"

    name: str

    def display(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.display()


@dataclass(frozen=True, slots=True)
class Schema:
    category: ClassVar[str] = "schema"

    name: str
    catalog: Catalog

    def display(self) -> str:
        return f"{self.catalog.display()}.{self.name}"

    def __str__(self) -> str:
        return self.display()


@dataclass(frozen=True, slots=True)
class Table:
    category: ClassVar[str] = "table"

    name: str
    schema: Schema

    def display(self) -> str:
        return f"{self.schema.display()}.{self.name}"

    def __str__(self) -> str:
        return self.display()


@dataclass(frozen=True, slots=True)
class Column:
    category: ClassVar[str] = "column"

    name: str
    table: Table

    def display(self) -> str:
        return f"{self.table.display()}.{self.name}"

    def __str__(self) -> str:
        return self.display()


@dataclass(frozen=True, slots=True)
class RowSet:
    """The rows of a table, addressed as a whole."""

    category: ClassVar[str] = "record"

    table: Table

    def display(self) -> str:
        return self.table.display()

    def __str__(self) -> str:
        return self.display()


@dataclass(frozen=True, slots=True)
class Function:
    category: ClassVar[str] = "function"

    name: str

    def display(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.display()


@dataclass(frozen=True, slots=True)
class Procedure:
    category: ClassVar[str] = "procedure"

    name: str

    def display(self) -> str:
        return self.name

    def __str__(self) -> str:
        return self.display()


@dataclass(frozen=True, slots=True)
class Query:
    """A query resource against which a user's access may be evaluated.

    The presence of the id and/or the owner determines the scope:
    - id and owner: a specific query owned by a specific user
    - id only: a specific query with an unknown owner
    - owner only: any query owned by a specific user
    - neither: any query owned by any user
    """

    category: ClassVar[str] = "query"

    id: str | None = None
    owner: AuthId | None = None

    @classmethod
    def any(cls) -> "Query":
        return cls()

    @classmethod
    def for_owner(cls, owner: str, query_id: str | None = None) -> "Query":
        return cls(id=query_id, owner=AuthIdUser(owner))

    def display(self) -> str:
        query_id = self.id if self.id is not None else "any_query"
        owner = self.owner.display() if self.owner is not None else "any_user"
        return f"{query_id}@{owner}"

    def __str__(self) -> str:
        return self.display()


@dataclass(frozen=True, slots=True)
class SystemInfo:
    category: ClassVar[str] = "system-info"

    def display(self) -> str:
        return "any"

    def __str__(self) -> str:
        return self.display()


@dataclass(frozen=True, slots=True)
class UnknownResource:
    category: ClassVar[str] = "unknown"

    def display(self) -> str:
        return "unknown-resource"

    def __str__(self) -> str:
        return self.display()


Resource = (
    Session
    | Catalog
    | Schema
    | Table
    | Column
    | RowSet
    | Function
    | Procedure
    | Query
    | SystemInfo
    | UnknownResource
)

SYSTEM_INFO = SystemInfo()
UNKNOWN_RESOURCE = UnknownResource()


@dataclass(frozen=True, slots=True)
class NamedCluster:
    name: str


@dataclass(frozen=True, slots=True)
class UnknownCluster:
    name: str = "UNKNOWN"


ClusterContext = NamedCluster | UnknownCluster


@dataclass(frozen=True, slots=True)
class PluginContext:
    """Which plugin of the host a log record originates from."""

    name: str

    @classmethod
    def for_name(cls, plugin_name: str) -> "PluginContext":
        if plugin_name in (AUTH_PLUGIN.name, EVENTS_PLUGIN.name):
            return cls(plugin_name)
        return UNKNOWN_PLUGIN


UNKNOWN_PLUGIN = PluginContext("trino-plugins")
LOCAL_PLUGIN = PluginContext("trino-local")
AUTH_PLUGIN = PluginContext("trino-auth")
EVENTS_PLUGIN = PluginContext("trino-events")


@dataclass(frozen=True, slots=True)
class NamedOrg:
    org: Org

    @property
    def name(self) -> str:
        return self.org.name


@dataclass(frozen=True, slots=True)
class NoOrg:
    name: str = "NONE"


OrgContext = NamedOrg | NoOrg
