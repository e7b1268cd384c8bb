"""Domain models for query stages, resources and log decisions."""

from query_event_alert.domain.models import (
    FailureInfo,
    LogDecision,
    Notification,
    QueryEnd,
    QueryInfo,
    QuerySplit,
    QueryStage,
    QueryStart,
    Severity,
    TimeInfo,
)
from query_event_alert.domain.resources import (
    AUTH_PLUGIN,
    EVENTS_PLUGIN,
    LOCAL_PLUGIN,
    SYSTEM_INFO,
    UNKNOWN_PLUGIN,
    UNKNOWN_RESOURCE,
    AuthId,
    AuthIdUnknown,
    AuthIdUser,
    Catalog,
    ClusterContext,
    Column,
    Function,
    NamedCluster,
    NamedOrg,
    NoOrg,
    Org,
    OrgContext,
    PluginContext,
    Procedure,
    Query,
    Resource,
    RowSet,
    Schema,
    Session,
    SystemInfo,
    Table,
    UnknownCluster,
    UnknownResource,
)

__all__ = [
    "FailureInfo",
    "LogDecision",
    "Notification",
    "QueryEnd",
    "QueryInfo",
    "QuerySplit",
    "QueryStage",
    "QueryStart",
    "Severity",
    "TimeInfo",
    "AUTH_PLUGIN",
    "EVENTS_PLUGIN",
    "LOCAL_PLUGIN",
    "SYSTEM_INFO",
    "UNKNOWN_PLUGIN",
    "UNKNOWN_RESOURCE",
    "AuthId",
    "AuthIdUnknown",
    "AuthIdUser",
    "Catalog",
    "ClusterContext",
    "Column",
    "Function",
    "NamedCluster",
    "NamedOrg",
    "NoOrg",
    "Org",
    "OrgContext",
    "PluginContext",
    "Procedure",
    "Query",
    "Resource",
    "RowSet",
    "Schema",
    "Session",
    "SystemInfo",
    "Table",
    "UnknownCluster",
    "UnknownResource",
]
