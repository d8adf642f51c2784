"""
Gerrit Groups Client.

A typed client for listing, querying, looking up and creating groups on a
Gerrit code-review server.

Example usage:
    ```python
    from gerrit_groups import GerritClient, ListGroupsOption

    with GerritClient(base_url="https://review.example.org") as client:
        groups = (
            client.groups.list()
            .with_project("demo")
            .add_option(ListGroupsOption.MEMBERS)
            .get()
        )
        matches = client.groups.query("inname:test").with_limit(10).get()
    ```
"""

__version__ = "0.1.0"

# Main client
from gerrit_groups.client import GerritClient

# Configuration
from gerrit_groups.config import (
    GerritSettings,
    get_gerrit_settings,
    configure_gerrit_settings,
    reset_gerrit_settings,
)

# Facade, builders and handle
from gerrit_groups.groups import Groups, GroupsApi, NotImplementedGroups
from gerrit_groups.requests import ListFilterState, ListRequest, QueryFilterState, QueryRequest
from gerrit_groups.group_api import GroupApi

# Transport
from gerrit_groups.http import HTTPClient
from gerrit_groups.transport import GroupTransport, GroupsTransport, RestGroupsTransport

# Schemas
from gerrit_groups.schemas import (
    AccountInfo,
    GroupInfo,
    GroupInput,
    GroupOptionsInfo,
    GroupOptionsInput,
    ListGroupsOption,
)

# Exceptions
from gerrit_groups.exceptions import (
    ApiError,
    OperationNotImplementedError,
    BadRequestError,
    MethodNotAllowedError,
    UnprocessableEntityError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    GroupNotFoundError,
    ConflictError,
    GroupExistsError,
    RateLimitError,
    ServerError,
    ServiceUnavailableError,
    NetworkError,
    TimeoutError,
    ConnectionError,
    MalformedResponseError,
    exception_from_response,
)

__all__ = [
    # Version
    "__version__",
    # Main client
    "GerritClient",
    # Configuration
    "GerritSettings",
    "get_gerrit_settings",
    "configure_gerrit_settings",
    "reset_gerrit_settings",
    # Facade, builders and handle
    "Groups",
    "GroupsApi",
    "NotImplementedGroups",
    "ListFilterState",
    "ListRequest",
    "QueryFilterState",
    "QueryRequest",
    "GroupApi",
    # Transport
    "HTTPClient",
    "GroupTransport",
    "GroupsTransport",
    "RestGroupsTransport",
    # Schemas
    "AccountInfo",
    "GroupInfo",
    "GroupInput",
    "GroupOptionsInfo",
    "GroupOptionsInput",
    "ListGroupsOption",
    # Exceptions
    "ApiError",
    "OperationNotImplementedError",
    "BadRequestError",
    "MethodNotAllowedError",
    "UnprocessableEntityError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "GroupNotFoundError",
    "ConflictError",
    "GroupExistsError",
    "RateLimitError",
    "ServerError",
    "ServiceUnavailableError",
    "NetworkError",
    "TimeoutError",
    "ConnectionError",
    "MalformedResponseError",
    "exception_from_response",
]
