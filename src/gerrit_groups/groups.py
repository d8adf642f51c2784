"""
Groups facade.

``Groups`` is the entry point for looking up, creating, listing and querying
groups. Each of its operations defaults to raising
``OperationNotImplementedError``, so an implementation overrides only what it
supports and ``supports()`` reports which operations those are. New
operations can be added here without breaking existing implementations.
"""

from typing import Optional, Union

from gerrit_groups.exceptions import OperationNotImplementedError
from gerrit_groups.group_api import GroupApi
from gerrit_groups.requests import ListRequest, QueryRequest
from gerrit_groups.schemas import GroupInput
from gerrit_groups.transport import GroupsTransport


OPERATIONS = ("id", "create", "list", "query")


class Groups:
    """Lookup, creation, listing and querying of groups."""

    def id(self, id: str) -> GroupApi:
        """
        Look up a group by ID.

        The group is read eagerly; the returned handle does not observe later
        mutations. Do not keep handles around across mutations.

        Args:
            id: Any identifier the REST API accepts, including group name or UUID

        Raises:
            ApiError: If the group cannot be resolved
        """
        raise OperationNotImplementedError("id")

    def create(self, group: Union[str, GroupInput]) -> GroupApi:
        """
        Create a new group.

        Args:
            group: A group name (default options) or a full ``GroupInput``

        Raises:
            ApiError: On name conflict or transport failure
        """
        raise OperationNotImplementedError("create")

    def list(self) -> ListRequest:
        """Return a new request for listing groups."""
        raise OperationNotImplementedError("list")

    def query(self, query: Optional[str] = None) -> QueryRequest:
        """
        Return a new request for querying groups.

        ``query("inname:test")`` is shorthand for
        ``query().with_query("inname:test")``.

        Example:
            ``groups.query().with_query("inname:test").with_limit(10).get()``
        """
        raise OperationNotImplementedError("query")

    def supports(self, operation: str) -> bool:
        """Check whether this implementation provides ``operation``."""
        if operation not in OPERATIONS:
            return False
        return getattr(type(self), operation) is not getattr(Groups, operation)


class NotImplementedGroups(Groups):
    """Facade whose every operation raises ``OperationNotImplementedError``."""


class GroupsApi(Groups):
    """
    Groups facade backed by a transport.

    The facade itself sends nothing; lookups and creation go straight to the
    transport, and the request builders receive the transport's fetch calls.
    """

    def __init__(self, transport: GroupsTransport) -> None:
        self._transport = transport

    def id(self, id: str) -> GroupApi:
        return GroupApi(self._transport, self._transport.resolve_group(id))

    def create(self, group: Union[str, GroupInput]) -> GroupApi:
        if isinstance(group, str):
            group = GroupInput(name=group)
        return GroupApi(self._transport, self._transport.create_group(group))

    def list(self) -> ListRequest:
        return ListRequest(self._transport.fetch_groups_as_map)

    def query(self, query: Optional[str] = None) -> QueryRequest:
        request = QueryRequest(self._transport.fetch_groups_as_list)
        if query is not None:
            request.with_query(query)
        return request
