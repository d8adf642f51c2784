"""
Transport layer: turning builder state into REST calls.

``GroupTransport`` is the contract a ``GroupApi`` handle consumes;
``GroupsTransport`` extends it with the calls the facade and the request
builders consume. ``RestGroupsTransport`` implements both on top of
``HTTPClient``.
"""

from typing import Any, Dict, List, Optional, Protocol, Sequence, Tuple, runtime_checkable
from urllib.parse import quote
import logging

from pydantic import ValidationError as PydanticValidationError

from gerrit_groups.exceptions import (
    BadRequestError,
    ConflictError,
    GroupExistsError,
    GroupNotFoundError,
    MalformedResponseError,
    NotFoundError,
)
from gerrit_groups.http import HTTPClient
from gerrit_groups.requests import ListFilterState, QueryFilterState
from gerrit_groups.schemas import (
    AccountInfo,
    DescriptionInput,
    GroupInfo,
    GroupInput,
    GroupOptionsInfo,
    GroupOptionsInput,
    GroupsInput,
    MembersInput,
    NameInput,
    OwnerInput,
)

logger = logging.getLogger(__name__)


@runtime_checkable
class GroupTransport(Protocol):
    """Calls a single-group handle depends on."""

    def get_detail(self, id: str) -> GroupInfo:
        ...

    def put_name(self, id: str, name: str) -> str:
        ...

    def put_description(self, id: str, description: Optional[str]) -> Optional[str]:
        ...

    def get_owner(self, id: str) -> GroupInfo:
        ...

    def put_owner(self, id: str, owner: str) -> GroupInfo:
        ...

    def get_options(self, id: str) -> GroupOptionsInfo:
        ...

    def put_options(self, id: str, options: GroupOptionsInput) -> GroupOptionsInfo:
        ...

    def list_members(self, id: str, recursive: bool = False) -> List[AccountInfo]:
        ...

    def add_members(self, id: str, members: Sequence[str]) -> List[AccountInfo]:
        ...

    def remove_members(self, id: str, members: Sequence[str]) -> None:
        ...

    def list_included_groups(self, id: str) -> List[GroupInfo]:
        ...

    def add_included_groups(self, id: str, groups: Sequence[str]) -> List[GroupInfo]:
        ...

    def remove_included_groups(self, id: str, groups: Sequence[str]) -> None:
        ...

    def index(self, id: str) -> None:
        ...


@runtime_checkable
class GroupsTransport(GroupTransport, Protocol):
    """
    Calls the groups facade and its request builders depend on.

    Handles created by ``GroupsApi.id`` and ``GroupsApi.create`` use the same
    transport, so it also carries the single-group calls.
    """

    def fetch_groups_as_map(self, filters: ListFilterState) -> Dict[str, GroupInfo]:
        ...

    def fetch_groups_as_list(self, filters: QueryFilterState) -> List[GroupInfo]:
        ...

    def resolve_group(self, id: str) -> GroupInfo:
        ...

    def create_group(self, input: GroupInput) -> GroupInfo:
        ...


def encode_id(id: str) -> str:
    """Percent-encode a group identifier for use as one path segment."""
    return quote(id, safe="")


def list_params(filters: ListFilterState) -> List[Tuple[str, Any]]:
    """Serialize list filters into ``GET /groups/`` query parameters."""
    params: List[Tuple[str, Any]] = [("o", option.value) for option in filters.options]
    params.extend(("p", project) for project in filters.projects)
    params.extend(("g", group) for group in filters.groups)
    if filters.visible_to_all:
        params.append(("visible-to-all", "true"))
    if filters.user is not None:
        params.append(("user", filters.user))
    if filters.owned:
        params.append(("owned", "true"))
    if filters.limit > 0:
        params.append(("n", filters.limit))
    if filters.start > 0:
        params.append(("S", filters.start))
    if filters.substring is not None:
        params.append(("m", filters.substring))
    if filters.suggest is not None:
        params.append(("suggest", filters.suggest))
    return params


def query_params(filters: QueryFilterState) -> List[Tuple[str, Any]]:
    """Serialize query state into ``GET /groups/`` query parameters."""
    params: List[Tuple[str, Any]] = []
    if filters.query is not None:
        params.append(("query", filters.query))
    if filters.limit > 0:
        params.append(("limit", filters.limit))
    if filters.start > 0:
        params.append(("start", filters.start))
    params.extend(("o", option.value) for option in filters.options)
    return params


def _parse_group(data: Any) -> GroupInfo:
    if not isinstance(data, dict):
        raise MalformedResponseError(f"Expected a group object, got {type(data).__name__}")
    try:
        return GroupInfo.model_validate(data)
    except PydanticValidationError as e:
        raise MalformedResponseError(f"Invalid group object: {e}")


def _parse_identified_group(data: Any) -> GroupInfo:
    group = _parse_group(data)
    if not group.id:
        raise MalformedResponseError("Group object has no id")
    return group


def _parse_groups(data: Any) -> List[GroupInfo]:
    if not isinstance(data, list):
        raise MalformedResponseError(f"Expected a list of groups, got {type(data).__name__}")
    return [_parse_group(item) for item in data]


def _parse_accounts(data: Any) -> List[AccountInfo]:
    if not isinstance(data, list):
        raise MalformedResponseError(f"Expected a list of accounts, got {type(data).__name__}")
    try:
        return [AccountInfo.model_validate(item) for item in data]
    except PydanticValidationError as e:
        raise MalformedResponseError(f"Invalid account object: {e}")


class RestGroupsTransport:
    """
    Groups transport over the Gerrit REST API.

    Example:
        ```python
        http = HTTPClient("https://review.example.org", username="admin", password="secret")
        transport = RestGroupsTransport(http)
        groups = GroupsApi(transport)
        ```
    """

    def __init__(self, http_client: HTTPClient) -> None:
        self._http = http_client

    @staticmethod
    def _group_path(id: str, *parts: str) -> str:
        path = f"/groups/{encode_id(id)}"
        if parts:
            path += "/" + "/".join(parts)
        return path

    # =========================================================================
    # GroupsTransport
    # =========================================================================

    def fetch_groups_as_map(self, filters: ListFilterState) -> Dict[str, GroupInfo]:
        """
        List groups; the result keeps the server's response order.

        Raises:
            MalformedResponseError: If the body is not a name-keyed object
        """
        data = self._http.get_json("/groups/", params=list_params(filters))
        if not isinstance(data, dict):
            raise MalformedResponseError(f"Expected a map of groups, got {type(data).__name__}")
        return {name: _parse_group(value) for name, value in data.items()}

    def fetch_groups_as_list(self, filters: QueryFilterState) -> List[GroupInfo]:
        data = self._http.get_json("/groups/", params=query_params(filters))
        return _parse_groups(data)

    def resolve_group(self, id: str) -> GroupInfo:
        """
        Read a group by name, UUID or numeric ID.

        Raises:
            GroupNotFoundError: If no visible group matches ``id``
            MalformedResponseError: If the response carries no group id
        """
        try:
            return _parse_identified_group(self._http.get_json(self._group_path(id)))
        except NotFoundError as e:
            raise GroupNotFoundError(id, details=e.details) from e

    def create_group(self, input: GroupInput) -> GroupInfo:
        """
        Create a group named ``input.name``.

        Raises:
            BadRequestError: If ``input`` has no name
            GroupExistsError: If a group with that name already exists
        """
        if not input.name:
            raise BadRequestError("GroupInput must specify name")
        try:
            data = self._http.put_json(self._group_path(input.name), json_data=input)
        except ConflictError as e:
            raise GroupExistsError(input.name, message=e.message, details=e.details) from e
        logger.info(f"Created group: {input.name}")
        return _parse_identified_group(data)

    # =========================================================================
    # Single group resource
    # =========================================================================

    def get_detail(self, id: str) -> GroupInfo:
        return _parse_group(self._http.get_json(self._group_path(id, "detail")))

    def get_name(self, id: str) -> str:
        return self._http.get_json(self._group_path(id, "name"))

    def put_name(self, id: str, name: str) -> str:
        return self._http.put_json(self._group_path(id, "name"), json_data=NameInput(name=name))

    def get_description(self, id: str) -> Optional[str]:
        return self._http.get_json(self._group_path(id, "description"))

    def put_description(self, id: str, description: Optional[str]) -> Optional[str]:
        """Set the description; an empty description deletes it."""
        if not description:
            self._http.delete(self._group_path(id, "description"))
            return None
        return self._http.put_json(
            self._group_path(id, "description"),
            json_data=DescriptionInput(description=description),
        )

    def get_owner(self, id: str) -> GroupInfo:
        return _parse_group(self._http.get_json(self._group_path(id, "owner")))

    def put_owner(self, id: str, owner: str) -> GroupInfo:
        return _parse_group(self._http.put_json(self._group_path(id, "owner"), json_data=OwnerInput(owner=owner)))

    def get_options(self, id: str) -> GroupOptionsInfo:
        data = self._http.get_json(self._group_path(id, "options"))
        if not isinstance(data, dict):
            raise MalformedResponseError(f"Expected group options, got {type(data).__name__}")
        return GroupOptionsInfo.model_validate(data)

    def put_options(self, id: str, options: GroupOptionsInput) -> GroupOptionsInfo:
        data = self._http.put_json(self._group_path(id, "options"), json_data=options)
        if not isinstance(data, dict):
            raise MalformedResponseError(f"Expected group options, got {type(data).__name__}")
        return GroupOptionsInfo.model_validate(data)

    def list_members(self, id: str, recursive: bool = False) -> List[AccountInfo]:
        params = {"recursive": "true"} if recursive else None
        return _parse_accounts(self._http.get_json(self._group_path(id, "members/"), params=params))

    def add_members(self, id: str, members: Sequence[str]) -> List[AccountInfo]:
        data = self._http.post_json(self._group_path(id, "members.add"), json_data=MembersInput(members=list(members)))
        return _parse_accounts(data or [])

    def remove_members(self, id: str, members: Sequence[str]) -> None:
        self._http.post_json(self._group_path(id, "members.delete"), json_data=MembersInput(members=list(members)))

    def list_included_groups(self, id: str) -> List[GroupInfo]:
        return _parse_groups(self._http.get_json(self._group_path(id, "groups/")))

    def add_included_groups(self, id: str, groups: Sequence[str]) -> List[GroupInfo]:
        data = self._http.post_json(self._group_path(id, "groups.add"), json_data=GroupsInput(groups=list(groups)))
        return _parse_groups(data or [])

    def remove_included_groups(self, id: str, groups: Sequence[str]) -> None:
        self._http.post_json(self._group_path(id, "groups.delete"), json_data=GroupsInput(groups=list(groups)))

    def index(self, id: str) -> None:
        self._http.post_json(self._group_path(id, "index"))
