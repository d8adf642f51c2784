"""Pytest configuration and fixtures for gerrit-groups tests."""

import json
from typing import Any, Dict, List, Optional, Sequence

import httpx
import pytest
import respx

from gerrit_groups.http import HTTPClient
from gerrit_groups.requests import ListFilterState, QueryFilterState
from gerrit_groups.schemas import AccountInfo, GroupInfo, GroupInput, GroupOptionsInfo, GroupOptionsInput
from gerrit_groups.transport import RestGroupsTransport


# ============================================================================
# Stub Transport
# ============================================================================


class StubTransport:
    """In-memory transport recording every call it receives."""

    def __init__(
        self,
        groups_map: Optional[Dict[str, Dict[str, Any]]] = None,
        groups_list: Optional[List[Dict[str, Any]]] = None,
        error: Optional[Exception] = None,
    ):
        self.groups_map = groups_map or {}
        self.groups_list = groups_list or []
        self.error = error
        self.calls: List[tuple] = []

    def _maybe_fail(self) -> None:
        if self.error is not None:
            raise self.error

    def fetch_groups_as_map(self, filters: ListFilterState) -> Dict[str, GroupInfo]:
        self.calls.append(("fetch_groups_as_map", filters))
        self._maybe_fail()
        return {name: GroupInfo.model_validate(data) for name, data in self.groups_map.items()}

    def fetch_groups_as_list(self, filters: QueryFilterState) -> List[GroupInfo]:
        self.calls.append(("fetch_groups_as_list", filters))
        self._maybe_fail()
        return [GroupInfo.model_validate(data) for data in self.groups_list]

    def resolve_group(self, id: str) -> GroupInfo:
        self.calls.append(("resolve_group", id))
        self._maybe_fail()
        return GroupInfo(id=f"uuid-{id}", name=id)

    def create_group(self, input: GroupInput) -> GroupInfo:
        self.calls.append(("create_group", input))
        self._maybe_fail()
        return GroupInfo(id=f"uuid-{input.name}", name=input.name, description=input.description)

    def get_detail(self, id: str) -> GroupInfo:
        self.calls.append(("get_detail", id))
        self._maybe_fail()
        return GroupInfo(id=id, members=[], includes=[])

    def put_name(self, id: str, name: str) -> str:
        self.calls.append(("put_name", id, name))
        self._maybe_fail()
        return name

    def put_description(self, id: str, description: Optional[str]) -> Optional[str]:
        self.calls.append(("put_description", id, description))
        self._maybe_fail()
        return description or None

    def get_owner(self, id: str) -> GroupInfo:
        self.calls.append(("get_owner", id))
        self._maybe_fail()
        return GroupInfo(id="uuid-Administrators", name="Administrators")

    def put_owner(self, id: str, owner: str) -> GroupInfo:
        self.calls.append(("put_owner", id, owner))
        self._maybe_fail()
        return GroupInfo(id=f"uuid-{owner}", name=owner)

    def get_options(self, id: str) -> GroupOptionsInfo:
        self.calls.append(("get_options", id))
        self._maybe_fail()
        return GroupOptionsInfo(visible_to_all=False)

    def put_options(self, id: str, options: GroupOptionsInput) -> GroupOptionsInfo:
        self.calls.append(("put_options", id, options))
        self._maybe_fail()
        return GroupOptionsInfo(visible_to_all=options.visible_to_all)

    def list_members(self, id: str, recursive: bool = False) -> List[AccountInfo]:
        self.calls.append(("list_members", id, recursive))
        self._maybe_fail()
        return []

    def add_members(self, id: str, members: Sequence[str]) -> List[AccountInfo]:
        self.calls.append(("add_members", id, tuple(members)))
        self._maybe_fail()
        return [AccountInfo(username=member) for member in members]

    def remove_members(self, id: str, members: Sequence[str]) -> None:
        self.calls.append(("remove_members", id, tuple(members)))
        self._maybe_fail()

    def list_included_groups(self, id: str) -> List[GroupInfo]:
        self.calls.append(("list_included_groups", id))
        self._maybe_fail()
        return []

    def add_included_groups(self, id: str, groups: Sequence[str]) -> List[GroupInfo]:
        self.calls.append(("add_included_groups", id, tuple(groups)))
        self._maybe_fail()
        return [GroupInfo(id=f"uuid-{group}", name=group) for group in groups]

    def remove_included_groups(self, id: str, groups: Sequence[str]) -> None:
        self.calls.append(("remove_included_groups", id, tuple(groups)))
        self._maybe_fail()

    def index(self, id: str) -> None:
        self.calls.append(("index", id))
        self._maybe_fail()


def gerrit_json(data: Any) -> str:
    """Serialize ``data`` the way Gerrit does, with the anti-XSSI prefix."""
    return ")]}'\n" + json.dumps(data)


def gerrit_response(data: Any, status_code: int = 200) -> httpx.Response:
    """Build a JSON response with the anti-XSSI prefix."""
    return httpx.Response(
        status_code,
        text=gerrit_json(data),
        headers={"Content-Type": "application/json; charset=UTF-8"},
    )


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def stub_transport():
    """Stub transport returning two groups keyed by name, without names."""
    return StubTransport(
        groups_map={
            "alice": {"id": "u1", "name": None},
            "bob": {"id": "u2", "name": None},
        },
        groups_list=[
            {"id": "u3", "name": "test-reviewers"},
            {"id": "u4", "name": "test-owners"},
        ],
    )


@pytest.fixture
def base_url():
    """Default base URL for testing."""
    return "http://gerrit.test"


@pytest.fixture
def http_client(base_url):
    """Anonymous HTTP client."""
    client = HTTPClient(base_url=base_url)
    yield client
    client.close()


@pytest.fixture
def authenticated_http_client(base_url):
    """HTTP client using basic authentication (``/a`` prefix)."""
    client = HTTPClient(base_url=base_url, username="admin", password="secret")
    yield client
    client.close()


@pytest.fixture
def rest_transport(http_client):
    """REST transport over the anonymous HTTP client."""
    return RestGroupsTransport(http_client)


@pytest.fixture
def respx_mock(base_url):
    """respx router intercepting requests to the test server."""
    with respx.mock(base_url=base_url, assert_all_called=False) as router:
        yield router


@pytest.fixture
def group_data():
    """Group entity as the server returns it."""
    return {
        "id": "6a1e70e1a88782771a91808c8af9bbb7a9871389",
        "url": "#/admin/groups/uuid-6a1e70e1a88782771a91808c8af9bbb7a9871389",
        "options": {"visible_to_all": False},
        "description": "Group for reviewers",
        "group_id": 7,
        "owner": "Administrators",
        "owner_id": "59b0d3e3fd2a1f7ae6d1b9e8f0b8d2c6a8c1e0f4",
        "created_on": "2026-02-03 10:11:12.000000000",
        "name": "reviewers",
    }
