from typing import List, Optional

from gerrit_groups.schemas import AccountInfo, GroupInfo, GroupOptionsInfo, GroupOptionsInput
from gerrit_groups.transport import GroupTransport


class GroupApi:
    """
    Handle on a single group.

    The group is read once, when the handle is created. ``get()``, ``name()``
    and ``description()`` answer from that snapshot; mutations go to the
    server but do not update it. Look the group up again to observe changes,
    and do not keep handles around across mutations.
    """

    def __init__(self, transport: GroupTransport, info: GroupInfo) -> None:
        if not info.id:
            raise ValueError("GroupInfo without id cannot back a GroupApi")
        self._transport = transport
        self._info = info

    def __repr__(self) -> str:
        return f"GroupApi(id={self._info.id!r}, name={self._info.name!r})"

    @property
    def id(self) -> str:
        return self._info.id

    def get(self) -> GroupInfo:
        """Return a copy of the group as read at lookup time."""
        return self._info.model_copy(deep=True)

    def detail(self) -> GroupInfo:
        """Read the group again, including members and included groups."""
        return self._transport.get_detail(self.id)

    def name(self) -> Optional[str]:
        return self._info.name

    def rename(self, name: str) -> str:
        return self._transport.put_name(self.id, name)

    def description(self) -> Optional[str]:
        return self._info.description

    def set_description(self, description: Optional[str]) -> Optional[str]:
        """Set the description; ``None`` or an empty string removes it."""
        return self._transport.put_description(self.id, description)

    def owner(self) -> GroupInfo:
        return self._transport.get_owner(self.id)

    def set_owner(self, owner: str) -> GroupInfo:
        return self._transport.put_owner(self.id, owner)

    def options(self) -> GroupOptionsInfo:
        return self._transport.get_options(self.id)

    def set_options(self, options: GroupOptionsInput) -> GroupOptionsInfo:
        return self._transport.put_options(self.id, options)

    def members(self, recursive: bool = False) -> List[AccountInfo]:
        """List direct members, or all members of included groups too when ``recursive``."""
        return self._transport.list_members(self.id, recursive=recursive)

    def add_members(self, *members: str) -> List[AccountInfo]:
        return self._transport.add_members(self.id, members)

    def remove_members(self, *members: str) -> None:
        self._transport.remove_members(self.id, members)

    def included_groups(self) -> List[GroupInfo]:
        return self._transport.list_included_groups(self.id)

    def add_groups(self, *groups: str) -> List[GroupInfo]:
        return self._transport.add_included_groups(self.id, groups)

    def remove_groups(self, *groups: str) -> None:
        self._transport.remove_included_groups(self.id, groups)

    def index(self) -> None:
        self._transport.index(self.id)
