from enum import Enum
from typing import Iterable, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field


class ListGroupsOption(str, Enum):
    """Display options controlling how much detail group entities carry."""

    MEMBERS = "MEMBERS"
    INCLUDES = "INCLUDES"


OptionLike = Union[ListGroupsOption, str]


def to_option(value: OptionLike) -> ListGroupsOption:
    """Coerce an option member or its name to a ``ListGroupsOption``."""
    if isinstance(value, ListGroupsOption):
        return value
    return ListGroupsOption(value.upper())


def ordered_options(options: Iterable[ListGroupsOption]) -> Tuple[ListGroupsOption, ...]:
    """Return ``options`` in declaration order, so serialized requests are reproducible."""
    chosen = set(options)
    return tuple(option for option in ListGroupsOption if option in chosen)


class AccountInfo(BaseModel):
    account_id: Optional[int] = Field(None, alias="_account_id", description="Numeric account ID")
    name: Optional[str] = Field(None, description="Full name")
    email: Optional[str] = Field(None, description="Preferred email address")
    username: Optional[str] = Field(None, description="Username")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class GroupOptionsInfo(BaseModel):
    visible_to_all: Optional[bool] = Field(None, description="Whether the group is visible to all registered users")

    model_config = ConfigDict(extra="ignore")


class GroupOptionsInput(BaseModel):
    visible_to_all: Optional[bool] = Field(None, description="Whether the group should be visible to all registered users")


class GroupInfo(BaseModel):
    id: Optional[str] = Field(None, description="URL encoded group UUID")
    name: Optional[str] = Field(None, description="Group name")
    url: Optional[str] = Field(None, description="URL to information about the group")
    options: Optional[GroupOptionsInfo] = Field(None, description="Group options")
    description: Optional[str] = Field(None, description="Group description")
    group_id: Optional[int] = Field(None, description="Numeric group ID (internal groups only)")
    owner: Optional[str] = Field(None, description="Name of the owner group")
    owner_id: Optional[str] = Field(None, description="URL encoded UUID of the owner group")
    created_on: Optional[str] = Field(None, description="Creation timestamp")
    more_groups: Optional[bool] = Field(
        None,
        alias="_more_groups",
        description="Set on the last entry when the result was truncated by a limit",
    )
    members: Optional[List[AccountInfo]] = Field(None, description="Direct members (MEMBERS option)")
    includes: Optional[List["GroupInfo"]] = Field(None, description="Directly included groups (INCLUDES option)")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class GroupInput(BaseModel):
    name: Optional[str] = Field(None, description="Group name")
    uuid: Optional[str] = Field(None, description="Group UUID")
    description: Optional[str] = Field(None, description="Group description")
    visible_to_all: Optional[bool] = Field(None, description="Whether the group is visible to all registered users")
    owner_id: Optional[str] = Field(None, description="UUID of the owner group")
    members: Optional[List[str]] = Field(None, description="Accounts to add as initial members")


class NameInput(BaseModel):
    name: str


class DescriptionInput(BaseModel):
    description: Optional[str] = None


class OwnerInput(BaseModel):
    owner: str


class MembersInput(BaseModel):
    members: List[str]


class GroupsInput(BaseModel):
    groups: List[str]


GroupInfo.model_rebuild()
