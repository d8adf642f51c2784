"""
Request builders for listing and querying groups.

A builder is plain, single-owner mutable state plus the fetch callable it was
created with. Setters return the builder itself so calls can be chained;
the terminal ``get()`` takes a frozen snapshot of the state (``state()``)
and hands it to the fetcher. Builders are not thread-safe.

``get()`` may be called more than once, also after further setter calls;
every call issues a new request with the state current at that moment.

Example:
    ```python
    groups = client.groups.list().with_project("demo").add_option("MEMBERS").get()
    matches = client.groups.query("inname:test").with_limit(10).get()
    ```
"""

from collections.abc import Set as AbstractSet
from typing import Callable, FrozenSet, Iterable, List, Mapping, Optional, Sequence, Set, Tuple, Union
import logging

from pydantic import BaseModel, ConfigDict

from gerrit_groups.schemas import GroupInfo, ListGroupsOption, OptionLike, ordered_options, to_option

logger = logging.getLogger(__name__)


class ListFilterState(BaseModel):
    """Snapshot of everything a ``ListRequest`` has accumulated."""

    options: Tuple[ListGroupsOption, ...] = ()
    projects: Tuple[str, ...] = ()
    groups: Tuple[str, ...] = ()
    visible_to_all: bool = False
    user: Optional[str] = None
    owned: bool = False
    limit: int = 0
    start: int = 0
    substring: Optional[str] = None
    suggest: Optional[str] = None

    model_config = ConfigDict(frozen=True)


class QueryFilterState(BaseModel):
    """Snapshot of everything a ``QueryRequest`` has accumulated."""

    query: Optional[str] = None
    limit: int = 0
    start: int = 0
    options: Tuple[ListGroupsOption, ...] = ()

    model_config = ConfigDict(frozen=True)


ListFetcher = Callable[[ListFilterState], Mapping[str, GroupInfo]]
QueryFetcher = Callable[[QueryFilterState], Sequence[GroupInfo]]


def _flatten_options(items: Iterable[Union[OptionLike, Iterable[OptionLike]]]) -> List[ListGroupsOption]:
    flat: List[ListGroupsOption] = []
    for item in items:
        # ListGroupsOption and str are iterable themselves; check them first
        if isinstance(item, str):
            flat.append(to_option(item))
        else:
            flat.extend(to_option(option) for option in item)
    return flat


class ListRequest:
    """
    Builder for ``GET /groups/``.

    The list endpoint answers with a map keyed by group name whose values
    carry no ``name``. ``get()`` puts each key back into its value and
    returns the groups in the order of the map.
    """

    def __init__(self, fetcher: ListFetcher):
        self._fetch = fetcher
        self._options: Set[ListGroupsOption] = set()
        self._projects: List[str] = []
        self._groups: List[str] = []
        self._visible_to_all = False
        self._user: Optional[str] = None
        self._owned = False
        self._limit = 0
        self._start = 0
        self._substring: Optional[str] = None
        self._suggest: Optional[str] = None

    def get(self) -> Tuple[GroupInfo, ...]:
        """
        Execute the request and return the groups as an ordered tuple.

        Raises:
            ApiError: Propagated unchanged from the transport
        """
        groups = self.get_as_map()
        result = []
        for name, info in groups.items():
            # The server leaves the name out of map values
            info.name = name
            result.append(info)
        logger.debug(f"Listed {len(result)} groups")
        return tuple(result)

    def get_as_map(self) -> Mapping[str, GroupInfo]:
        """
        Execute the request and return the raw name-keyed mapping.

        Raises:
            ApiError: Propagated unchanged from the transport
        """
        return self._fetch(self.state())

    def state(self) -> ListFilterState:
        """Return a frozen snapshot of the current filter state."""
        return ListFilterState(
            options=ordered_options(self._options),
            projects=tuple(self._projects),
            groups=tuple(self._groups),
            visible_to_all=self._visible_to_all,
            user=self._user,
            owned=self._owned,
            limit=self._limit,
            start=self._start,
            substring=self._substring,
            suggest=self._suggest,
        )

    def add_option(self, option: OptionLike) -> "ListRequest":
        self._options.add(to_option(option))
        return self

    def add_options(self, *options: Union[OptionLike, Iterable[OptionLike]]) -> "ListRequest":
        """Add options given one by one, as iterables, or mixed."""
        self._options.update(_flatten_options(options))
        return self

    def with_project(self, project: str) -> "ListRequest":
        """Restrict to groups owning ``project``; repeatable."""
        self._projects.append(project)
        return self

    def add_group(self, uuid: str) -> "ListRequest":
        self._groups.append(uuid)
        return self

    def with_visible_to_all(self, visible: bool) -> "ListRequest":
        self._visible_to_all = visible
        return self

    def with_user(self, user: Optional[str]) -> "ListRequest":
        self._user = user
        return self

    def with_owned(self, owned: bool) -> "ListRequest":
        self._owned = owned
        return self

    def with_limit(self, limit: int) -> "ListRequest":
        self._limit = limit
        return self

    def with_start(self, start: int) -> "ListRequest":
        self._start = start
        return self

    def with_substring(self, substring: Optional[str]) -> "ListRequest":
        self._substring = substring
        return self

    def with_suggest(self, suggest: Optional[str]) -> "ListRequest":
        self._suggest = suggest
        return self

    @property
    def options(self) -> FrozenSet[ListGroupsOption]:
        return frozenset(self._options)

    @property
    def projects(self) -> Tuple[str, ...]:
        return tuple(self._projects)

    @property
    def groups(self) -> Tuple[str, ...]:
        return tuple(self._groups)

    @property
    def visible_to_all(self) -> bool:
        return self._visible_to_all

    @property
    def user(self) -> Optional[str]:
        return self._user

    @property
    def owned(self) -> bool:
        return self._owned

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def start(self) -> int:
        return self._start

    @property
    def substring(self) -> Optional[str]:
        return self._substring

    @property
    def suggest(self) -> Optional[str]:
        return self._suggest


class QueryRequest:
    """
    Builder for group queries, e.g. ``inname:test``.

    The query endpoint returns a list with names filled in, so ``get()``
    passes the transport's result through unchanged.
    """

    def __init__(self, fetcher: QueryFetcher):
        self._fetch = fetcher
        self._query: Optional[str] = None
        self._limit = 0
        self._start = 0
        self._options: Set[ListGroupsOption] = set()

    def get(self) -> Tuple[GroupInfo, ...]:
        """
        Execute the query and return the matched groups.

        Raises:
            ApiError: Propagated unchanged from the transport
        """
        return tuple(self._fetch(self.state()))

    def state(self) -> QueryFilterState:
        """Return a frozen snapshot of the current query state."""
        return QueryFilterState(
            query=self._query,
            limit=self._limit,
            start=self._start,
            options=ordered_options(self._options),
        )

    def with_query(self, query: Optional[str]) -> "QueryRequest":
        """
        Set the query.

        Args:
            query: Query in human-readable form, e.g. ``inname:test``
        """
        self._query = query
        return self

    def with_limit(self, limit: int) -> "QueryRequest":
        """Set the maximum number of groups; 0 uses the server default."""
        self._limit = limit
        return self

    def with_start(self, start: int) -> "QueryRequest":
        """Set the number of groups to skip; 0 skips none."""
        self._start = start
        return self

    def with_option(self, option: OptionLike) -> "QueryRequest":
        self._options.add(to_option(option))
        return self

    def with_options(self, *options: Union[OptionLike, AbstractSet]) -> "QueryRequest":
        """
        Add options, or replace them all.

        A single ``set``/``frozenset`` argument replaces the current options
        with exactly its members. Any other arguments are merged in.
        """
        if len(options) == 1 and isinstance(options[0], AbstractSet):
            self._options = {to_option(option) for option in options[0]}
        else:
            self._options.update(_flatten_options(options))
        return self

    @property
    def query(self) -> Optional[str]:
        return self._query

    @property
    def limit(self) -> int:
        return self._limit

    @property
    def start(self) -> int:
        return self._start

    @property
    def options(self) -> FrozenSet[ListGroupsOption]:
        return frozenset(self._options)
