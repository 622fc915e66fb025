"""Lists: the list record, its cursored collections and request parameters."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


def _mapping(data: Mapping[str, Any] | None) -> Mapping[str, Any]:
    return data if data is not None else {}


@dataclass
class List:
    """A list of users; its owner is kept as the decoded user mapping."""

    slug: str = ""
    name: str = ""
    created_at: str = ""
    uri: str = ""
    subscriber_count: int = 0
    id_str: str = ""
    member_count: int = 0
    mode: str = ""
    id: int = 0
    full_name: str = ""
    description: str = ""
    user: dict[str, Any] | None = None
    following: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> List:
        data = _mapping(data)
        user = data.get("user")
        return cls(
            slug=data.get("slug", ""),
            name=data.get("name", ""),
            created_at=data.get("created_at", ""),
            uri=data.get("uri", ""),
            subscriber_count=data.get("subscriber_count", 0),
            id_str=data.get("id_str", ""),
            member_count=data.get("member_count", 0),
            mode=data.get("mode", ""),
            id=data.get("id", 0),
            full_name=data.get("full_name", ""),
            description=data.get("description", ""),
            user=dict(user) if user is not None else None,
            following=bool(data.get("following", False)),
        )


def _cursor_fields(data: Mapping[str, Any]) -> dict[str, Any]:
    return {
        "next_cursor": data.get("next_cursor", 0),
        "next_cursor_str": data.get("next_cursor_str", ""),
        "previous_cursor": data.get("previous_cursor", 0),
        "previous_cursor_str": data.get("previous_cursor_str", ""),
    }


def _users(data: Mapping[str, Any]) -> list[dict[str, Any]]:
    return [dict(u) for u in data.get("users") or []]


def _lists(data: Mapping[str, Any]) -> list[List]:
    return [List.from_dict(item) for item in data.get("lists") or []]


@dataclass
class Members:
    """A cursored collection of list members, kept as decoded user mappings."""

    users: list[dict[str, Any]] = field(default_factory=list)
    next_cursor: int = 0
    next_cursor_str: str = ""
    previous_cursor: int = 0
    previous_cursor_str: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Members:
        data = _mapping(data)
        return cls(users=_users(data), **_cursor_fields(data))


@dataclass
class Membership:
    """A cursored collection of lists a user is on."""

    lists: list[List] = field(default_factory=list)
    next_cursor: int = 0
    next_cursor_str: str = ""
    previous_cursor: int = 0
    previous_cursor_str: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Membership:
        data = _mapping(data)
        return cls(lists=_lists(data), **_cursor_fields(data))


@dataclass
class Ownership:
    """A cursored collection of lists a user owns."""

    lists: list[List] = field(default_factory=list)
    next_cursor: int = 0
    next_cursor_str: str = ""
    previous_cursor: int = 0
    previous_cursor_str: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Ownership:
        data = _mapping(data)
        return cls(lists=_lists(data), **_cursor_fields(data))


@dataclass
class Subscribers:
    """A cursored collection of users subscribed to a list."""

    users: list[dict[str, Any]] = field(default_factory=list)
    next_cursor: int = 0
    next_cursor_str: str = ""
    previous_cursor: int = 0
    previous_cursor_str: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Subscribers:
        data = _mapping(data)
        return cls(users=_users(data), **_cursor_fields(data))


@dataclass
class Subscribed:
    """A cursored collection of lists a user is subscribed to."""

    lists: list[List] = field(default_factory=list)
    next_cursor: int = 0
    next_cursor_str: str = ""
    previous_cursor: int = 0
    previous_cursor_str: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> Subscribed:
        data = _mapping(data)
        return cls(lists=_lists(data), **_cursor_fields(data))


@dataclass
class ListsListParams:
    user_id: int = 0
    screen_name: str = ""
    reverse: bool = field(default=False, metadata={"omit_false": True})


@dataclass
class ListsMembersParams:
    list_id: int = 0
    slug: str = ""
    owner_screen_name: str = ""
    owner_id: int = 0
    count: int = 0
    cursor: int = 0
    include_entities: bool | None = None
    skip_status: bool | None = None


@dataclass
class ListsMembersShowParams:
    list_id: int = 0
    slug: str = ""
    user_id: int = 0
    screen_name: str = ""
    owner_screen_name: str = ""
    owner_id: int = 0
    include_entities: bool | None = None
    skip_status: bool | None = None


@dataclass
class ListsMembershipsParams:
    user_id: int = 0
    screen_name: str = ""
    count: int = 0
    cursor: int = 0
    filter_to_owned_lists: bool | None = None


@dataclass
class ListsOwnershipsParams:
    user_id: int = 0
    screen_name: str = ""
    count: int = 0
    cursor: int = 0


@dataclass
class ListsShowParams:
    list_id: int = 0
    slug: str = ""
    owner_screen_name: str = ""
    owner_id: int = 0


@dataclass
class ListsStatusesParams:
    list_id: int = 0
    slug: str = ""
    owner_screen_name: str = ""
    owner_id: int = 0
    since_id: int = 0
    max_id: int = 0
    count: int = 0
    include_entities: bool | None = None
    include_retweets: bool | None = field(default=None, metadata={"key": "include_rts"})


@dataclass
class ListsSubscribersParams:
    list_id: int = 0
    slug: str = ""
    owner_screen_name: str = ""
    owner_id: int = 0
    count: int = 0
    cursor: int = 0
    include_entities: bool | None = None
    skip_status: bool | None = None


@dataclass
class ListsSubscribersShowParams:
    owner_screen_name: str = ""
    owner_id: int = 0
    list_id: int = 0
    slug: str = ""
    user_id: int = 0
    screen_name: str = ""
    include_entities: bool | None = None
    skip_status: bool | None = None


@dataclass
class ListsSubscriptionsParams:
    user_id: int = 0
    screen_name: str = ""
    count: int = 0
    cursor: int = 0


@dataclass
class ListsCreateParams:
    name: str = ""
    mode: str = ""
    description: str = ""


@dataclass
class ListsDestroyParams:
    owner_screen_name: str = ""
    owner_id: int = 0
    list_id: int = 0
    slug: str = ""


@dataclass
class ListsMembersCreateParams:
    list_id: int = 0
    slug: str = ""
    user_id: int = 0
    screen_name: str = ""
    owner_screen_name: str = ""
    owner_id: int = 0


@dataclass
class ListsMembersCreateAllParams:
    """Several members at once: user ids and screen names are comma separated."""

    list_id: int = 0
    slug: str = ""
    user_id: str = ""
    screen_name: str = ""
    owner_screen_name: str = ""
    owner_id: int = 0


@dataclass
class ListsMembersDestroyParams:
    list_id: int = 0
    slug: str = ""
    user_id: int = 0
    screen_name: str = ""
    owner_screen_name: str = ""
    owner_id: int = 0


@dataclass
class ListsMembersDestroyAllParams:
    """Several members at once: user ids and screen names are comma separated."""

    list_id: int = 0
    slug: str = ""
    user_id: str = ""
    screen_name: str = ""
    owner_screen_name: str = ""
    owner_id: int = 0


@dataclass
class ListsSubscribersCreateParams:
    owner_screen_name: str = ""
    owner_id: int = 0
    list_id: int = 0
    slug: str = ""


@dataclass
class ListsSubscribersDestroyParams:
    list_id: int = 0
    slug: str = ""
    owner_screen_name: str = ""
    owner_id: int = 0


@dataclass
class ListsUpdateParams:
    list_id: int = 0
    slug: str = ""
    name: str = ""
    mode: str = ""
    description: str = ""
    owner_screen_name: str = ""
    owner_id: int = 0