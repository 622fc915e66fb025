"""Favorites (likes) of tweets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .transport import Transport


@dataclass
class FavoriteListParams:
    user_id: int = 0
    screen_name: str = ""
    count: int = 0
    since_id: int = 0
    max_id: int = 0
    include_entities: bool | None = None
    tweet_mode: str = ""


@dataclass
class _TweetIDParams:
    id: int = 0


@dataclass
class FavoriteCreateParams(_TweetIDParams):
    """Parameters for FavoriteService.create."""


@dataclass
class FavoriteDestroyParams(_TweetIDParams):
    """Parameters for FavoriteService.destroy."""


class FavoriteService:
    """Access to the favorites endpoints; tweets are returned as decoded mappings."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport.with_path("favorites/")

    def list(self, params: FavoriteListParams | None = None) -> list[dict[str, Any]]:
        """Return the tweets liked by the specified user."""
        return [dict(tweet) for tweet in self._transport.request("GET", "list.json", query=params) or []]

    def create(self, params: FavoriteCreateParams) -> dict[str, Any]:
        """Like the specified tweet and return it."""
        return self._post("create.json", params)

    def destroy(self, params: FavoriteDestroyParams) -> dict[str, Any]:
        """Un-like the specified tweet and return it."""
        return self._post("destroy.json", params)

    def _post(self, path: str, params: _TweetIDParams) -> dict[str, Any]:
        return dict(self._transport.request("POST", path, query=params) or {})