"""Access to the list endpoints."""

from __future__ import annotations

import builtins
import dataclasses
from typing import Any

from .errors import APIError
from .list_models import (
    List,
    ListsCreateParams,
    ListsDestroyParams,
    ListsListParams,
    ListsMembersCreateAllParams,
    ListsMembersCreateParams,
    ListsMembersDestroyAllParams,
    ListsMembersDestroyParams,
    ListsMembershipsParams,
    ListsMembersParams,
    ListsMembersShowParams,
    ListsOwnershipsParams,
    ListsShowParams,
    ListsStatusesParams,
    ListsSubscribersCreateParams,
    ListsSubscribersDestroyParams,
    ListsSubscribersParams,
    ListsSubscribersShowParams,
    ListsSubscriptionsParams,
    ListsUpdateParams,
    Members,
    Membership,
    Ownership,
    Subscribed,
    Subscribers,
)
from .transport import Transport


class ListsService:
    """Access to the list endpoints; users and tweets are returned as decoded mappings.

    The member, subscriber and update actions do not report error details
    sent back by the API; only transport failures are raised from them.
    """

    def __init__(self, transport: Transport) -> None:
        self._transport = transport.with_path("lists/")

    def _get(self, path: str, params: Any) -> Any:
        return self._transport.request("GET", path, query=params)

    def _post_form(self, path: str, params: Any) -> Any:
        return self._transport.request("POST", path, form=params)

    def _post_form_quiet(self, path: str, params: Any) -> Any:
        try:
            return self._post_form(path, params)
        except APIError:
            return None

    def list(self, params: ListsListParams | None = None) -> builtins.list[List]:
        """Return all lists the user subscribes to, including their own."""
        payload = self._get("list.json", params)
        return [List.from_dict(item) for item in payload or []]

    def members(self, params: ListsMembersParams | None = None) -> Members:
        """Return the members of the specified list."""
        return Members.from_dict(self._get("members.json", params))

    def members_show(self, params: ListsMembersShowParams) -> dict[str, Any]:
        """Return the user if they are a member of the specified list."""
        return dict(self._get("members/show.json", params) or {})

    def memberships(self, params: ListsMembershipsParams | None = None) -> Membership:
        """Return the lists the specified user has been added to."""
        return Membership.from_dict(self._get("memberships.json", params))

    def ownerships(self, params: ListsOwnershipsParams | None = None) -> Ownership:
        """Return the lists owned by the specified user."""
        return Ownership.from_dict(self._get("ownerships.json", params))

    def show(self, params: ListsShowParams) -> List:
        """Return the specified list."""
        return List.from_dict(self._get("show.json", params))

    def statuses(self, params: ListsStatusesParams) -> builtins.list[dict[str, Any]]:
        """Return a timeline of tweets authored by members of the list."""
        payload = self._get("statuses.json", params)
        return [dict(tweet) for tweet in payload or []]

    def subscribers(self, params: ListsSubscribersParams) -> Subscribers:
        """Return the subscribers of the specified list."""
        return Subscribers.from_dict(self._get("subscribers.json", params))

    def subscribers_show(self, params: ListsSubscribersShowParams) -> dict[str, Any]:
        """Return the user if they subscribe to the specified list."""
        return dict(self._get("subscribers/show.json", params) or {})

    def subscriptions(self, params: ListsSubscriptionsParams | None = None) -> Subscribed:
        """Return the lists the specified user is subscribed to."""
        return Subscribed.from_dict(self._get("subscriptions.json", params))

    def create(self, name: str, params: ListsCreateParams | None = None) -> List:
        """Create a new list named ``name`` for the authenticated user."""
        form = dataclasses.replace(params or ListsCreateParams(), name=name)
        return List.from_dict(self._post_form("create.json", form))

    def destroy(self, params: ListsDestroyParams) -> List:
        """Delete the specified list and return it."""
        return List.from_dict(self._post_form("destroy.json", params))

    def members_create(self, params: ListsMembersCreateParams) -> None:
        """Add a member to a list."""
        self._post_form_quiet("members/create.json", params)

    def members_create_all(self, params: ListsMembersCreateAllParams) -> None:
        """Add several members to a list."""
        self._post_form_quiet("members/create_all.json", params)

    def members_destroy(self, params: ListsMembersDestroyParams) -> None:
        """Remove a member from a list."""
        self._post_form_quiet("members/destroy.json", params)

    def members_destroy_all(self, params: ListsMembersDestroyAllParams) -> None:
        """Remove several members from a list."""
        self._post_form_quiet("members/destroy_all.json", params)

    def subscribers_create(self, params: ListsSubscribersCreateParams) -> List:
        """Subscribe the authenticated user to the specified list."""
        return List.from_dict(self._post_form_quiet("subscribers/create.json", params))

    def subscribers_destroy(self, params: ListsSubscribersDestroyParams) -> None:
        """Unsubscribe the authenticated user from the specified list."""
        self._post_form_quiet("subscribers/destroy.json", params)

    def update(self, params: ListsUpdateParams) -> None:
        """Update the specified list."""
        self._post_form_quiet("update.json", params)