"""Account credential verification."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .transport import Transport


@dataclass
class AccountVerifyParams:
    include_entities: bool | None = None
    skip_status: bool | None = None
    include_email: bool | None = None


class AccountService:
    """Access to the account endpoints."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport.with_path("account/")

    def verify_credentials(self, params: AccountVerifyParams | None = None) -> dict[str, Any]:
        """Return the authorized user; raises APIError for invalid credentials."""
        return dict(self._transport.request("GET", "verify_credentials.json", query=params) or {})