"""HTTP transport shared by the API services."""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from typing import Any
from urllib.parse import urljoin

import requests

from .errors import APIError, relevant_error

DEFAULT_BASE_URL = "https://api.twitter.com/1.1/"


def _format(value: Any, omit_false: bool) -> str | list[str] | None:
    if value is None:
        return None
    if isinstance(value, bool):
        if not value and omit_false:
            return None
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value) if value else None
    if isinstance(value, str):
        return value or None
    if isinstance(value, (list, tuple)):
        items = [_format(item, False) for item in value]
        items = [item for item in items if isinstance(item, str)]
        return items or None
    return str(value)


def encode_params(params: Any) -> dict[str, str | list[str]]:
    """Turn a params dataclass or mapping into request parameters.

    None and zero values are left out; booleans are sent as "true" or
    "false". A dataclass field may carry metadata "key" to change its wire
    name and "omit_false" to leave out a False value.
    """
    if params is None:
        return {}
    if isinstance(params, Mapping):
        entries = [(str(key), value, False) for key, value in params.items()]
    elif dataclasses.is_dataclass(params) and not isinstance(params, type):
        entries = [
            (
                f.metadata.get("key", f.name),
                getattr(params, f.name),
                bool(f.metadata.get("omit_false", False)),
            )
            for f in dataclasses.fields(params)
        ]
    else:
        raise TypeError(f"cannot encode parameters of type {type(params).__name__}")
    encoded: dict[str, str | list[str]] = {}
    for key, value, omit_false in entries:
        formatted = _format(value, omit_false)
        if formatted is not None:
            encoded[key] = formatted
    return encoded


class Transport:
    """Sends requests relative to a base URL and decodes JSON responses.

    A non-2xx response carrying error details raises APIError.
    """

    def __init__(self, session: requests.Session | None = None, base_url: str = DEFAULT_BASE_URL) -> None:
        self.session = session if session is not None else requests.Session()
        self.base_url = base_url

    def with_path(self, path: str) -> Transport:
        """Return a transport sharing this session, based at ``path``."""
        return Transport(self.session, urljoin(self.base_url, path))

    def request(
        self,
        method: str,
        path: str,
        query: Any = None,
        form: Any = None,
        json_body: Any = None,
    ) -> Any:
        """Send a request and return the decoded JSON body, or None if empty."""
        kwargs: dict[str, Any] = {}
        if query is not None:
            kwargs["params"] = encode_params(query)
        if form is not None:
            kwargs["data"] = encode_params(form)
        if json_body is not None:
            text = json.dumps(json_body, separators=(",", ":"), ensure_ascii=False) + "\n"
            kwargs["data"] = text.encode("utf-8")
            kwargs["headers"] = {"Content-Type": "application/json"}
        response = self.session.request(method, urljoin(self.base_url, path), **kwargs)
        payload = self._decode(response)
        if 200 <= response.status_code < 300:
            return payload
        api_error = APIError.from_dict(payload if isinstance(payload, Mapping) else None)
        error = relevant_error(None, api_error)
        if error is not None:
            raise error
        return None

    @staticmethod
    def _decode(response: requests.Response) -> Any:
        if response.status_code == 204 or not response.content.strip():
            return None
        return response.json()