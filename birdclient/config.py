"""The API's current configuration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .transport import Transport


@dataclass
class SinglePhotoSize:
    height: int = 0
    width: int = 0
    resize: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SinglePhotoSize:
        return cls(height=data.get("h", 0), width=data.get("w", 0), resize=data.get("resize", ""))


def _size(data: Mapping[str, Any] | None) -> SinglePhotoSize | None:
    return SinglePhotoSize.from_dict(data) if data is not None else None


@dataclass
class PhotoSizes:
    """The four image sizes the service supports."""

    large: SinglePhotoSize | None = None
    medium: SinglePhotoSize | None = None
    small: SinglePhotoSize | None = None
    thumb: SinglePhotoSize | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PhotoSizes:
        return cls(
            large=_size(data.get("large")),
            medium=_size(data.get("medium")),
            small=_size(data.get("small")),
            thumb=_size(data.get("thumb")),
        )


@dataclass
class Config:
    characters_reserved_per_media: int = 0
    dm_text_character_limit: int = 0
    max_media_per_upload: int = 0
    photo_size_limit: int = 0
    photo_sizes: PhotoSizes | None = None
    short_url_length: int = 0
    short_url_length_https: int = 0
    non_username_paths: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Config:
        sizes = data.get("photo_sizes")
        return cls(
            characters_reserved_per_media=data.get("characters_reserved_per_media", 0),
            dm_text_character_limit=data.get("dm_text_character_limit", 0),
            max_media_per_upload=data.get("max_media_per_upload", 0),
            photo_size_limit=data.get("photo_size_limit", 0),
            photo_sizes=PhotoSizes.from_dict(sizes) if sizes is not None else None,
            short_url_length=data.get("short_url_length", 0),
            short_url_length_https=data.get("short_url_length_https", 0),
            non_username_paths=list(data.get("non_username_paths") or []),
        )


class ConfigService:
    """Access to the configuration endpoint."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport.with_path("help/")

    def get(self) -> Config:
        """Fetch the current configuration."""
        payload = self._transport.request("GET", "configuration.json")
        return Config.from_dict(payload or {})