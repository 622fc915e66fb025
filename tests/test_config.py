import pytest
import requests
import responses

from birdclient.config import Config, ConfigService, PhotoSizes, SinglePhotoSize
from birdclient.errors import APIError
from birdclient.transport import DEFAULT_BASE_URL, Transport

CONFIG_JSON = """ {"characters_reserved_per_media": 24, "dm_text_character_limit": 10000, "max_media_per_upload": 1, "photo_size_limit": 3145728, "photo_sizes": { "large": { "h": 2048, "resize": "fit", "w": 1024 }, "medium": { "h": 1200, "resize": "fit", "w": 600 }, "small": { "h": 480, "resize": "fit", "w": 340 }, "thumb": { "h": 150, "resize": "crop", "w": 150 } }, "short_url_length": 23, "short_url_length_https": 23, "non_username_paths": [ "about" ] }"""


@pytest.fixture
def service():
    return ConfigService(Transport(requests.Session(), DEFAULT_BASE_URL))


@pytest.fixture
def rsps():
    with responses.RequestsMock() as mock:
        yield mock


def test_config_get(rsps, service):
    rsps.add(
        responses.GET,
        DEFAULT_BASE_URL + "help/configuration.json",
        body=CONFIG_JSON,
        content_type="application/json",
    )
    expected = Config(
        characters_reserved_per_media=24,
        dm_text_character_limit=10000,
        max_media_per_upload=1,
        photo_size_limit=3145728,
        photo_sizes=PhotoSizes(
            large=SinglePhotoSize(height=2048, width=1024, resize="fit"),
            medium=SinglePhotoSize(height=1200, width=600, resize="fit"),
            small=SinglePhotoSize(height=480, width=340, resize="fit"),
            thumb=SinglePhotoSize(height=150, width=150, resize="crop"),
        ),
        short_url_length=23,
        short_url_length_https=23,
        non_username_paths=["about"],
    )
    assert service.get() == expected
    assert rsps.calls[0].request.method == "GET"


def test_config_get_error(rsps, service):
    rsps.add(
        responses.GET,
        DEFAULT_BASE_URL + "help/configuration.json",
        status=404,
        json={"errors": [{"code": 34, "message": "Sorry, that page does not exist"}]},
    )
    with pytest.raises(APIError) as info:
        service.get()
    assert info.value.errors[0].code == 34


def test_config_from_dict_without_photo_sizes():
    config = Config.from_dict({"short_url_length": 23})
    assert config.photo_sizes is None
    assert config.short_url_length == 23
    assert config.non_username_paths == []