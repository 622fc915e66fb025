import pytest

from birdclient.errors import APIError, ErrorDetail, relevant_error

ERR_API = APIError([ErrorDetail(message="Status is a duplicate", code=187)])
ERR_HTTP = ConnectionError("unknown host")


def test_error_message_empty():
    assert str(APIError()) == ""


def test_error_message_first_detail():
    assert str(ERR_API) == "twitter: 187 Status is a duplicate"


def test_is_empty():
    assert APIError().is_empty() is True
    assert ERR_API.is_empty() is False


@pytest.mark.parametrize(
    "http_error, api_error, expected",
    [
        (None, APIError(), None),
        (None, ERR_API, ERR_API),
        (ERR_HTTP, APIError(), ERR_HTTP),
        (ERR_HTTP, ERR_API, ERR_HTTP),
    ],
)
def test_relevant_error(http_error, api_error, expected):
    assert relevant_error(http_error, api_error) is expected


def test_from_dict():
    error = APIError.from_dict(
        {"errors": [{"code": 34, "message": "Sorry, that page does not exist"}]}
    )
    assert error.errors == [ErrorDetail(message="Sorry, that page does not exist", code=34)]
    assert error == APIError([ErrorDetail(message="Sorry, that page does not exist", code=34)])


def test_from_dict_without_errors_is_empty():
    assert APIError.from_dict({}).is_empty()
    assert APIError.from_dict(None).is_empty()


def test_relevant_error_from_decoded_dict_has_message():
    decoded = APIError.from_dict({"errors": [{"code": 187, "message": "Status is a duplicate"}]})
    error = relevant_error(None, decoded)
    assert str(error) == "twitter: 187 Status is a duplicate"
    assert error.errors[0].code == 187