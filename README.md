# birdclient

A Python client for part of the Twitter REST API v1.1. It provides:

- `birdclient.accounts`: credential verification (`AccountService`)
- `birdclient.config`: the help configuration endpoint (`ConfigService`)
- `birdclient.favorites`: listing, liking and un-liking tweets (`FavoriteService`)
- `birdclient.lists` and `birdclient.list_models`: reading, creating, updating and deleting lists, with their members and subscribers (`ListsService`)
- `birdclient.transport`: the HTTP layer the services share (`Transport`, `encode_params`)
- `birdclient.errors`: `APIError`, `ErrorDetail` and `relevant_error`
- `birdclient.demux`: `SwitchDemux`, which routes messages to handlers by their type
- `birdclient.backoffs`: `ExponentialBackOff` and two preset policies

## Installation

```
pip install birdclient
```

With the test dependencies:

```
pip install "birdclient[test]"
```

## Authentication

`Transport` accepts any `requests.Session`, and authorizing requests is up to that session. For application-only access, a bearer token in the session headers works:

```python
import requests

session = requests.Session()
session.headers["Authorization"] = "Bearer token"
```

For OAuth1 user context, pass a session that signs each request itself.

## Usage

Each service is built on a `Transport`. The base URL defaults to `https://api.twitter.com/1.1/`, and each service adds its own path under it (`account/`, `help/`, `favorites/`, `lists/`).

```python
from birdclient.transport import Transport
from birdclient.lists import ListsService
from birdclient.list_models import ListsListParams

transport = Transport(session)
lists = ListsService(transport)

for twitter_list in lists.list(ListsListParams(screen_name="twitterapi")):
    print(twitter_list.slug, twitter_list.uri)
```

```python
from birdclient.config import ConfigService
from birdclient.accounts import AccountService, AccountVerifyParams

config = ConfigService(transport).get()
print(config.short_url_length, config.photo_sizes.thumb)

user = AccountService(transport).verify_credentials(
    AccountVerifyParams(include_email=True)
)
print(user["screen_name"])
```

Users and tweets come back as plain decoded JSON mappings (`dict`). Lists and the cursored collections (`Members`, `Membership`, `Ownership`, `Subscribers`, `Subscribed`) come back as dataclasses.

### Parameters

Values that an endpoint requires are positional arguments, for example the name in `ListsService.create(name, params)`. Optional values go in a params dataclass, or you pass `None`. `encode_params` leaves out fields that are `None`, zero or an empty string. It sends booleans as `"true"` or `"false"`, so a three-state flag set to `None` is not sent at all. `ListsListParams.reverse` is only sent when it is `True`, and `ListsStatusesParams.include_retweets` is sent as `include_rts`.

### Errors

If a response has a non-2xx status and its body lists error details, the call raises `birdclient.errors.APIError`. Its string form shows the first error, for example `twitter: 187 Status is a duplicate`, and its `errors` attribute holds every `ErrorDetail`. A non-2xx response with no error details raises nothing. Failures below HTTP raise the exceptions `requests` raises.

`ListsService.members_create`, `members_create_all`, `members_destroy`, `members_destroy_all`, `subscribers_create`, `subscribers_destroy` and `update` swallow `APIError` and raise only transport failures. When `subscribers_create` gets an error response, it returns an empty `List`.

```python
from birdclient.errors import APIError

try:
    config = ConfigService(transport).get()
except APIError as exc:
    print(exc)
```

### Demultiplexing messages

`SwitchDemux` passes every message to `on_all` first, if that is set. It then calls the handler registered for the message's type, or for its nearest base class. A message that has no matching handler goes to `on_other`.

```python
from dataclasses import dataclass
from birdclient.demux import SwitchDemux

@dataclass
class Ping:
    text: str

demux = SwitchDemux(on_other=lambda message: print("unhandled", message))
demux.register(Ping, lambda ping: print(ping.text))
demux.handle_all([Ping("hello"), 42])
```

### Back-off

`new_exponential_backoff()` starts at 5 seconds, doubles each time and stops growing at 320 seconds. `new_aggressive_exponential_backoff()` starts at 1 minute, doubles each time and stops growing at 16 minutes. Each delay is randomized by ±50%. `next_backoff()` returns the next delay as a `timedelta`. It returns `None` once more than 15 minutes would have passed since the last `reset()`.

## What this package does not do

The package has no single client object that bundles the services. You build each service on a `Transport` yourself. It has no endpoints for direct messages, followers, friends or friendships, timelines, statuses, search or streaming. It has no typed models for tweets, users or tweet entities. The demultiplexer routes whatever message objects you give it, but the package does not connect to any stream.

## Running the tests

```
pytest
```