"""Client for Twitter API v1.1 accounts, configuration, favorites and lists, with message demux and back-off."""

__version__ = "0.1.0"