# SPDX-License-Identifier: MIT


class WakaBoxError(Exception):
    pass


class ConfigError(WakaBoxError):
    """Missing or unusable configuration, e.g. a blank API key."""


class CacheReadError(WakaBoxError):
    pass


class CacheWriteError(WakaBoxError):
    pass


class NetworkError(WakaBoxError):
    """Transport failure or non-success response from the summaries API."""


class ParseError(WakaBoxError):
    """Response or cached payload does not match the summary shape."""


class DocumentMergeError(WakaBoxError):
    """Reading or writing a daily note failed."""
