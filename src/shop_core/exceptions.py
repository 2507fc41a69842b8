"""Domain-specific exceptions for shop-core.

This module defines custom exceptions that are part of the public API.
All exceptions inherit from ShopCoreError for easy catching.
"""


class ShopCoreError(Exception):
    """Base exception for all shop-core errors.

    Users can catch this exception to handle any shop-core error.
    """

    pass


class ConfigError(ShopCoreError):
    """Raised when there is a configuration error.

    This exception is raised when:
    - Invalid configuration values are provided (timeouts, retries)
    - Required configuration is missing (service URL or API key)
    - An unknown granularity is requested
    """

    pass


class DataFetchError(ShopCoreError):
    """Raised when an upstream read of sale or order records fails.

    This exception is raised when:
    - The data service is unreachable or returns a non-2xx response
    - The response body is not a JSON list of rows
    - A local export file is missing or unreadable

    The refresh cycle contains it: the failed stream is replaced by an
    empty list and the failure is reported in ``SeriesResult.fetch_errors``.
    """

    pass


class MalformedRecordError(ShopCoreError):
    """Raised when a single raw record cannot be turned into an event.

    Only the offending record is skipped; the rest of the batch is kept.
    """

    pass


class UnclassifiedCategoryError(ShopCoreError):
    """Raised by strict classification when a channel or status is unknown.

    The aggregator never raises it: unknown sale channels still count towards
    the grand total, unknown order statuses count nowhere.
    """

    pass
