"""Exceptions raised by FinHealth."""


class FinHealthError(Exception):
    """Base class for all FinHealth errors."""


class ValidationError(FinHealthError, ValueError):
    """A record or amount was rejected at the workspace boundary.

    Raised for negative amounts, empty required text and non-positive
    contributions. Engine functions never raise it.
    """


class NotFoundError(FinHealthError, KeyError):
    """No record with the given id exists in the addressed collection."""

    def __init__(self, collection: str, record_id: object):
        self.collection = collection
        self.record_id = record_id
        super().__init__(f"No {collection} record with id {record_id}")

    def __str__(self) -> str:
        return self.args[0]


class ConfigError(FinHealthError):
    """The configuration file exists but could not be parsed."""
