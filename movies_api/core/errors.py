"""
Domain errors raised by the catalog and rating services.
"""


class MoviesApiError(Exception):
    """Base class for expected business-rule failures."""


class InvalidRequestError(MoviesApiError):
    """Input is missing or out of range."""


class NotFoundError(MoviesApiError):
    """A referenced entity is absent, or a query produced no results."""
