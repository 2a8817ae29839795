"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    ShortLinkAlreadyExistsError:
        Raised when a conditional create hits an existing short id.

    DataStoreError:
        Raised for every other data store failure (connectivity, throttling,
        authorization, malformed requests, internal backend faults, etc.).

Example:
    >>> from shortlinker.dao.exceptions import ShortLinkAlreadyExistsError
    >>> raise ShortLinkAlreadyExistsError("Short link with id 'zxcvb' already exists.")
    Traceback (most recent call last):
        ...
    shortlinker.dao.exceptions.ShortLinkAlreadyExistsError: Short link with id 'zxcvb' already exists.
"""


class DAOError(Exception):
    """Generic base class for DAO-related exceptions."""

    pass


class ShortLinkAlreadyExistsError(DAOError):
    """Exception raised when a short link with the same id already exists in the data store."""

    pass


class DataStoreError(DAOError):
    """Exception raised when there is an error in the data store.

    e.g. connection issues, timeouts, throttling, denied access, etc.
    """

    pass
