"""Abstract base class for ShortLink data access objects (DAOs).

This class establishes a consistent contract for all ShortLink DAO implementations,
regardless of the underlying storage mechanism (e.g., DynamoDB, Redis).

Responsibilities:
    - Provide an interface for atomically creating ShortLinkModel records.
    - Standardize error handling across multiple data store implementations.
    - Fold the two insert failure modes into a tagged WriteOutcome for the allocator.

Example:
    Typical usage with a datastore-specific implementation:

        >>> from shortlinker.models import ShortLinkModel
        >>> from shortlinker.dao.dynamodb import ShortLinkDynamoDBDAO

        >>> dao = ShortLinkDynamoDBDAO(table_name='short-links')

        >>> short_link = ShortLinkModel(id='zxcvb', url='https://example.com', created_at=1234567890)
        >>> outcome = dao.create_if_absent(short_link)
        >>> outcome.status
        <WriteStatus.CREATED: 'created'>

        >>> dao.create_if_absent(short_link).status
        <WriteStatus.CONFLICT: 'conflict'>
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import StrEnum

from shortlinker.models import ShortLinkModel
from shortlinker.dao.exceptions import DAOError, DataStoreError, ShortLinkAlreadyExistsError


class WriteStatus(StrEnum):
    CREATED = 'created'  # record durably written
    CONFLICT = 'conflict'  # id already taken, nothing written
    FAILED = 'failed'  # any other data store failure, nothing written


@dataclass(frozen=True)
class WriteOutcome:
    """Tagged result of a single conditional create.

    Attributes:
        status (WriteStatus):
            What happened to the write.
        error (DAOError | None):
            ShortLinkAlreadyExistsError for CONFLICT, DataStoreError for FAILED,
            None for CREATED.
    """

    status: WriteStatus
    error: DAOError | None = None

    @classmethod
    def created(cls) -> 'WriteOutcome':
        return cls(WriteStatus.CREATED)

    @classmethod
    def conflict(cls, error: ShortLinkAlreadyExistsError) -> 'WriteOutcome':
        return cls(WriteStatus.CONFLICT, error)

    @classmethod
    def failed(cls, error: DataStoreError) -> 'WriteOutcome':
        return cls(WriteStatus.FAILED, error)


class ShortLinkBaseDAO(ABC):
    """Interface for ShortLink data access objects (DAOs).

    Methods:
        insert(short_link: ShortLinkModel, **kwargs) -> ShortLinkBaseDAO:
            Insert a new ShortLinkModel only if its id is not taken yet.
            Raises ShortLinkAlreadyExistsError if the id already exists.
            Raises DataStoreError on any other data store failure.

        create_if_absent(short_link: ShortLinkModel, **kwargs) -> WriteOutcome:
            Same write as insert(), reported as a WriteOutcome instead of
            exceptions.

    Subclassing:
        Datastore-specific implementations (e.g., ShortLinkDynamoDBDAO or
        ShortLinkRedisDAO) must extend this class and implement insert().
        The existence check and the write MUST be a single atomic operation
        on the data store; concurrent allocators rely on it.

    NOTE:
        - Records are never updated or deleted through this interface.
    """

    @abstractmethod
    def insert(self, short_link: ShortLinkModel, **kwargs) -> 'ShortLinkBaseDAO':
        """Insert a new ShortLinkModel into the data store if its id is free.

        Args:
            short_link (ShortLinkModel):
                The ShortLinkModel instance to be inserted.

            **kwargs:
                Additional keyword arguments, used by data store.

        Returns:
            ShortLinkBaseDAO: self (for method chaining)

        Raises:
            ShortLinkAlreadyExistsError:
                If a record with the same id already exists.

            DataStoreError:
                If there is any other error in the data store.
        """
        pass

    def create_if_absent(self, short_link: ShortLinkModel, **kwargs) -> WriteOutcome:
        """Conditionally create a record and report the result as a WriteOutcome

        Only the two DAO failure modes are folded into the outcome. Anything
        else (e.g. a beartype violation for a wrong argument type) is a bug in
        the caller and propagates.

        Args:
            short_link (ShortLinkModel):
                The record to create.

            **kwargs:
                Passed through to insert().

        Returns:
            WriteOutcome: CREATED, CONFLICT or FAILED with the causing error.
        """
        try:
            self.insert(short_link=short_link, **kwargs)
        except ShortLinkAlreadyExistsError as e:
            return WriteOutcome.conflict(e)
        except DataStoreError as e:
            return WriteOutcome.failed(e)
        return WriteOutcome.created()
