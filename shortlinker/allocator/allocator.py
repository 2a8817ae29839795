"""Short id allocation with collision retries

The allocator turns a URL into a stored short link:

    1. ask the id generator for a fresh candidate
    2. build the record (clicks=0, created_at=clock())
    3. conditionally create it through the DAO
    4. CREATED   => done, return the record
       CONFLICT  => spend one unit of budget and go back to 1
       FAILED    => give up immediately, re-raise the data store error

Attempts run one after another. Concurrent allocators (other Lambda
invocations, other processes) are kept apart solely by the data store's
atomic conditional create; there is no lock here.

Classes:
    ShortLinkAllocator:
        Collision-retrying allocator over a ShortLinkBaseDAO.

Example:
    >>> from shortlinker.allocator import ShortLinkAllocator
    >>> from shortlinker.dao.dynamodb import ShortLinkDynamoDBDAO
    >>> from shortlinker.utils import ShortIdGenerator

    >>> allocator = ShortLinkAllocator(
    ...     dao=ShortLinkDynamoDBDAO(table_name='short-links'),
    ...     id_generator=ShortIdGenerator(length=5),
    ...     max_retries=10,
    ... )
    >>> allocator.allocate('https://example.com')
    'V1StG'
"""

from shortlinker.models import ShortLinkModel
from shortlinker.dao.base import ShortLinkBaseDAO, WriteStatus
from shortlinker.exceptions import BadConfigurationError, RetryBudgetExhaustedError
from shortlinker.types import Clock, IdGenerator
from shortlinker.utils.clock import epoch_millis
from shortlinker.utils.config import AllocatorSettings
from shortlinker.utils.constants import Defaults
from shortlinker.utils.shortid import ShortIdGenerator


class ShortLinkAllocator:
    """Allocate unique short ids by retrying conditional creates on collision

    Attributes:
        dao (ShortLinkBaseDAO):
            Data store adapter performing the atomic create-if-absent.
        id_generator (IdGenerator):
            Zero-argument callable returning a candidate short id.
        clock (Clock):
            Zero-argument callable returning the current epoch time in milliseconds.
        max_retries (int):
            Total number of attempts per allocation (the first one included).

    Methods:
        allocate(url: str) -> str:
            Store a new short link for url and return its id.
        allocate_link(url: str) -> ShortLinkModel:
            Store a new short link for url and return the stored record.
    """

    def __init__(
        self,
        dao: ShortLinkBaseDAO,
        id_generator: IdGenerator,
        clock: Clock = epoch_millis,
        max_retries: int = Defaults.MAX_RETRIES,
    ):
        if isinstance(max_retries, bool) or not isinstance(max_retries, int):
            raise BadConfigurationError(f'Max retries must be of type integer (given type: {type(max_retries)}).')
        if max_retries <= 0:
            raise BadConfigurationError(f'Max retries must be a positive integer (given value: {max_retries}).')

        self.dao = dao
        self.id_generator = id_generator
        self.clock = clock
        self.max_retries = max_retries

    @classmethod
    def from_settings(cls, dao: ShortLinkBaseDAO, settings: AllocatorSettings, clock: Clock = epoch_millis) -> 'ShortLinkAllocator':
        """Build an allocator with a URL-safe ShortIdGenerator of settings.id_length"""
        return cls(
            dao=dao,
            id_generator=ShortIdGenerator(length=settings.id_length),
            clock=clock,
            max_retries=settings.max_retries,
        )

    def allocate(self, url: str) -> str:
        """Store a new short link for url and return its id

        Args:
            url (str):
                Target URL, stored as given.

        Returns:
            str: the newly assigned short id.

        Raises:
            RetryBudgetExhaustedError:
                If all max_retries candidates collided with existing ids.
            DataStoreError:
                If the data store failed for any other reason (never retried).
        """
        return self.allocate_link(url).id

    def allocate_link(self, url: str) -> ShortLinkModel:
        """Store a new short link for url and return the stored record

        See allocate() for the failure modes. A failed call never leaves a
        record behind: every unsuccessful attempt was rejected by the store.
        """
        remaining = self.max_retries
        last_conflict = None

        while remaining > 0:
            short_link = ShortLinkModel(
                id=self.id_generator(),
                url=url,
                created_at=self.clock(),
                clicks=0,
            )
            outcome = self.dao.create_if_absent(short_link=short_link)

            if outcome.status is WriteStatus.CREATED:
                return short_link

            if outcome.status is WriteStatus.FAILED:
                raise outcome.error

            remaining -= 1
            last_conflict = outcome.error

        raise RetryBudgetExhaustedError(self.max_retries, last_conflict) from last_conflict
