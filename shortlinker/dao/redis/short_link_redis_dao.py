"""Data Access Object (DAO) implementation for storing short links in Redis

Each short link is a hash under `<prefix>:links:<id>` with the fields
`url`, `clicks` and `createdAt`.

Classes:
    ShortLinkRedisDAO:
        DAO for atomically creating ShortLinkModel records in a Redis datastore.

Example:
    >>> from shortlinker.models import ShortLinkModel
    >>> from shortlinker.dao.redis import ShortLinkRedisDAO

    >>> dao = ShortLinkRedisDAO(prefix="shortlinker:dev")
    >>> dao.insert(ShortLinkModel(id='zxcvb', url='https://example.com', created_at=1234567890))
    <ShortLinkRedisDAO>
    >>> dao.insert(ShortLinkModel(id='zxcvb', url='https://other.com', created_at=1234567891))
    Traceback (most recent call last):
        ...
    shortlinker.dao.exceptions.ShortLinkAlreadyExistsError: Short link with id 'zxcvb' already exists.
"""

from beartype import beartype

from shortlinker.models import ShortLinkModel
from shortlinker.dao.base import ShortLinkBaseDAO
from shortlinker.dao.redis.mixins import RedisClientMixin
from shortlinker.dao.redis.helpers import handle_redis_errors
from shortlinker.dao.exceptions import ShortLinkAlreadyExistsError


# EXISTS + HSET run inside one script, so no other client can create the same
# key in between. Returns 1 when the hash was created, 0 when the key existed.
CREATE_IF_ABSENT_SCRIPT = """
if redis.call('EXISTS', KEYS[1]) == 1 then
    return 0
end
redis.call('HSET', KEYS[1], 'url', ARGV[1], 'clicks', ARGV[2], 'createdAt', ARGV[3])
return 1
"""


class ShortLinkRedisDAO(RedisClientMixin, ShortLinkBaseDAO):
    """Redis-based Data Access Object (DAO) for short links

    Attributes (see RedisClientMixin):
        redis (redis.Redis):
            Redis client used to communicate with the Redis datastore.
        keys (RedisKeySchema):
            Key schema helper for generating namespaced Redis keys.

    Methods:
        insert(short_link: ShortLinkModel, **kwargs) -> ShortLinkRedisDAO:
            Create the short link hash if its key does not exist.
            Raises ShortLinkAlreadyExistsError when the id is taken.
            Raises DataStoreError on any Redis failure.
    """

    @handle_redis_errors
    @beartype
    def insert(self, short_link: ShortLinkModel, **kwargs) -> 'ShortLinkRedisDAO':
        """Create a short link hash in Redis unless the id is already taken

        Args:
            short_link (ShortLinkModel):
                The record to create.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortLinkRedisDAO: self (for method chaining)

        Raises:
            ShortLinkAlreadyExistsError:
                If a short link with the same id already exists.
            DataStoreError:
                If Redis fails to run the script.
        """
        link_key = self.keys.link_key(short_link.id)
        created = self.redis.eval(
            CREATE_IF_ABSENT_SCRIPT,
            1,
            link_key,
            short_link.url,
            short_link.clicks,
            short_link.created_at,
        )
        if not int(created):
            raise ShortLinkAlreadyExistsError(f"Short link with id '{short_link.id}' already exists.")
        return self
