"""Redis client setup shared by Redis-backed DAOs

Classes:
    - RedisClientMixin: builds (or reuses) the Redis client, the key schema,
      and refuses to construct a DAO whose Redis cannot be reached.

Example:
    >>> dao = ShortLinkRedisDAO(redis_host='redis.internal', redis_password='s3cret', prefix='shortlinker:prod')
    >>> dao.keys.link_key('zxcvb')
    'shortlinker:prod:links:zxcvb'
"""

from typing import Optional

import redis

from shortlinker.dao.redis.redis_key_schema import RedisKeySchema
from shortlinker.dao.redis.helpers import redis_location
from shortlinker.dao.exceptions import DataStoreError


class RedisClientMixin:
    """Redis connection for Redis-backed DAOs

    Connection parameters mirror what load_config() reads from REDIS_HOST,
    REDIS_PORT, REDIS_DB, REDIS_USERNAME and REDIS_PASSWORD. A pre-built
    `redis_client` takes precedence over all of them.

    Attributes:
        redis (redis.Redis): client used by subclasses.
        keys (RedisKeySchema): namespaced key builder.

    Raises:
        DataStoreError: if the server does not answer PING.
    """

    def __init__(
        self,
        redis_host: str = 'localhost',
        redis_port: int = 6379,
        redis_db: int = 0,
        redis_username: Optional[str] = None,
        redis_password: Optional[str] = None,
        redis_client: Optional[redis.Redis] = None,
        prefix: Optional[str] = None,
    ):
        if redis_client is None:
            redis_client = redis.Redis(
                host=redis_host,
                port=int(redis_port),
                db=int(redis_db),
                username=redis_username,
                password=redis_password,
                decode_responses=True,
            )

        self.redis = redis_client
        self.keys = RedisKeySchema(prefix=prefix)
        self.ensure_reachable()

    def ensure_reachable(self) -> None:
        """PING Redis, raising DataStoreError when it cannot be reached"""
        try:
            self.redis.ping()
        except (redis.exceptions.ConnectionError, redis.exceptions.TimeoutError) as e:
            raise DataStoreError(
                f"Can't connect to Redis at {redis_location(self.redis)}. Check REDIS_HOST, REDIS_PORT and credentials."
            ) from e
