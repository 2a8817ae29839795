from shortlinker.dao.redis.redis_key_schema import RedisKeySchema
from shortlinker.dao.redis.short_link_redis_dao import ShortLinkRedisDAO
from shortlinker.dao.redis.mixins import RedisClientMixin


__all__ = [
    'RedisKeySchema',
    'ShortLinkRedisDAO',
    'RedisClientMixin',
]
