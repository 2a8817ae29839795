import functools
import redis

from shortlinker.dao.exceptions import DataStoreError


__all__ = ['handle_redis_errors', 'redis_location']


def redis_location(client: redis.Redis) -> str:
    info = client.connection_pool.connection_kwargs
    return f"{info.get('host')}:{info.get('port')}/{info.get('db')}"


def handle_redis_errors[F](method: F) -> F:
    """Wrap Redis-interacting DAO methods to translate Redis errors

    Every redis-py failure (connection refused, timeouts, script errors,
    authentication, OOM replies...) becomes a DataStoreError chained to the
    original exception. Conflicts are signalled by the DAO methods themselves
    and pass through untouched.

    Args:
        method (Callable[..., Any]):
            DAO method performing Redis operations which may raise redis.exceptions.RedisError.

    Returns:
        Callable[..., Any]:
            Wrapped method which raises DataStoreError on any Redis failure.

    Example:
        >>> @handle_redis_errors
        ... def ping(self):
        ...     return self.redis.ping()
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except redis.exceptions.ConnectionError as e:
            raise DataStoreError(f"Can't connect to Redis at {redis_location(self.redis)}.") from e
        except redis.exceptions.RedisError as e:
            raise DataStoreError(f'Redis at {redis_location(self.redis)} failed: {e}') from e

    return wrapper
