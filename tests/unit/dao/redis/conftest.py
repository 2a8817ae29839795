from unittest.mock import MagicMock

import pytest
import redis


@pytest.fixture
def app_prefix() -> str:
    """Provide a consistent Redis key prefix for testing."""
    return 'testapp:test'


@pytest.fixture
def redis_client() -> redis.Redis:
    """Mock a Redis client answering the create-if-absent script with 'created'."""
    client = MagicMock(spec=redis.Redis)
    client.connection_pool = MagicMock(
        spec=redis.ConnectionPool,
        connection_kwargs={'host': 'redis.test', 'port': 6379, 'db': 0},
    )
    client.ping.return_value = True
    client.eval.return_value = 1
    return client
