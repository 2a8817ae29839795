"""Utility functions for application configuration management.

Configuration is read from the Lambda function's environment variables
(set by the deployment template). Each function reads its settings through
`load_config()`, which returns a plain dictionary:

    {
        "active_backend": "dynamodb",
        "dynamodb": {"table_name": "short-links", "key_name": "id"},
        "allocator": {"max_retries": 10, "id_length": 5}
    }

or, with STORE_BACKEND=redis:

    {
        "active_backend": "redis",
        "redis": {"host": "localhost", "port": 6379, "db": 0},
        "allocator": {"max_retries": 10, "id_length": 5}
    }

Functions:
    app_env() -> str
        Return the current application environment (`APP_ENV`) value,
        defaulting to `'local'`.

    app_name() -> str | None
        Return the application name (`APP_NAME`), or None if not set.

    app_prefix() -> str | None
        Return application prefix for DAOs, or None if `APP_NAME` is not set.

    allocator_settings() -> AllocatorSettings
        Return the retry budget and id length for the allocator.

    load_config() -> LambdaConfiguration
        Load the full function configuration from the environment.

Example:
    Typical usage inside a Lambda handler:

        >>> from shortlinker.utils.config import load_config
        >>> config = load_config()
        >>> config['dynamodb']['table_name']
        'short-links'
"""

import os
import logging
from dataclasses import dataclass

from shortlinker.exceptions import BadConfigurationError
from shortlinker.types import LambdaConfiguration
from shortlinker.utils.helpers import require_environment
from shortlinker.utils.constants import ENV, Backend, Defaults


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AllocatorSettings:
    max_retries: int = Defaults.MAX_RETRIES  # Total attempts, not retries after the first one
    id_length: int = Defaults.ID_LENGTH


def app_env() -> str:
    """Return the current application environment by reading 'APP_ENV'

    Returns:
        str:
            Value of `APP_ENV` environment variable, `'local'` by default.

    Example:
        >>> os.environ['APP_ENV'] = 'dev'
        >>> app_env()
        'dev'
    """
    return os.environ.get(ENV.App.APP_ENV, 'local').lower()


def app_name() -> str | None:
    """Return the current application name by reading 'APP_NAME'

    Returns:
        str:
            Value of `APP_NAME` environment variable.
            None if variable is not set.
    """
    return os.environ.get(ENV.App.APP_NAME)


def app_prefix() -> str | None:
    """Return application prefix for DAOs

    Returns:
        str: app prefix as <app name>:<app env>.
             None if APP_NAME is not set.

    Example:
        >>> os.environ['APP_NAME'] = 'shortlinker'
        >>> os.environ['APP_ENV'] = 'local'
        >>> app_prefix()
        'shortlinker:local'
    """
    return None if app_name() is None else f'{app_name()}:{app_env()}'


def _positive_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw == '':
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise BadConfigurationError(f"Environment variable '{name}' must be an integer (given value: {raw!r}).") from e
    if value <= 0:
        raise BadConfigurationError(f"Environment variable '{name}' must be a positive integer (given value: {value}).")
    return value


def _non_negative_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw == '':
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise BadConfigurationError(f"Environment variable '{name}' must be an integer (given value: {raw!r}).") from e
    if value < 0:
        raise BadConfigurationError(f"Environment variable '{name}' must be a non-negative integer (given value: {value}).")
    return value


def allocator_settings() -> AllocatorSettings:
    """Return allocator settings from 'MAX_RETRIES' and 'ID_LENGTH'

    Raises:
        BadConfigurationError:
            If either variable is set to something other than a positive integer.
    """
    return AllocatorSettings(
        max_retries=_positive_int(ENV.Allocator.MAX_RETRIES, Defaults.MAX_RETRIES),
        id_length=_positive_int(ENV.Allocator.ID_LENGTH, Defaults.ID_LENGTH),
    )


def active_backend() -> Backend:
    raw = os.environ.get(ENV.Store.BACKEND) or Defaults.STORE_BACKEND
    try:
        return Backend(raw.lower())
    except ValueError as e:
        supported = ', '.join(f"'{backend}'" for backend in Backend)
        raise BadConfigurationError(f'Unsupported store backend {raw!r} (supported: {supported}).') from e


@require_environment(ENV.DynamoDB.TABLE_NAME)
def _dynamodb_config() -> dict:
    return {
        'table_name': os.environ[ENV.DynamoDB.TABLE_NAME],
        'key_name': os.environ.get(ENV.DynamoDB.KEY_NAME) or Defaults.KEY_NAME,
    }


def _redis_config() -> dict:
    return {
        'host': os.environ.get(ENV.Redis.HOST) or 'localhost',
        'port': _positive_int(ENV.Redis.PORT, 6379),
        'db': _non_negative_int(ENV.Redis.DB, 0),
        'username': os.environ.get(ENV.Redis.USERNAME) or None,
        'password': os.environ.get(ENV.Redis.PASSWORD) or None,
    }


def load_config() -> LambdaConfiguration:
    """Load the function's configuration from environment variables

    Environment variables:
        STORE_BACKEND   – 'dynamodb' (default) or 'redis'
        TABLE_NAME      – DynamoDB table name (required for 'dynamodb')
        KEY_NAME        – DynamoDB partition key attribute (default: 'id')
        REDIS_HOST      – Redis host (default: 'localhost')
        REDIS_PORT      – Redis port (default: 6379)
        REDIS_DB        – Redis database index (default: 0)
        REDIS_USERNAME  – Redis ACL username (optional)
        REDIS_PASSWORD  – Redis password (optional)
        MAX_RETRIES     – Allocation attempt budget (default: 10)
        ID_LENGTH       – Generated short id length (default: 5)

    Returns:
        dict: active backend name, that backend's connection settings and
              the allocator settings.

    Raises:
        MissingEnvironmentVariableError:
            If TABLE_NAME is missing while the DynamoDB backend is active.
        BadConfigurationError:
            If a numeric variable is malformed or the backend is unknown.
    """
    backend = active_backend()
    if backend is Backend.DYNAMODB:
        backend_config = _dynamodb_config()
    else:
        backend_config = _redis_config()

    settings = allocator_settings()
    logger.debug(
        'Loaded configuration from environment.',
        extra={'backend': str(backend), 'maxRetries': settings.max_retries, 'idLength': settings.id_length},
    )
    return {
        'active_backend': str(backend),
        str(backend): backend_config,
        'allocator': {'max_retries': settings.max_retries, 'id_length': settings.id_length},
    }
