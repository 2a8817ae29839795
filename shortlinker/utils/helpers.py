"""Helper utilities for AWS lambda functions.

Functions:
    require_environment(*names: str) -> Callable
        Decorator: Ensure required environment variables are present
    json_response(status_code: int, body: dict, headers: dict | None = None) -> dict
        Build an API Gateway Lambda Proxy response
    guarantee_500_response(handler) -> Callable
        Decorator: Turn unexpected handler exceptions into a 500 response

Example:
    Typical usage inside a Lambda handler:

        >>> @guarantee_500_response
        ... def lambda_handler(event, context):
        ...     return json_response(201, {'id': 'zxcvb'})
        >>> lambda_handler({}, None)
        {'statusCode': 201, 'headers': {'Content-Type': 'application/json'}, 'body': '{"id": "zxcvb"}'}
"""

import os
import json
import logging
import functools
from typing import Any
from collections.abc import Callable

from shortlinker.exceptions import MissingEnvironmentVariableError
from shortlinker.utils.runtime import running_locally
from shortlinker.utils.constants import UNKNOWN_INTERNAL_SERVER_ERROR


logger = logging.getLogger(__name__)


def require_environment(*names: str) -> Callable:
    """Decorator ensuring required environment variables are present.

    Args:
        *names (str):
            Names of required environment variables.

    Raises:
        MissingEnvironmentVariableError:
            If any required environment variable is missing or empty.
            Subclasses KeyError.

    Example:
        >>> @require_environment('TABLE_NAME', 'KEY_NAME')
        ... def my_function():
        ...     pass
        >>> my_function()
        MissingEnvironmentVariableError: "Missing required environment variables: 'TABLE_NAME', 'KEY_NAME'"
    """

    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            missing = [name for name in names if not os.environ.get(name)]
            if missing:
                missing_list = ', '.join(f"'{name}'" for name in missing)
                raise MissingEnvironmentVariableError(f'Missing required environment variables: {missing_list}')
            return func(*args, **kwargs)

        return wrapper

    return decorator


def json_response(status_code: int, body: dict[str, Any], headers: dict[str, str] | None = None) -> dict[str, Any]:
    return {
        'statusCode': status_code,
        'headers': {'Content-Type': 'application/json', **(headers or {})},
        'body': json.dumps(body),
    }


def guarantee_500_response(handler: Callable) -> Callable:
    """Decorator: respond with 500 instead of crashing on unexpected exceptions

    When running locally (SAM, tests with APP_ENV=local) the exception is
    re-raised so the stack trace reaches the developer.

    Args:
        handler (Callable):
            Lambda handler with the (event, context) signature.

    Returns:
        Callable: wrapped handler.
    """

    @functools.wraps(handler)
    def wrapper(event: dict[str, Any], context: Any) -> dict[str, Any]:
        try:
            return handler(event, context)
        except Exception:
            if running_locally():
                raise
            logger.exception(
                'Unhandled exception in lambda handler. Responding with 500.',
                extra={'event': UNKNOWN_INTERNAL_SERVER_ERROR},
            )
            return json_response(
                500,
                {
                    'message': 'Internal Server Error',
                    'error_code': UNKNOWN_INTERNAL_SERVER_ERROR,
                },
            )

    return wrapper
