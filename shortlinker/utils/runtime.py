"""Runtime utilities

Functions:
    running_locally() -> bool:
        True if lambda is running in local SAM, False otherwise.
    localstack_endpoint() -> str | None:
        LocalStack endpoint URL when running locally, None otherwise.

Example:
    >>> from shortlinker.utils.runtime import running_locally
    >>> os.environ['APP_ENV'] = 'local'
    >>> running_locally()
    True
    >>> os.environ['APP_ENV'] = 'dev'
    >>> running_locally()
    False
"""

import os

from shortlinker.utils.constants import ENV


def running_locally() -> bool:
    """Check if the lambda is running locally via sam local invoke

    Returns:
        bool: True if running locally, False otherwise.
    """
    env = os.getenv(ENV.App.APP_ENV, '').lower()
    return env == 'local' or os.getenv(ENV.App.AWS_SAM_LOCAL) == 'true'


def localstack_endpoint() -> str | None:
    """Return the LocalStack endpoint to point boto3 clients at

    Only honoured when running locally, so a stray LOCALSTACK_ENDPOINT in a
    deployed function never redirects AWS traffic.

    Returns:
        str | None: endpoint URL, e.g. 'http://localstack:4566', or None.
    """
    if not running_locally():
        return None
    return os.getenv(ENV.LocalStack.ENDPOINT) or None
