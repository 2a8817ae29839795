"""Clock used to stamp newly created short links.

The allocator takes the clock as a dependency; this is the production default.
"""

from datetime import datetime, timedelta, UTC


EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def epoch_millis() -> int:
    """Return the current UTC time as integer milliseconds since the epoch.

    Example:
        >>> epoch_millis()
        1760868000123
    """
    return (datetime.now(UTC) - EPOCH) // timedelta(milliseconds=1)
