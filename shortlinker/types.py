from typing import Any
from collections.abc import Callable


# Type aliases for Python dictionaries
type LambdaEvent = dict[str, Any]
type LambdaContext = Any
type LambdaResponse = dict[str, Any]
type LambdaConfiguration = dict[str, Any]

# Allocator capabilities
type IdGenerator = Callable[[], str]
type Clock = Callable[[], int]
