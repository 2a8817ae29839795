class ShortLinkerError(Exception):
    """Base exception for all application-specific errors."""

    error_code = 'app:shortlinker_error'


class ConfigurationError(ShortLinkerError):
    """Base exception for all configuration errors."""

    error_code = 'config:configuration_error'


class MissingEnvironmentVariableError(ConfigurationError, KeyError):
    """Raised when a required environment variable is missing."""

    error_code = 'config:missing_environment_variable_error'


class BadConfigurationError(ConfigurationError, ValueError):
    """Raised when the application is configured with invalid parameters."""

    error_code = 'config:bad_configuration_error'


class AllocationError(ShortLinkerError):
    """Base exception for short id allocation failures."""

    error_code = 'alloc:allocation_error'


class RetryBudgetExhaustedError(AllocationError):
    """Raised when every allocation attempt collided with an existing short id.

    The last conflict is kept on `last_conflict` and chained as `__cause__`.
    """

    error_code = 'alloc:retry_budget_exhausted_error'

    def __init__(self, attempts: int, last_conflict: Exception | None = None):
        self.attempts = attempts
        self.last_conflict = last_conflict
        detail = f': {last_conflict}' if last_conflict is not None else ''
        super().__init__(f'No free short id found after {attempts} attempt(s){detail}')
