import functools

from botocore.exceptions import BotoCoreError, ClientError

from shortlinker.dao.exceptions import DataStoreError, ShortLinkAlreadyExistsError


__all__ = ['handle_dynamodb_errors', 'is_conditional_check_failure']

CONDITIONAL_CHECK_FAILED = 'ConditionalCheckFailedException'


def is_conditional_check_failure(error: Exception) -> bool:
    """Tell whether a botocore error is DynamoDB rejecting a ConditionExpression

    Example:
        >>> error = ClientError({'Error': {'Code': 'ConditionalCheckFailedException'}}, 'PutItem')
        >>> is_conditional_check_failure(error)
        True
    """
    return isinstance(error, ClientError) and error.response.get('Error', {}).get('Code') == CONDITIONAL_CHECK_FAILED


def handle_dynamodb_errors[F](method: F) -> F:
    """Wrap DynamoDB-interacting DAO methods to translate botocore errors

    This is the only place which inspects DynamoDB error shapes:
        - ConditionalCheckFailedException => ShortLinkAlreadyExistsError
        - any other ClientError (throttling, validation, access denied,
          missing table, internal server error...) => DataStoreError
        - BotoCoreError (endpoint unreachable, read timeouts, missing
          credentials...) => DataStoreError

    Args:
        method (Callable[..., Any]):
            DAO method performing a conditional write. The first positional or
            `short_link` keyword argument names the record being written.

    Returns:
        Callable[..., Any]:
            Wrapped method raising only DAO exceptions for botocore failures.
    """

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except ClientError as e:
            if is_conditional_check_failure(e):
                short_link = kwargs.get('short_link', args[0] if args else None)
                short_id = getattr(short_link, 'id', None)
                raise ShortLinkAlreadyExistsError(f"Short link with id '{short_id}' already exists.") from e
            code = e.response.get('Error', {}).get('Code', 'Unknown')
            raise DataStoreError(f"DynamoDB table '{self.table_name}' rejected the request ({code}).") from e
        except BotoCoreError as e:
            raise DataStoreError(f"Can't reach DynamoDB table '{self.table_name}': {e}") from e

    return wrapper
