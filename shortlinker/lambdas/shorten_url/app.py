import json
import base64
import binascii
import logging

from shortlinker.allocator import ShortLinkAllocator
from shortlinker.dao.base import ShortLinkBaseDAO
from shortlinker.dao.dynamodb import ShortLinkDynamoDBDAO
from shortlinker.dao.redis import ShortLinkRedisDAO
from shortlinker.dao.exceptions import DataStoreError
from shortlinker.exceptions import ConfigurationError, RetryBudgetExhaustedError
from shortlinker.types import LambdaEvent, LambdaContext, LambdaResponse, LambdaConfiguration
from shortlinker.utils import AllocatorSettings, load_config, app_prefix, json_response, guarantee_500_response
from shortlinker.utils.constants import Backend
from shortlinker.lambdas.shorten_url.constants import (
    INVALID_JSON_BODY,
    MISSING_URL,
    ALLOCATION_RETRIES_EXHAUSTED,
    DATA_STORE_UNAVAILABLE,
    CONFIGURATION_ERROR,
    SHORT_LINK_CREATED,
)


logger = logging.getLogger(__name__)


def response_201(short_id: str) -> LambdaResponse:
    return json_response(201, {'id': short_id})


def response_400(message: str | None = None, error_code: str | None = None) -> LambdaResponse:
    base = 'Bad Request'
    body = {'message': base if not message else f'{base} ({message})'}
    if error_code:
        body['errorCode'] = error_code
    return json_response(400, body)


def response_500(message: str | None = None, error_code: str | None = None) -> LambdaResponse:
    base = 'Internal Server Error'
    body = {'message': base if not message else f'{base} ({message})'}
    if error_code:
        body['errorCode'] = error_code
    return json_response(500, body)


def response_503(message: str | None = None, error_code: str | None = None) -> LambdaResponse:
    body = {'message': message or 'Service Unavailable'}
    if error_code:
        body['errorCode'] = error_code
    return json_response(503, body, headers={'Retry-After': '1'})


def request_body(event: LambdaEvent) -> str:
    body = event.get('body') or '{}'
    if event.get('isBase64Encoded'):
        body = base64.b64decode(body, validate=True).decode('utf-8')
    return body


def short_link_dao(app_config: LambdaConfiguration) -> ShortLinkBaseDAO:
    """Create the DAO for the configured backend

    Raises:
        DataStoreError: if the Redis backend fails its connectivity healthcheck.
    """
    backend = app_config['active_backend']
    if backend == Backend.REDIS:
        redis_config = {f'redis_{k}': v for k, v in app_config['redis'].items()}
        return ShortLinkRedisDAO(**redis_config, prefix=app_prefix())
    return ShortLinkDynamoDBDAO(**app_config['dynamodb'])


@guarantee_500_response
def lambda_handler(event: LambdaEvent, context: LambdaContext) -> LambdaResponse:
    """Handle incoming API Gateway requests to shorten URLs

    This Lambda handler follows this procedure to shorten URLs:
    - Step 1: Extract URL from request body
    - Step 2: Allocate a free short id and store the short link (via allocator)
    - Step 3: Respond to user with 201 created

    HTTP responses:
        201: Short link created
            id: newly allocated short id
        400: Bad client request
            message: indicate cause of bad request (invalid JSON or missing url)
        500: Internal server error
            message: configuration problem or data store failure
        503: Service unavailable
            message: no free short id found within the retry budget

    Args:
        event (LambdaEvent):
            API Gateway event payload in Lambda Proxy format.
        context (LambdaContext):
            AWS Lambda context object containing runtime information.

    Returns:
        dict:
            API Gateway-compatible response including statusCode and body.

    Example:
        >>> event = {'body': '{"url": "https://example.com"}'}
        >>> response = lambda_handler(event, None)
        >>> response['statusCode']
        201
        >>> json.loads(response['body'])['id']
        'V1StG'
    """
    # 0- Get application's config
    try:
        app_config = load_config()
    except ConfigurationError as e:
        logger.exception(
            'Failed to load configuration for shorten URL function. Responding with 500.',
            extra={'event': CONFIGURATION_ERROR, 'errorCode': e.error_code},
        )
        return response_500()

    # 1- Extract URL from request body
    try:
        body = json.loads(request_body(event))
    except (json.JSONDecodeError, UnicodeDecodeError, binascii.Error):
        logger.info('Request body is not valid JSON. Responding with 400.', extra={'event': INVALID_JSON_BODY})
        return response_400(message='invalid JSON body', error_code=INVALID_JSON_BODY)

    url = body.get('url') if isinstance(body, dict) else None
    if not isinstance(url, str) or not url:
        logger.info("Missing 'url' in request body. Responding with 400.", extra={'event': MISSING_URL})
        return response_400(message="missing 'url' in JSON body", error_code=MISSING_URL)

    # 2- Allocate short id and store the short link
    try:
        allocator = ShortLinkAllocator.from_settings(
            dao=short_link_dao(app_config),
            settings=AllocatorSettings(**app_config['allocator']),
        )
        short_id = allocator.allocate(url)
    except RetryBudgetExhaustedError as e:
        logger.warning(
            'Could not find a free short id. Responding with 503.',
            extra={'event': ALLOCATION_RETRIES_EXHAUSTED, 'attempts': e.attempts},
        )
        return response_503(
            message='Could not allocate a short link, please try again later.',
            error_code=ALLOCATION_RETRIES_EXHAUSTED,
        )
    except DataStoreError:
        logger.exception('Data store failed while creating short link. Responding with 500.', extra={'event': DATA_STORE_UNAVAILABLE})
        return response_500(message='data store unavailable', error_code=DATA_STORE_UNAVAILABLE)

    # 3- Respond with the new short id
    logger.info('Short link created. Responding with 201.', extra={'event': SHORT_LINK_CREATED, 'shortId': short_id})
    return response_201(short_id)
