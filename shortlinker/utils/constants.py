from enum import StrEnum


class Defaults:
    """Default allocation parameters."""

    MAX_RETRIES = 10  # Total conditional-create attempts per allocation
    ID_LENGTH = 5  # Generated short id length
    KEY_NAME = 'id'  # DynamoDB partition key attribute name
    STORE_BACKEND = 'dynamodb'


class Backend(StrEnum):
    """Supported record store backends."""

    DYNAMODB = 'dynamodb'
    REDIS = 'redis'


class ENV:
    """Environment variable names."""

    class App(StrEnum):
        APP_ENV = 'APP_ENV'
        APP_NAME = 'APP_NAME'
        AWS_SAM_LOCAL = 'AWS_SAM_LOCAL'
        LOG_LEVEL = 'LOG_LEVEL'

    class Allocator(StrEnum):
        MAX_RETRIES = 'MAX_RETRIES'
        ID_LENGTH = 'ID_LENGTH'

    class Store(StrEnum):
        BACKEND = 'STORE_BACKEND'

    class DynamoDB(StrEnum):
        TABLE_NAME = 'TABLE_NAME'
        KEY_NAME = 'KEY_NAME'

    class Redis(StrEnum):
        HOST = 'REDIS_HOST'
        PORT = 'REDIS_PORT'
        DB = 'REDIS_DB'
        USERNAME = 'REDIS_USERNAME'
        PASSWORD = 'REDIS_PASSWORD'

    class LocalStack(StrEnum):
        ENDPOINT = 'LOCALSTACK_ENDPOINT'  # usually http://localstack:4566


# Error codes
UNKNOWN_INTERNAL_SERVER_ERROR = 'UNKNOWN_INTERNAL_SERVER_ERROR'
