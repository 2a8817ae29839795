"""Unit tests for helper functions in helpers.py.

Test coverage includes:

1. require_environment() decorator behavior
   - 1.1. Ensures decorated functions execute when all env vars are present.
   - 1.2. Ensures missing or empty env vars raise a descriptive error.

2. json_response() builds API Gateway responses

3. guarantee_500_response() decorator behavior
   - 3.1. Faulty handlers respond with 500 when deployed.
   - 3.2. Faulty handlers re-raise when running locally.
"""

import json

import pytest

from shortlinker.exceptions import ConfigurationError, MissingEnvironmentVariableError
from shortlinker.utils.helpers import require_environment, json_response, guarantee_500_response


# -------------------------------
# 1.1. require_environment() happy path
# -------------------------------


def test_require_environment_happy_path(monkeypatch):
    """1.1. Decorated function executes when all env vars are present."""
    monkeypatch.setenv('ENV1', 'value1')
    monkeypatch.setenv('ENV2', 'value2')

    @require_environment('ENV1', 'ENV2')
    def sample_function(x: int) -> int:
        return x + 1

    assert sample_function(1) == 2


# -------------------------------
# 1.2. require_environment() missing or empty env vars
# -------------------------------


@pytest.mark.parametrize(
    'env_setup, missing_names',
    [
        ({'ENV1': None, 'ENV2': 'value2'}, ["'ENV1'"]),
        ({'ENV1': '', 'ENV2': 'value2'}, ["'ENV1'"]),
        ({'ENV1': None, 'ENV2': None}, ["'ENV1'", "'ENV2'"]),
        ({'ENV1': '', 'ENV2': ''}, ["'ENV1'", "'ENV2'"]),
    ],
)
def test_require_environment_missing_or_empty(monkeypatch, env_setup, missing_names):
    """1.2. Missing or empty env vars raise a descriptive error."""
    for name, value in env_setup.items():
        if value is None:
            monkeypatch.delenv(name, raising=False)
        else:
            monkeypatch.setenv(name, value)

    @require_environment('ENV1', 'ENV2')
    def sample_function() -> None:
        pass

    expected_message = f'Missing required environment variables: {", ".join(missing_names)}'
    with pytest.raises(MissingEnvironmentVariableError, match=expected_message) as excinfo:
        sample_function()

    assert isinstance(excinfo.value, KeyError)
    assert isinstance(excinfo.value, ConfigurationError)


# -------------------------------
# 2. json_response()
# -------------------------------


def test_json_response_without_headers():
    assert json_response(201, {'id': 'zxcvb'}) == {
        'statusCode': 201,
        'headers': {'Content-Type': 'application/json'},
        'body': '{"id": "zxcvb"}',
    }


def test_json_response_with_headers():
    response = json_response(503, {'message': 'busy'}, headers={'Retry-After': '1'})

    assert response['headers'] == {'Content-Type': 'application/json', 'Retry-After': '1'}
    assert json.loads(response['body']) == {'message': 'busy'}


# -------------------------------
# 3. guarantee_500_response() behavior
# -------------------------------


def test_guarantee_500_response(monkeypatch):
    """3.1. Faulty lambda handler returns 500 response when not running locally."""
    monkeypatch.setattr('shortlinker.utils.helpers.running_locally', lambda: False)

    @guarantee_500_response
    def faulty_lambda_handler(event, context):
        raise RuntimeError('boom')

    response = faulty_lambda_handler({}, None)
    body = json.loads(response['body'])

    assert response['statusCode'] == 500
    assert body['message'] == 'Internal Server Error'
    assert body['error_code'] == 'UNKNOWN_INTERNAL_SERVER_ERROR'


def test_guarantee_500_response_reraises_when_running_locally(monkeypatch):
    """3.2. Faulty lambda handler reraises the original exception when running locally."""
    monkeypatch.setattr('shortlinker.utils.helpers.running_locally', lambda: True)

    @guarantee_500_response
    def faulty_lambda_handler(event, context):
        raise RuntimeError('boom')

    with pytest.raises(RuntimeError, match='boom'):
        faulty_lambda_handler({}, None)


def test_guarantee_500_response_passes_through_success(monkeypatch):
    monkeypatch.setattr('shortlinker.utils.helpers.running_locally', lambda: False)

    @guarantee_500_response
    def lambda_handler(event, context):
        return json_response(201, {'id': 'zxcvb'})

    assert lambda_handler({}, None)['statusCode'] == 201
