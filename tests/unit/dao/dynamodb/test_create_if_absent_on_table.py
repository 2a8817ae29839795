"""Create-if-absent semantics of ShortLinkDynamoDBDAO against an emulated DynamoDB table

moto evaluates the `attribute_not_exists` condition, so these tests check the
stored items rather than the arguments handed to a mocked put_item.

Test coverage includes:

1. Conditional create
   - First put stores the item under the configured key name.
   - Second put of the same id is a CONFLICT and leaves the stored item untouched.

2. Allocation over a shared table
   - Every allocated id is distinct and stored exactly once.
   - An exhausted allocation writes nothing.
"""

import boto3
import pytest
from moto import mock_aws

from shortlinker.allocator import ShortLinkAllocator
from shortlinker.models import ShortLinkModel
from shortlinker.dao.base import WriteStatus
from shortlinker.dao.dynamodb import ShortLinkDynamoDBDAO
from shortlinker.exceptions import RetryBudgetExhaustedError
from shortlinker.utils import ShortIdGenerator


TABLE_NAME = 'short-links'
KEY_NAME = 'shortId'


# -------------------------------
# Fixtures
# -------------------------------


@pytest.fixture
def emulated_resource(monkeypatch):
    monkeypatch.setenv('AWS_ACCESS_KEY_ID', 'testing')
    monkeypatch.setenv('AWS_SECRET_ACCESS_KEY', 'testing')
    monkeypatch.setenv('AWS_DEFAULT_REGION', 'us-east-1')

    with mock_aws():
        resource = boto3.resource('dynamodb', region_name='us-east-1')
        resource.create_table(
            TableName=TABLE_NAME,
            KeySchema=[{'AttributeName': KEY_NAME, 'KeyType': 'HASH'}],
            AttributeDefinitions=[{'AttributeName': KEY_NAME, 'AttributeType': 'S'}],
            BillingMode='PAY_PER_REQUEST',
        )
        yield resource


@pytest.fixture
def emulated_table(emulated_resource):
    return emulated_resource.Table(TABLE_NAME)


@pytest.fixture
def dao(emulated_resource):
    return ShortLinkDynamoDBDAO(table_name=TABLE_NAME, key_name=KEY_NAME, dynamodb_resource=emulated_resource)


def stored_items(table) -> list[dict]:
    return table.scan()['Items']


# -------------------------------
# 1. Conditional create
# -------------------------------


def test_first_put_stores_item(dao, emulated_table):
    outcome = dao.create_if_absent(ShortLinkModel(id='zxcvb', url='https://first.com', created_at=1000))

    assert outcome.status is WriteStatus.CREATED
    assert stored_items(emulated_table) == [{KEY_NAME: 'zxcvb', 'url': 'https://first.com', 'clicks': 0, 'createdAt': 1000}]


def test_second_put_of_same_id_conflicts(dao, emulated_table):
    dao.create_if_absent(ShortLinkModel(id='zxcvb', url='https://first.com', created_at=1000))

    outcome = dao.create_if_absent(ShortLinkModel(id='zxcvb', url='https://second.com', created_at=2000, clicks=7))

    assert outcome.status is WriteStatus.CONFLICT
    assert stored_items(emulated_table) == [{KEY_NAME: 'zxcvb', 'url': 'https://first.com', 'clicks': 0, 'createdAt': 1000}]


# -------------------------------
# 2. Allocation over a shared table
# -------------------------------


def test_allocated_ids_are_distinct(dao, emulated_table):
    """Four possible ids ('aa', 'ab', 'ba', 'bb'): four allocations use each exactly once."""
    allocator = ShortLinkAllocator(dao=dao, id_generator=ShortIdGenerator(alphabet='ab', length=2), max_retries=200)

    ids = [allocator.allocate(f'https://mydomain.com/{n}') for n in range(4)]

    assert sorted(ids) == ['aa', 'ab', 'ba', 'bb']
    urls = {item[KEY_NAME]: item['url'] for item in stored_items(emulated_table)}
    assert urls == {short_id: f'https://mydomain.com/{n}' for n, short_id in enumerate(ids)}


def test_exhausted_allocation_writes_nothing(dao, emulated_table):
    dao.create_if_absent(ShortLinkModel(id='zxcvb', url='https://first.com', created_at=1000))
    allocator = ShortLinkAllocator(dao=dao, id_generator=lambda: 'zxcvb', clock=lambda: 2000, max_retries=3)

    with pytest.raises(RetryBudgetExhaustedError):
        allocator.allocate('https://second.com')

    assert stored_items(emulated_table) == [{KEY_NAME: 'zxcvb', 'url': 'https://first.com', 'clicks': 0, 'createdAt': 1000}]
