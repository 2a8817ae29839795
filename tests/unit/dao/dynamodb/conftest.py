from unittest.mock import MagicMock

import pytest


@pytest.fixture
def table():
    """Mock a boto3 DynamoDB Table resource."""
    _table = MagicMock()
    _table.name = 'short-links'
    _table.put_item.return_value = {}
    return _table


@pytest.fixture
def dynamodb_resource(table):
    """Mock a boto3 DynamoDB service resource returning the mocked table."""
    resource = MagicMock()
    resource.Table.return_value = table
    return resource
