"""DynamoDB mixin providing shared table resource initialization.

Responsibilities:
    - Initialize (or reuse) a boto3 DynamoDB resource
    - Point it at LocalStack when running locally
    - Expose the Table handle and its partition key name to subclasses

Example:
    Typical usage with a DAO implementation:

        >>> class ShortLinkDynamoDBDAO(DynamoDBTableMixin, ShortLinkBaseDAO):
        ...     pass
        ...
        >>> dao = ShortLinkDynamoDBDAO(table_name='short-links', key_name='id')
        >>> dao.table.name
        'short-links'
"""

from typing import Any, Optional

import boto3

from shortlinker.utils.constants import Defaults
from shortlinker.utils.runtime import localstack_endpoint


class DynamoDBTableMixin:
    """Mixin DynamoDB table setup for DynamoDB-backed DAOs.

    Attributes:
        table (boto3 DynamoDB Table):
            Table resource used by subclasses.
        table_name (str):
            Name of the table.
        key_name (str):
            Name of the table's partition key attribute.
    """

    def __init__(
        self,
        table_name: str,
        key_name: str = Defaults.KEY_NAME,
        dynamodb_resource: Optional[Any] = None,
        region_name: Optional[str] = None,
    ):
        """Initialize a DynamoDB-based DAO

        Args:
            table_name (str):
                DynamoDB table holding the records.

            key_name (str):
                Partition key attribute name. Defaults to 'id'.

            dynamodb_resource (Optional[Any]):
                Pre-initialized boto3 DynamoDB service resource (useful in tests).
                If None, a new resource is created (pointing to LocalStack in local mode).

            region_name (Optional[str]):
                AWS region for a newly created resource. Defaults to the
                Lambda's AWS_REGION via boto3's own resolution.
        """
        if not table_name:
            raise ValueError('DynamoDB table name must be a non-empty string.')
        if not key_name:
            raise ValueError('DynamoDB key name must be a non-empty string.')

        if dynamodb_resource is None:
            dynamodb_resource = boto3.resource(
                'dynamodb',
                region_name=region_name,
                endpoint_url=localstack_endpoint(),
            )

        self.table_name = table_name
        self.key_name = key_name
        self.table = dynamodb_resource.Table(table_name)
