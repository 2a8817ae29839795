"""Data Access Object (DAO) implementation for storing short links in DynamoDB

Each short link is one item keyed by `<key_name>` (partition key):

    {
        "<key_name>": "zxcvb",
        "url": "https://example.com",
        "clicks": 0,
        "createdAt": 1234567890123
    }

Classes:
    ShortLinkDynamoDBDAO:
        DAO for atomically creating ShortLinkModel records in a DynamoDB table.

Example:
    >>> from shortlinker.models import ShortLinkModel
    >>> from shortlinker.dao.dynamodb import ShortLinkDynamoDBDAO

    >>> dao = ShortLinkDynamoDBDAO(table_name='short-links', key_name='id')
    >>> dao.insert(ShortLinkModel(id='zxcvb', url='https://example.com', created_at=1234567890))
    <ShortLinkDynamoDBDAO>
"""

from beartype import beartype

from shortlinker.models import ShortLinkModel
from shortlinker.dao.base import ShortLinkBaseDAO
from shortlinker.dao.dynamodb.mixins import DynamoDBTableMixin
from shortlinker.dao.dynamodb.helpers import handle_dynamodb_errors


class ShortLinkDynamoDBDAO(DynamoDBTableMixin, ShortLinkBaseDAO):
    """DynamoDB-based Data Access Object (DAO) for short links

    Attributes (see DynamoDBTableMixin):
        table (boto3 DynamoDB Table):
            Table resource the items are written to.
        key_name (str):
            Partition key attribute name.

    Methods:
        insert(short_link: ShortLinkModel, **kwargs) -> ShortLinkDynamoDBDAO:
            PutItem guarded by attribute_not_exists(<key_name>).
            Raises ShortLinkAlreadyExistsError when the id is taken.
            Raises DataStoreError on any other DynamoDB failure.
    """

    def item(self, short_link: ShortLinkModel) -> dict:
        return {
            self.key_name: short_link.id,
            'url': short_link.url,
            'clicks': short_link.clicks,
            'createdAt': short_link.created_at,
        }

    def condition_expression(self) -> str:
        return f'attribute_not_exists({self.key_name})'

    @handle_dynamodb_errors
    @beartype
    def insert(self, short_link: ShortLinkModel, **kwargs) -> 'ShortLinkDynamoDBDAO':
        """Put a short link item unless an item with the same key exists

        The existence check is DynamoDB's ConditionExpression, evaluated
        atomically with the write on the server side.

        Args:
            short_link (ShortLinkModel):
                The record to create.
            **kwargs:
                Optional keyword arguments (for future use).

        Returns:
            ShortLinkDynamoDBDAO: self (for method chaining)

        Raises:
            ShortLinkAlreadyExistsError:
                If an item with the same key already exists.
            DataStoreError:
                On any other DynamoDB or connectivity failure.
        """
        self.table.put_item(
            Item=self.item(short_link),
            ConditionExpression=self.condition_expression(),
        )
        return self
