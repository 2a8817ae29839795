from shortlinker.dao.dynamodb.short_link_dynamodb_dao import ShortLinkDynamoDBDAO
from shortlinker.dao.dynamodb.mixins import DynamoDBTableMixin


__all__ = [
    'ShortLinkDynamoDBDAO',
    'DynamoDBTableMixin',
]
