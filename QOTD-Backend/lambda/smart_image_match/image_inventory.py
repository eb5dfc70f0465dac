"""
Image inventory queries for the smart-image-match Lambda.

Records live in a DynamoDB table keyed by `id` with a global secondary index
on `category`. DynamoDB applies `Limit` before filter expressions, so the
filtered query pages through the index until enough records are collected.

Store errors never propagate: they are logged and reported as "no images",
which sends the caller down the fallback path.
"""
import logging
import os
from functools import reduce
from typing import Dict, List, Optional, Sequence

from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import BotoCoreError, ClientError

from .store import get_table

logger = logging.getLogger(__name__)

IMAGES_TABLE = os.getenv('IMAGES_TABLE', 'background_images')
IMAGE_CATEGORY_INDEX = os.getenv('IMAGE_CATEGORY_INDEX', 'category-index')

MATCH_LIMIT = 10


def to_image_record(item: Dict) -> Dict:
    """Normalize a raw DynamoDB item to a JSON-ready ImageRecord."""
    keywords = item.get('keywords') or []
    if isinstance(keywords, (set, frozenset)):
        keywords = sorted(keywords)
    return {
        'id': item.get('id'),
        'url': item.get('url'),
        'category': item.get('category'),
        'mood': item.get('mood'),
        'keywords': list(keywords),
        'source': item.get('source'),
    }


class ImageInventory:
    """Read-only view of the background image store."""

    def __init__(self, table=None, table_name: str = IMAGES_TABLE, category_index: str = IMAGE_CATEGORY_INDEX):
        self.table_name = table_name
        self.category_index = category_index
        self._table = table

    @property
    def table(self):
        if self._table is None:
            self._table = get_table(self.table_name)
        return self._table

    def _query_category(self, category: str, limit: int, filter_expression=None) -> List[Dict]:
        kwargs = {
            'IndexName': self.category_index,
            'KeyConditionExpression': Key('category').eq(category),
        }
        if filter_expression is not None:
            kwargs['FilterExpression'] = filter_expression
        else:
            kwargs['Limit'] = limit

        records: List[Dict] = []
        while True:
            response = self.table.query(**kwargs)
            for item in response.get('Items', []):
                records.append(to_image_record(item))
                if len(records) >= limit:
                    return records
            last_key = response.get('LastEvaluatedKey')
            if not last_key:
                return records
            kwargs['ExclusiveStartKey'] = last_key

    def query_matching_images(self, keywords: Sequence[str], moods: Sequence[str], category: str,
                              limit: int = MATCH_LIMIT) -> List[Dict]:
        """Records in `category` whose mood is in `moods` and that share any keyword."""
        condition = Attr('mood').is_in(list(moods))
        if keywords:
            keyword_condition = reduce(lambda a, b: a | b, [Attr('keywords').contains(kw) for kw in keywords])
            condition = condition & keyword_condition

        try:
            return self._query_category(category, limit, condition)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"❌ Image query failed for category '{category}': {e}")
            return []

    def get_fallback_images(self, category: str, limit: int = MATCH_LIMIT) -> List[Dict]:
        """Unfiltered sample of the category."""
        try:
            return self._query_category(category, limit)
        except (ClientError, BotoCoreError) as e:
            logger.error(f"❌ Fallback query failed for category '{category}': {e}")
            return []

    def find_images(self, keywords: Sequence[str], moods: Sequence[str], category: str,
                    limit: int = MATCH_LIMIT) -> List[Dict]:
        """Filtered query, falling back to the plain category sample when it finds nothing."""
        images = self.query_matching_images(keywords, moods, category, limit)
        if images:
            logger.info(f"✅ {len(images)} images matched keywords={list(keywords)} in '{category}'")
            return images

        logger.info(f"⚠️ No keyword/mood match in '{category}', using fallback sample")
        return self.get_fallback_images(category, limit)

    def get_images_by_ids(self, image_ids: Sequence[str]) -> List[Dict]:
        """Full records for cached ids, in cached order. Missing ids are skipped."""
        records: List[Dict] = []
        try:
            for image_id in image_ids:
                response = self.table.get_item(Key={'id': image_id})
                item: Optional[Dict] = response.get('Item')
                if item:
                    records.append(to_image_record(item))
        except (ClientError, BotoCoreError) as e:
            logger.error(f"❌ Failed to load cached images: {e}")
            return []
        return records
