"""
Match cache: content hash x category -> matched image ids.

Entries are written once and never updated or expired here. The cache is
an optimization only, so every failure is logged and reported as a miss
(reads) or ignored (writes).
"""
import logging
import os
from datetime import datetime, timezone
from typing import List, Optional, Sequence

from botocore.exceptions import BotoCoreError, ClientError

from .store import get_table

logger = logging.getLogger(__name__)

IMAGE_CACHE_TABLE = os.getenv('IMAGE_CACHE_TABLE', 'image_cache')


class MatchCache:
    """DynamoDB-backed cache (partition key `content_hash`, sort key `category`)."""

    def __init__(self, table=None, table_name: str = IMAGE_CACHE_TABLE):
        self.table_name = table_name
        self._table = table

    @property
    def table(self):
        if self._table is None:
            self._table = get_table(self.table_name)
        return self._table

    def get(self, content_hash: str, category: str) -> Optional[List[str]]:
        """Cached image ids, or None on a miss or lookup failure."""
        try:
            response = self.table.get_item(Key={'content_hash': content_hash, 'category': category})
        except (ClientError, BotoCoreError) as e:
            logger.warning(f"⚠️ Cache read failed for {content_hash} (treated as miss): {e}")
            return None

        item = response.get('Item')
        if not item:
            return None
        image_ids = list(item.get('matched_image_ids') or [])
        return image_ids or None

    def put(self, content_hash: str, category: str, image_ids: Sequence[str]) -> bool:
        """Insert a new entry. Returns True only when an entry was written.

        An existing entry for the same key is left untouched.
        """
        if not image_ids:
            return False
        try:
            self.table.put_item(
                Item={
                    'content_hash': content_hash,
                    'category': category,
                    'matched_image_ids': list(image_ids),
                    'created_at': datetime.now(timezone.utc).isoformat(),
                },
                ConditionExpression='attribute_not_exists(content_hash)'
            )
        except ClientError as e:
            if e.response.get('Error', {}).get('Code') == 'ConditionalCheckFailedException':
                logger.info(f"Cache entry {content_hash}/{category} already exists, skipping write")
            else:
                logger.warning(f"⚠️ Cache write failed (non-critical): {e}")
            return False
        except BotoCoreError as e:
            logger.warning(f"⚠️ Cache write failed (non-critical): {e}")
            return False

        logger.info(f"✅ Cached {len(image_ids)} image ids under {content_hash}/{category}")
        return True
