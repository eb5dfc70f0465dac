"""
Client for the smart-image-match function.

Posts quote text to the deployed Lambda, then picks one background from the
returned candidates. Any failure (missing config, HTTP error, bad JSON,
empty result) ends in one of the built-in fallback images, so callers
always get a URL back.

Environment variables (a local .env is honoured):
- SMART_MATCH_URL: full URL of the smart-image-match endpoint
- SMART_MATCH_API_KEY: optional bearer token
- SMART_MATCH_TIMEOUT: request timeout in seconds (default: 10)
"""
import logging
import os
import random
from typing import Dict, List, Optional

import requests
from dotenv import load_dotenv

from quote_keywords import DEFAULT_CATEGORY, select_image_url

load_dotenv()

logger = logging.getLogger(__name__)

SMART_MATCH_URL = os.getenv('SMART_MATCH_URL', '')
SMART_MATCH_API_KEY = os.getenv('SMART_MATCH_API_KEY', '')
SMART_MATCH_TIMEOUT = float(os.getenv('SMART_MATCH_TIMEOUT', '10'))


class SmartMatchClient:

    def __init__(self, url: Optional[str] = None, api_key: Optional[str] = None,
                 timeout: Optional[float] = None, session: Optional[requests.Session] = None):
        self.url = url if url is not None else SMART_MATCH_URL
        self.api_key = api_key if api_key is not None else SMART_MATCH_API_KEY
        self.timeout = timeout if timeout is not None else SMART_MATCH_TIMEOUT
        self.session = session or requests.Session()

    def _headers(self) -> Dict[str, str]:
        headers = {
            'Content-Type': 'application/json',
            'X-Client-Info': 'quote-share-python',
        }
        if self.api_key:
            headers['Authorization'] = f'Bearer {self.api_key}'
        return headers

    def fetch_matches(self, content_text: str, category: str = DEFAULT_CATEGORY) -> List[Dict]:
        """Return the candidate ImageRecords for `content_text`, or [] on any failure."""
        if not self.url:
            logger.warning("⚠️ SMART_MATCH_URL not configured, skipping smart match")
            return []

        try:
            resp = self.session.post(
                self.url,
                json={'contentText': content_text, 'category': category},
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"❌ Smart image matching failed: {e}")
            return []

        if resp.status_code != 200:
            logger.warning(f"⚠️ Smart match API failed: {resp.status_code}")
            return []

        try:
            data = resp.json()
        except ValueError as e:
            logger.error(f"❌ Smart match returned invalid JSON: {e}")
            return []

        images = data.get('images') if isinstance(data, dict) else None
        if not isinstance(images, list):
            logger.warning("⚠️ Smart match response has no images list")
            return []
        images = [img for img in images if isinstance(img, dict)]
        if not images:
            logger.warning("⚠️ No matching images returned")
        return images

    def get_background_url(self, content_text: str, category: str = DEFAULT_CATEGORY,
                           rng: Optional[random.Random] = None) -> str:
        """Randomly pick one of the matches for variety; fallback image when there are none."""
        return select_image_url(self.fetch_matches(content_text, category), rng)
