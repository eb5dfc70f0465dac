#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Smart Image Match Lambda
========================
Returns up to ten background images suited to a piece of quote text.

Expected event (API Gateway proxy):
    {
        "httpMethod": "POST",
        "body": "{\"contentText\": \"...\", \"category\": \"quotes\", \"contentHash\": \"hash_abc\"}"
    }

Flow:
1. Hash the text (or use the caller's contentHash)
2. Look up the match cache
3. Hit: load the cached image records
4. Miss: extract keywords + moods, query the inventory (with fallback),
   cache the ids (best effort)
5. Respond with {success, count, images, cached}
"""

import json
import logging
import random
from typing import Dict, Optional

from quote_keywords import extract_keywords, get_mood_by_category, hash_content, select_image_url

from .image_inventory import ImageInventory, MATCH_LIMIT
from .match_cache import MatchCache

logger = logging.getLogger()
logger.setLevel(logging.INFO)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,POST,PUT,DELETE,OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type,Authorization,X-Client-Info,Apikey,X-Amz-Date,X-Api-Key,X-Amz-Security-Token"
}


class RequestValidationError(ValueError):
    """Raised for malformed or incomplete match requests (HTTP 400)."""


def build_response(status_code: int, body: Optional[Dict] = None) -> Dict:
    return {
        "statusCode": status_code,
        "headers": {**CORS_HEADERS, "Content-Type": "application/json"},
        "body": json.dumps(body) if body is not None else ""
    }


def parse_request(event: Dict) -> Dict:
    """Pull contentText/category/contentHash out of the proxy event body."""
    body = event.get('body') or {}
    if isinstance(body, str):
        try:
            body = json.loads(body) if body.strip() else {}
        except json.JSONDecodeError as e:
            raise RequestValidationError(f"Invalid JSON body: {e}")
    if not isinstance(body, dict):
        raise RequestValidationError("Request body must be a JSON object")

    content_text = body.get('contentText')
    category = body.get('category')
    if not content_text or not category:
        raise RequestValidationError("Missing contentText or category")
    if not isinstance(content_text, str) or not isinstance(category, str):
        raise RequestValidationError("contentText and category must be strings")

    return {
        'content_text': content_text,
        'category': category,
        'content_hash': body.get('contentHash') or None,
    }


def match_images(content_text: str, category: str, content_hash: Optional[str] = None,
                 inventory: Optional[ImageInventory] = None, cache: Optional[MatchCache] = None) -> Dict:
    """Run the cache -> keywords -> inventory protocol for one piece of text.

    Returns a dict with keys: images, cached, content_hash, keywords
    (keywords is empty on a cache hit, nothing was extracted).
    """
    inventory = inventory or ImageInventory()
    cache = cache or MatchCache()
    content_hash = content_hash or hash_content(content_text)

    cached_ids = cache.get(content_hash, category)
    if cached_ids:
        images = inventory.get_images_by_ids(cached_ids)
        if images:
            logger.info(f"✅ Cache hit {content_hash}: {len(images)} images")
            return {'images': images, 'cached': True, 'content_hash': content_hash, 'keywords': []}
        logger.warning(f"⚠️ Cached ids for {content_hash} no longer resolve, recomputing")

    keywords = extract_keywords(content_text)
    moods = get_mood_by_category(category)
    logger.info(f"🔍 {content_hash} keywords={keywords} moods={list(moods)}")

    images = inventory.find_images(keywords, moods, category, MATCH_LIMIT)
    image_ids = [img['id'] for img in images if img.get('id')]
    if image_ids:
        cache.put(content_hash, category, image_ids)

    return {'images': images, 'cached': False, 'content_hash': content_hash, 'keywords': keywords}


def resolve_background_url(content_text: str, category: str, rng: Optional[random.Random] = None,
                           inventory: Optional[ImageInventory] = None, cache: Optional[MatchCache] = None) -> str:
    """Full protocol plus selection: always returns one image URL."""
    result = match_images(content_text, category, inventory=inventory, cache=cache)
    return select_image_url(result['images'], rng)


def lambda_handler(event, context):
    """
    Lambda handler for smart image matching.
    """
    request_context = event.get('requestContext') or {}
    method = event.get('httpMethod') or (request_context.get('http') or {}).get('method') or ''
    if method.upper() == 'OPTIONS':
        return build_response(200)

    try:
        request = parse_request(event)
    except RequestValidationError as e:
        logger.warning(f"⚠️ Rejected request: {e}")
        return build_response(400, {"error": str(e)})

    try:
        result = match_images(request['content_text'], request['category'], request['content_hash'])
        images = result['images']
        return build_response(200, {
            "success": True,
            "count": len(images),
            "images": images,
            "cached": result['cached']
        })
    except Exception as e:
        logger.error(f"❌ Smart image match failed: {e}")
        return build_response(500, {
            "error": "Failed to process image matching request",
            "details": str(e)
        })
