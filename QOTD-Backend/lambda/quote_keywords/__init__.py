"""Shared keyword extraction and image-matching helpers.

Pure, dependency-free code imported by both the smart-image-match Lambda
and the share-image client so the two never drift apart.
"""
from .content_hash import hash_content
from .image_selector import get_random_fallback_image, select_image_url
from .keyword_extractor import (
    extract_big_hits,
    extract_keywords,
    extract_tfidf,
    generate_search_query,
    tokenize,
)
from .moods import get_mood_by_category
from .vocabulary import BIG_HITS, CATEGORIES, DEFAULT_CATEGORY, FALLBACK_IMAGES, MOODS_BY_CATEGORY, STOPWORDS

__all__ = [
    'BIG_HITS',
    'CATEGORIES',
    'DEFAULT_CATEGORY',
    'FALLBACK_IMAGES',
    'MOODS_BY_CATEGORY',
    'STOPWORDS',
    'extract_big_hits',
    'extract_keywords',
    'extract_tfidf',
    'generate_search_query',
    'get_mood_by_category',
    'get_random_fallback_image',
    'hash_content',
    'select_image_url',
    'tokenize',
]
