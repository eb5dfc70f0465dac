"""Smart image match Lambda: quote text in, ranked background images out."""
from .image_inventory import ImageInventory, MATCH_LIMIT
from .match_cache import MatchCache
from .smart_image_match import lambda_handler, match_images, resolve_background_url

__all__ = [
    'ImageInventory',
    'MATCH_LIMIT',
    'MatchCache',
    'lambda_handler',
    'match_images',
    'resolve_background_url',
]
