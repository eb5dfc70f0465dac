"""Client side of the quote share flow: smart-matched backgrounds and share images."""
from .share_image import generate_quote_image
from .smart_match_client import SmartMatchClient

__all__ = ['SmartMatchClient', 'generate_quote_image']
