"""Pick the single background shown to the user from a ranked candidate list."""
from typing import Dict, Optional, Sequence
import random

from .vocabulary import FALLBACK_IMAGES

MAX_CANDIDATES = 10


def get_random_fallback_image(rng: Optional[random.Random] = None) -> str:
    rng = rng or random
    return rng.choice(FALLBACK_IMAGES)


def select_image_url(images: Sequence[Dict], rng: Optional[random.Random] = None) -> str:
    """Uniformly pick one of the first ten candidates' URLs.

    Candidates without a URL are skipped; with nothing usable left the
    built-in fallback set is used, so a URL is always returned.
    """
    rng = rng or random
    candidates = list(images)[:MAX_CANDIDATES] if isinstance(images, (list, tuple)) else []
    urls = [img.get('url') for img in candidates if isinstance(img, dict) and img.get('url')]
    if not urls:
        return get_random_fallback_image(rng)
    return rng.choice(urls)
