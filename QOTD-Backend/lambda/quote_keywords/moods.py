"""Category -> mood tags used to scope the image inventory."""
from typing import Tuple

from .vocabulary import DEFAULT_CATEGORY, MOODS_BY_CATEGORY


def get_mood_by_category(category: str) -> Tuple[str, ...]:
    """Ordered mood tags for `category`; unknown categories get the quotes moods."""
    return MOODS_BY_CATEGORY.get(category, MOODS_BY_CATEGORY[DEFAULT_CATEGORY])
