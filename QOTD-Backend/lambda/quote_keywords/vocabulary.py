"""Fixed vocabularies shared by the client and the smart-image-match Lambda.

Everything here is loaded once at import and never mutated.
"""
from types import MappingProxyType

# High-priority terms that always win a slot in the keyword list.
# Plural forms are matched by the extractor, so only singulars are listed.
BIG_HITS = (
    # Animals
    'cat', 'dog', 'bird', 'horse', 'lion', 'eagle', 'wolf', 'fox',
    'rabbit', 'butterfly', 'fish', 'whale', 'shark', 'snake',

    # Emotions & relationships
    'love', 'laugh', 'happy', 'sad', 'angry', 'fear', 'hope', 'dream',
    'family', 'friend', 'relationship', 'mother', 'father',

    # Nature & elements
    'sunset', 'sunrise', 'ocean', 'mountain', 'forest', 'tree', 'flower',
    'sky', 'rain', 'storm', 'sun', 'moon', 'star', 'night', 'day',

    # Concepts & values
    'success', 'failure', 'courage', 'strength', 'power', 'wisdom', 'truth',
    'beauty', 'peace', 'freedom', 'justice', 'knowledge', 'money', 'wealth',
    'health', 'life', 'death', 'work', 'time',

    # Actions & states
    'run', 'jump', 'fly', 'dance', 'sing', 'cry', 'smile', 'think', 'grow',
    'believe', 'try', 'persist',
)

# Common but meaningless words dropped before statistical scoring
STOPWORDS = frozenset({
    'the', 'a', 'an', 'and', 'or', 'but', 'in', 'on', 'at', 'to', 'for',
    'of', 'with', 'by', 'from', 'is', 'are', 'was', 'were', 'be', 'been',
    'being', 'have', 'has', 'had', 'do', 'does', 'did', 'will', 'would',
    'could', 'should', 'may', 'might', 'must', 'can', 'it', 'its', 'this',
    'that', 'these', 'those', 'i', 'you', 'he', 'she', 'we', 'they',
    'what', 'which', 'who', 'why', 'how', 'if', 'as', 'so', 'than', 'up',
})

DEFAULT_CATEGORY = 'quotes'

CATEGORIES = ('jokes', 'facts', 'quotes')

MOODS_BY_CATEGORY = MappingProxyType({
    'jokes': ('vibrant', 'playful', 'bright', 'colorful', 'energetic'),
    'facts': ('minimalist', 'clean', 'sharp', 'educational', 'scientific'),
    'quotes': ('serene', 'ethereal', 'atmospheric', 'contemplative', 'peaceful'),
})

# Last-resort backgrounds when the inventory has nothing for a category
FALLBACK_IMAGES = (
    'https://images.pexels.com/photos/1761279/pexels-photo-1761279.jpeg?auto=compress&cs=tinysrgb&w=1600',
    'https://images.pexels.com/photos/1619317/pexels-photo-1619317.jpeg?auto=compress&cs=tinysrgb&w=1600',
)
