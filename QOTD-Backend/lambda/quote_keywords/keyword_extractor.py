"""Hybrid keyword extraction: dictionary "big hits" + frequency scoring.

Strategy:
 1. BIG HITS: whole-word regex matches against a curated vocabulary
    (cat, dog, love, money, ...). High precision, always kept first.
 2. SAFETY NET: a TF-IDF-style score over the remaining tokens picks up
    abstract terms the dictionary misses.
 3. The combination drives the image inventory query and search strings.

Implementation notes:
 - There is no corpus to draw document frequencies from, so the "IDF"
   factor is log(1 + tf). The weight is tf * log(1 + tf), a frequency-only
   proxy. Rankings depend on this exact formula.
 - Ties keep first-occurrence order (stable sort).
 - Word characters are ASCII only, so an accented letter splits a word
   ("café" -> "caf"), the same as the browser-side extractor.
"""
from typing import List, Sequence
import math
import re

from .vocabulary import BIG_HITS, STOPWORDS

NON_WORD_RE = re.compile(r'[^\w\s]', re.ASCII)

# term -> compiled \bterm(s)?\b, in vocabulary order
BIG_HIT_PATTERNS = tuple(
    (term, re.compile(r'\b' + re.escape(term) + r's?\b', re.ASCII))
    for term in dict.fromkeys(BIG_HITS)
)

SECONDARY_CANDIDATES = 5
MAX_SECONDARY = 3


def tokenize(text: str) -> List[str]:
    """Lowercase, blank out punctuation and split on whitespace.

    Order and duplicates are preserved; callers decide whether to count.
    """
    if not text:
        return []
    return NON_WORD_RE.sub(' ', text.lower()).split()


def extract_big_hits(text: str) -> List[str]:
    """Return vocabulary terms found as whole words in `text`.

    A trailing "s" is tolerated so "cats" hits "cat", while "caterpillar"
    never does. Results follow vocabulary order, not text order.
    """
    if not text:
        return []
    lower_text = text.lower()
    return [term for term, pattern in BIG_HIT_PATTERNS if pattern.search(lower_text)]


def extract_tfidf(text: str, top_n: int = 5) -> List[str]:
    """Return up to `top_n` statistically significant terms from `text`."""
    words = [w for w in tokenize(text) if len(w) > 2 and w not in STOPWORDS]
    if not words:
        return []

    counts = {}
    for w in words:
        counts[w] = counts.get(w, 0) + 1

    total = len(words)
    scores = []
    for term, count in counts.items():
        tf = count / total
        scores.append((term, tf * math.log(1 + tf)))

    scores.sort(key=lambda x: x[1], reverse=True)
    return [term for term, _ in scores[:top_n]]


def extract_keywords(text: str, include_secondary: bool = True) -> List[str]:
    """Big hits first, then up to three statistical terms not already present."""
    primary = extract_big_hits(text)
    if not include_secondary:
        return primary

    secondary = [kw for kw in extract_tfidf(text, SECONDARY_CANDIDATES) if kw not in primary]
    return primary + secondary[:MAX_SECONDARY]


def generate_search_query(keywords: Sequence[str], mood: str) -> str:
    """Build an image-search string from the two leading keywords plus mood."""
    if not keywords:
        return mood
    primary = ' '.join(keywords[:2])
    return f"{primary} {mood}"
