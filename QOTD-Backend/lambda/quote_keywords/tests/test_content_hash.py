import os
import sys

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from quote_keywords.content_hash import hash_content


def test_known_values():
    assert hash_content('') == 'hash_0'
    assert hash_content('a') == 'hash_2p'
    assert hash_content('ab') == 'hash_2e9'


def test_hash_is_pure():
    text = 'The cat sat in the sunshine and dreamed of success'
    first = hash_content(text)
    assert all(hash_content(text) == first for _ in range(5))
    assert first.startswith('hash_')


def test_distinct_texts_differ():
    assert hash_content('Stay hungry') != hash_content('Stay foolish')


def test_wraps_to_signed_32_bit():
    # long input overflows many times; digits must stay within 32-bit range
    digest = hash_content('x' * 10000)
    assert int(digest[len('hash_'):], 36) <= 2 ** 31


def test_astral_characters_hash_as_surrogate_pairs():
    # U+1F600 is two UTF-16 code units: 0xD83D, 0xDE00
    expected = ((0xD83D * 31) + 0xDE00) & 0xFFFFFFFF
    digest = hash_content('\U0001F600')
    assert int(digest[len('hash_'):], 36) == expected
