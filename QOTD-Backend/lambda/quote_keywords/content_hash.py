"""Cache-key hashing for quote text.

32-bit rolling hash (h = h * 31 + code unit) over the UTF-16 code units of
the text, the same units a browser's charCodeAt walks. Not cryptographic:
collisions are possible and only cost a wrong cache hit.
"""

HASH_PREFIX = 'hash_'

_DIGITS = '0123456789abcdefghijklmnopqrstuvwxyz'


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def _base36(value: int) -> str:
    if value == 0:
        return '0'
    out = []
    while value:
        value, rem = divmod(value, 36)
        out.append(_DIGITS[rem])
    return ''.join(reversed(out))


def hash_content(text: str) -> str:
    """Return a deterministic `hash_<base36>` key for `text`."""
    h = 0
    data = (text or '').encode('utf-16-le', 'surrogatepass')
    for i in range(0, len(data), 2):
        code_unit = data[i] | (data[i + 1] << 8)
        h = _to_int32(h * 31 + code_unit)
    return HASH_PREFIX + _base36(abs(h))
