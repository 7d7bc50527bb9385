# newsrag/domain/fingerprint.py

"""
Content fingerprints for cache keys

32-bit FNV-1a over UTF-16 code units, rendered as unpadded lowercase hex.
Not cryptographic; collisions are possible and tolerated.
"""

FNV_OFFSET_BASIS = 0x811C9DC5
FNV_PRIME = 0x01000193


def fingerprint(text: str) -> str:
    """
    Hash text into a short deterministic digest

    Args:
        text: Input string (order-sensitive)

    Returns:
        Hex digest, e.g. fingerprint("a") == "e40c292c"
    """
    h = FNV_OFFSET_BASIS
    raw = text.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(raw), 2):
        h ^= raw[i] | (raw[i + 1] << 8)
        h = (h * FNV_PRIME) & 0xFFFFFFFF
    return format(h, "x")
