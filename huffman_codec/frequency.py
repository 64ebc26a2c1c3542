"""
Frequency analysis of byte values
"""
from collections import Counter

ALPHABET_SIZE = 256


def char_frequency(data: bytes) -> dict[int, int]:
    """
    Build frequency table of byte values for given data.

    Only present symbols (count > 0) are included, ordered by symbol
    value. Empty data gives an empty table.

    Args:
        data: Input bytes

    Returns:
        Dictionary {symbol: count}
    """
    counts = Counter(data)
    return {symbol: counts[symbol] for symbol in sorted(counts)}
