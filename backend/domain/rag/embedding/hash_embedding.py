"""
Deterministic hash-based embedding, used when the provider path fails
"""

from typing import List

import numpy as np

_INT32_OFFSET = 2 ** 31
_UINT32_MASK = 0xFFFFFFFF


def _wrap_int32(values: np.ndarray) -> np.ndarray:
    """Wrap int64 values to signed 32-bit range."""
    return ((values + _INT32_OFFSET) & _UINT32_MASK) - _INT32_OFFSET


def rolling_hashes(text: str, dimensions: int) -> np.ndarray:
    """
    Rolling 32-bit hash of text, one per output dimension.

    For dimension i every character code is scaled by (i + 1) before it is
    folded in: h = int32(h * 31 + code * (i + 1)), starting from 0.
    """
    multipliers = np.arange(1, dimensions + 1, dtype=np.int64)
    hashes = np.zeros(dimensions, dtype=np.int64)
    for char in text:
        hashes = _wrap_int32(hashes * 31 + ord(char) * multipliers)
    return hashes


def hash_embed(text: str, dimensions: int) -> List[float]:
    """
    Generate a unit-length embedding from text without any I/O.

    The same text always yields a bit-identical vector. Empty (or
    whitespace-only) text yields the zero vector.

    Args:
        text: Input text; lowercased and stripped before hashing.
        dimensions: Output length.

    Returns:
        List of `dimensions` floats with L2 norm 1 (or all zeros).
    """
    if dimensions < 0:
        raise ValueError(f"dimensions must be >= 0, got {dimensions}")

    normalized_text = text.lower().strip()
    if not normalized_text:
        return [0.0] * dimensions

    hashes = rolling_hashes(normalized_text, dimensions).astype(np.float64)
    components = np.sin(hashes) * 0.5 + np.cos(hashes * 0.7) * 0.5

    magnitude = float(np.linalg.norm(components))
    return (components / (magnitude or 1.0)).tolist()
