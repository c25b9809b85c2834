"""
Dimension normalization (pad / truncate to the target width)
"""

from typing import List, Sequence


def normalize_dimensions(vector: Sequence[float], target_dim: int) -> List[float]:
    """
    Pad or truncate a vector to exactly target_dim components.

    Longer vectors keep their first target_dim values; shorter vectors are
    right-padded with zeros. Always returns a new list.
    """
    if target_dim < 0:
        raise ValueError(f"target_dim must be >= 0, got {target_dim}")

    values = [float(v) for v in vector[:target_dim]]
    if len(values) < target_dim:
        values.extend([0.0] * (target_dim - len(values)))
    return values
