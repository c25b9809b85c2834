"""
Similarity functions (cosine)
"""

import numpy as np
from typing import List


def cosine_similarities(query: List[float], matrix: List[List[float]]) -> np.ndarray:
    """
    Cosine similarity of one query vector against every row of a matrix (vectorized).

    Rows (or a query) with zero norm score 0.0.
    """
    if not matrix:
        return np.zeros(0)

    query_arr = np.asarray(query, dtype=np.float64)  # Shape: [d]
    matrix_arr = np.asarray(matrix, dtype=np.float64)  # Shape: [N, d]

    query_norm = np.linalg.norm(query_arr)
    row_norms = np.linalg.norm(matrix_arr, axis=1)
    denominators = row_norms * query_norm

    dots = matrix_arr @ query_arr
    return np.divide(dots, denominators, out=np.zeros_like(dots), where=denominators != 0)
