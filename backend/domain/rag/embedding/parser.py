"""
Extract an embedding array from free-form provider output
"""

import json
import math
import re
from typing import List

from core.exceptions import ParseError

# First bracketed run of numbers, separators and exponent characters
_ARRAY_PATTERN = re.compile(r"\[[\d\s,.\-+eE]+\]")


def extract_embedding(content: str) -> List[float]:
    """
    Parse the first bracketed numeric array found in content.

    Raises:
        ParseError: if there is no array, it is not valid JSON, it is empty,
            or any component is not a finite number.
    """
    if not isinstance(content, str) or not content:
        raise ParseError("Provider returned empty content")

    match = _ARRAY_PATTERN.search(content)
    if not match:
        raise ParseError("No numeric array found in provider output")

    try:
        parsed = json.loads(match.group(0))
    except ValueError as e:
        raise ParseError(f"Malformed numeric array: {e}")

    if not isinstance(parsed, list) or not parsed:
        raise ParseError("Provider array is empty")

    vector = []
    for value in parsed:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ParseError("Provider array contains a non-numeric value")
        value = float(value)
        if not math.isfinite(value):
            raise ParseError("Provider array contains a non-finite value")
        vector.append(value)
    return vector
