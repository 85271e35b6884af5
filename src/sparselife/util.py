from __future__ import annotations
import re
from typing import Optional

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

# Like .NET's integer `TryParse()`: optional sign, ASCII digits only (no
# underscores, no fractions, no exponents), surrounding whitespace allowed
INTEGER_RGX = re.compile(r"\s*[-+]?[0-9]+\s*")


def parse_int(s: str, minimum: int, maximum: int) -> Optional[int]:
    """
    Parse ``s`` as a decimal integer in the range ``[minimum, maximum]``.
    Returns `None` if ``s`` is not such an integer.
    """
    if not INTEGER_RGX.fullmatch(s):
        return None
    n = int(s)
    if minimum <= n <= maximum:
        return n
    else:
        return None
