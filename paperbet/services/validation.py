"""
Shared input handling for the calculator services.

Form fields arrive as raw text (or as numbers from the JSON API).  Nothing
here raises for bad input: unparseable amounts come back as ``None`` and the
calculators turn that into a field-keyed message.
"""

import math
from typing import Dict, Optional, Union

# Field name -> user-facing message.  Empty means the inputs are valid.
ErrorMap = Dict[str, str]

# What a caller may hand us for a money/number field.
Amount = Union[str, int, float, None]

GENERAL_KEY = "general"


def is_blank(text: Optional[str]) -> bool:
    """True for ``None`` or whitespace-only text."""
    return text is None or not text.strip()


def parse_amount(value: Amount) -> Optional[float]:
    """Parse a number field; ``None`` when empty, non-numeric or non-finite."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = value.strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    return number if math.isfinite(number) else None


def positive_amount(value: Amount) -> Optional[float]:
    """Parsed amount if it is strictly positive, else ``None``."""
    number = parse_amount(value)
    if number is None or number <= 0:
        return None
    return number
