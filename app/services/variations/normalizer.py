import re
from typing import List, Optional

from app.services.variations.patterns import VARIATION_PATTERNS, VariationPattern

TRAILING_DIGITS = re.compile(r"\d+$")
SIZE_SUFFIX = re.compile(r"(?:SM|MD|LG|XL|XXL|XXXL)$", re.IGNORECASE)
WHITESPACE = re.compile(r"\s+")


def base_name(name: str, patterns: Optional[List[VariationPattern]] = None) -> str:
    """
    Strip every attribute match from a product name.

    Unlike extraction, all occurrences of every rule are removed.
    Example: "Energy Potion Gel 4 OZ" -> "Energy Potion Gel"
    """
    for pattern in VARIATION_PATTERNS if patterns is None else patterns:
        name = pattern.strip(name)
    return WHITESPACE.sub(" ", name).strip()


def base_sku_pattern(sku: str) -> str:
    """
    Strip one trailing run of digits, then one size suffix.

    Examples: EPG02 -> EPG, TEEXL -> TEE, TEEXL2 -> TEE
    """
    base = TRAILING_DIGITS.sub("", sku, count=1)
    return SIZE_SUFFIX.sub("", base, count=1)


def sku_number(sku: str, fallback: int) -> int:
    """Trailing digits of a SKU as an int, or ``fallback`` when there are none."""
    m = TRAILING_DIGITS.search(sku)
    if m:
        return int(m.group(0))
    return fallback
