"""
Pattern library for variation attributes.

Each rule pairs an attribute category with a regex. Rules are independent:
one substring may satisfy several categories (``"4 OZ"`` is both a Volume
and a Size), and downstream consumers key on the category name, so the
overlap is kept as-is.
"""

import re
from dataclasses import dataclass
from typing import Dict, List, Optional


@dataclass
class VariationPattern:
    """A text rule contributing values to one attribute category."""
    name: str  # Attribute category, e.g. "Volume"
    regex: str

    def __post_init__(self):
        self._compiled = re.compile(self.regex, re.IGNORECASE)

    def first_match(self, text: str) -> Optional[str]:
        """Return the first match in ``text``, trimmed and uppercased."""
        m = self._compiled.search(text)
        if m:
            return m.group(0).strip().upper()
        return None

    def strip(self, text: str) -> str:
        """Replace every match in ``text`` with a space."""
        return self._compiled.sub(" ", text)


# ============================================================================
# VARIATION PATTERNS - evaluated in this order
# ============================================================================

VARIATION_PATTERNS: List[VariationPattern] = [
    # Volume: 4 OZ, 250 ML, 1.5 L, 8 FL OZ
    VariationPattern(
        name="Volume",
        regex=r"(\d+(?:\.\d+)?)\s*(FLUID\s*OUNCES?|FL\s*OZ|OUNCES?|LITERS?|OZ|ML|L)\b",
    ),
    # Weight or volume sold as a size: 4 OZ, 100 G, 2 LB
    VariationPattern(
        name="Size",
        regex=r"(\d+(?:\.\d+)?)\s*(OZ|ML|L|GRAMS?|G|KG|LBS?|POUNDS?)\b",
    ),
    # Apparel sizes: S, M, L, XL, XXL, Small, Large (not the s of a possessive)
    VariationPattern(
        name="Size",
        regex=r"(?<![’'])\b(X+L|SMALL|MEDIUM|LARGE|XS|S|M|L|XL|XXL|XXXL)\b",
    ),

    # Count: 12 PACK, 3 CT, 50 PCS
    VariationPattern(
        name="Count",
        regex=r"(\d+)\s*(PACK|COUNT|CT|PCS|PIECES?|UNITS?)\b",
    ),

    # Dimensions: 8 INCH, 7 IN LONG, 1.5 IN WIDE
    VariationPattern(
        name="Length",
        regex=r"(\d+(?:\.\d+)?)\s*(INCH(?:ES)?|IN|CM|MM|FOOT|FEET|FT|METERS?|M)\b(?:\s+(?:LONG|LENGTH)\b)?",
    ),
    VariationPattern(
        name="Diameter",
        regex=r"(\d+(?:\.\d+)?)\s*(INCH(?:ES)?|IN|CM|MM)\b(?:\s+(?:DIAMETER|DIA|WIDE|WIDTH)\b)?",
    ),

    # Color
    VariationPattern(
        name="Color",
        regex=r"\b(BLACK|WHITE|RED|BLUE|GREEN|YELLOW|PINK|PURPLE|ORANGE|GRAY|GREY|SILVER|GOLD|CLEAR|TRANSPARENT)\b",
    ),

    # Material
    VariationPattern(
        name="Material",
        regex=r"\b(SILICONE|LATEX|RUBBER|GLASS|METAL|STEEL|PLASTIC|WOOD|LEATHER)\b",
    ),
]


def extract_attributes(
    name: str, patterns: Optional[List[VariationPattern]] = None
) -> Dict[str, str]:
    """
    Extract variation attributes from a product name.

    Only the first match of each rule is kept. When two rules share a
    category, the later rule's match replaces the earlier one.

    Returns:
        Dict mapping category -> uppercased literal, e.g. {"Volume": "4 OZ"}
    """
    attributes: Dict[str, str] = {}
    for pattern in VARIATION_PATTERNS if patterns is None else patterns:
        value = pattern.first_match(name)
        if value is not None:
            attributes[pattern.name] = value
    return attributes
