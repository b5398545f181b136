"""
Product variation detection and merge engine.

Scans the catalog for independently listed products that are the same item
in different sizes/colors/counts and restructures them into a variable
parent product with variations.
"""

from .patterns import VariationPattern, VARIATION_PATTERNS, extract_attributes
from .normalizer import base_name, base_sku_pattern, sku_number
from .similarity import similarity
from .grouping import VariationGrouper
from .merger import VariationMerger, VariationMergeError
from .types import (
    VariationGroup,
    MergePlan,
    MergeStatus,
    GroupMergeResult,
    MergeSummary,
)

__all__ = [
    "VariationPattern",
    "VARIATION_PATTERNS",
    "extract_attributes",
    "base_name",
    "base_sku_pattern",
    "sku_number",
    "similarity",
    "VariationGrouper",
    "VariationMerger",
    "VariationMergeError",
    "VariationGroup",
    "MergePlan",
    "MergeStatus",
    "GroupMergeResult",
    "MergeSummary",
]
