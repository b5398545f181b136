"""
Grouping engine: partitions variation candidates into VariationGroups.
"""

import logging
from itertools import permutations
from typing import Dict, List, Optional, Sequence, Set, Tuple
from uuid import UUID

from app.core.config import settings
from app.schemas.product import ProductInDB
from app.services.variations.normalizer import base_name, base_sku_pattern
from app.services.variations.patterns import VariationPattern, extract_attributes
from app.services.variations.similarity import similarity
from app.services.variations.types import VariationGroup

logger = logging.getLogger(__name__)

GroupKey = Tuple[str, str, Optional[UUID], Optional[UUID]]


class VariationGrouper:
    """
    Detects variation groups in a snapshot of candidate products.

    Candidates are partitioned by (base name, base SKU pattern, manufacturer,
    product type). A partition becomes a group only when it has enough
    members, every ordered pair of base names is similar enough, and at
    least one attribute category takes two or more distinct values.

    Pure function of its input: no store access, no hidden state.
    """

    def __init__(
        self,
        similarity_threshold: Optional[float] = None,
        min_group_size: Optional[int] = None,
        patterns: Optional[List[VariationPattern]] = None,
    ):
        self.similarity_threshold = (
            settings.VARIATION_SIMILARITY_THRESHOLD
            if similarity_threshold is None
            else similarity_threshold
        )
        self.min_group_size = (
            settings.VARIATION_MIN_GROUP_SIZE if min_group_size is None else min_group_size
        )
        self.patterns = patterns

    def group_key(self, product: ProductInDB) -> GroupKey:
        return (
            base_name(product.name, self.patterns),
            base_sku_pattern(product.sku),
            product.manufacturer_id,
            product.product_type_id,
        )

    def partition(self, products: Sequence[ProductInDB]) -> Dict[GroupKey, List[ProductInDB]]:
        """Partition candidates by exact group key, keeping discovery order."""
        partitions: Dict[GroupKey, List[ProductInDB]] = {}
        for product in products:
            partitions.setdefault(self.group_key(product), []).append(product)
        return partitions

    def names_similar(self, products: Sequence[ProductInDB]) -> bool:
        """Every ordered pair of distinct members must clear the threshold."""
        names = [base_name(p.name, self.patterns) for p in products]
        return all(
            similarity(a, b) > self.similarity_threshold
            for a, b in permutations(names, 2)
        )

    def collect_attributes(self, products: Sequence[ProductInDB]) -> Dict[str, Set[str]]:
        """Union of each member's extracted attributes: category -> distinct values."""
        detected: Dict[str, Set[str]] = {}
        for product in products:
            for category, value in extract_attributes(product.name, self.patterns).items():
                detected.setdefault(category, set()).add(value)
        return detected

    @staticmethod
    def has_variation(detected: Dict[str, Set[str]]) -> bool:
        return any(len(values) > 1 for values in detected.values())

    def group(self, products: Sequence[ProductInDB]) -> List[VariationGroup]:
        """
        Detect variation groups among ``products``.

        Groups are returned in the order their first member was seen.
        """
        groups: List[VariationGroup] = []

        for key, members in self.partition(products).items():
            name, sku_pattern, manufacturer_id, product_type_id = key

            if len(members) < self.min_group_size:
                continue

            if not self.names_similar(members):
                logger.debug(f"Dropping '{name}': base names not similar enough")
                continue

            detected = self.collect_attributes(members)
            if not self.has_variation(detected):
                logger.debug(
                    f"Dropping '{name}': {len(members)} products share identical attributes"
                )
                continue

            groups.append(
                VariationGroup(
                    base_name=name,
                    base_sku_pattern=sku_pattern,
                    products=list(members),
                    detected_attributes=detected,
                    manufacturer_id=manufacturer_id,
                    product_type_id=product_type_id,
                )
            )

        return groups
