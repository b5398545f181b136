from typing import List, Dict, Optional, Set
from dataclasses import dataclass, field
from enum import Enum
from uuid import UUID

from app.schemas.product import ProductInDB


class MergeStatus(Enum):
    MERGED = "merged"
    FAILED = "failed"


@dataclass
class VariationGroup:
    """Products detected as the same item in different sizes/colors/counts.

    Built fresh on every detection run and never persisted.
    """
    base_name: str
    base_sku_pattern: str
    products: List[ProductInDB]  # Discovery order, at least two
    detected_attributes: Dict[str, Set[str]] = field(default_factory=dict)
    manufacturer_id: Optional[UUID] = None
    product_type_id: Optional[UUID] = None

    @property
    def product_ids(self) -> List[UUID]:
        return [p.id for p in self.products]

    @property
    def skus(self) -> List[str]:
        return [p.sku for p in self.products]


@dataclass
class MergePlan:
    """Parent/variation layout a merge would write for one group."""
    base_name: str
    parent_id: UUID
    parent_sku: str
    parent_name: str
    variation_ids: List[UUID]
    variation_skus: List[str]
    # Each member's own extracted attributes, keyed by product id
    attributes: Dict[UUID, Dict[str, str]] = field(default_factory=dict)


@dataclass
class GroupMergeResult:
    """Outcome of merging a single group."""
    group: VariationGroup
    status: MergeStatus
    parent_id: Optional[UUID] = None
    error: Optional[str] = None

    @property
    def merged(self) -> bool:
        return self.status is MergeStatus.MERGED


@dataclass
class MergeSummary:
    """Aggregate outcome of a batch merge run."""
    groups_found: int
    results: List[GroupMergeResult] = field(default_factory=list)

    @property
    def groups_merged(self) -> int:
        return sum(1 for r in self.results if r.merged)

    @property
    def products_affected(self) -> int:
        return sum(len(r.group.products) for r in self.results if r.merged)

    @property
    def failed(self) -> List[GroupMergeResult]:
        return [r for r in self.results if not r.merged]
