# app/services/variation_service.py
from typing import Iterable, List, Optional
from uuid import UUID
import logging

from app.db.repositories.product_repository import ProductRepository
from app.schemas.product import ProductInDB
from app.services.variations.grouping import VariationGrouper
from app.services.variations.merger import VariationMerger
from app.services.variations.types import (
    GroupMergeResult,
    MergePlan,
    MergeStatus,
    MergeSummary,
    VariationGroup,
)

logger = logging.getLogger(__name__)


class VariationService:
    """Batch driver for variation detection and merging"""

    def __init__(
        self,
        db_session,
        grouper: Optional[VariationGrouper] = None,
        merger: Optional[VariationMerger] = None,
    ):
        self.db_session = db_session
        self.product_repo = ProductRepository(db_session)
        self.grouper = grouper or VariationGrouper()
        self.merger = merger or VariationMerger(
            db_session, patterns=self.grouper.patterns
        )

    def list_candidates(
        self,
        manufacturer_id: Optional[UUID] = None,
        exclude_ids: Optional[Iterable[UUID]] = None,
    ) -> List[ProductInDB]:
        """Snapshot of active, top-level products"""
        products = self.product_repo.list_active_top_level(
            manufacturer_id=manufacturer_id, exclude_ids=exclude_ids
        )
        return [ProductInDB.model_validate(p) for p in products]

    def detect_all(
        self,
        manufacturer_id: Optional[UUID] = None,
        exclude_ids: Optional[Iterable[UUID]] = None,
        max_group_size: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> List[VariationGroup]:
        """
        Detect variation groups over the live candidate set.
        Read-only; store errors propagate to the caller.

        ``max_group_size`` skips groups with more members than that, and
        ``limit`` keeps only the first groups in discovery order.
        """
        candidates = self.list_candidates(manufacturer_id, exclude_ids)
        logger.info(f"Analyzing {len(candidates)} products for variations...")

        groups = self.grouper.group(candidates)
        if max_group_size is not None:
            groups = [g for g in groups if len(g.products) <= max_group_size]
        if limit is not None:
            groups = groups[:limit]
        logger.info(f"Found {len(groups)} variation groups")

        for group in groups:
            attributes = "; ".join(
                f"{name}: {', '.join(sorted(values))}"
                for name, values in group.detected_attributes.items()
            )
            logger.debug(
                f"Group: {group.base_name} ({len(group.products)} variations) "
                f"SKU pattern: {group.base_sku_pattern} Attributes: {attributes} "
                f"Products: {', '.join(group.skus)}"
            )

        return groups

    def plan_all(
        self,
        manufacturer_id: Optional[UUID] = None,
        exclude_ids: Optional[Iterable[UUID]] = None,
        max_group_size: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> List[MergePlan]:
        """Merge plans for every detected group, without writing anything"""
        groups = self.detect_all(manufacturer_id, exclude_ids, max_group_size, limit)
        return [self.merger.plan(group) for group in groups]

    def merge_group(self, group: VariationGroup) -> GroupMergeResult:
        """
        Merge one group. Failures are logged and reported in the result,
        never raised.
        """
        try:
            parent_id = self.merger.merge(group)
        except Exception as e:
            logger.exception(
                f"Error merging group {group.base_name} "
                f"(SKU pattern {group.base_sku_pattern}, products {', '.join(group.skus)}): {e}"
            )
            # Discard any failed flush so the next group starts clean
            self.db_session.rollback()
            return GroupMergeResult(
                group=group, status=MergeStatus.FAILED, error=str(e)
            )
        return GroupMergeResult(
            group=group, status=MergeStatus.MERGED, parent_id=parent_id
        )

    def merge_all(
        self,
        manufacturer_id: Optional[UUID] = None,
        exclude_ids: Optional[Iterable[UUID]] = None,
        max_group_size: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> MergeSummary:
        """
        Detect and merge every variation group, one group at a time.
        A failing group does not stop the batch.
        """
        groups = self.detect_all(manufacturer_id, exclude_ids, max_group_size, limit)
        summary = MergeSummary(groups_found=len(groups))

        for group in groups:
            summary.results.append(self.merge_group(group))

        logger.info(
            f"Variation merge complete: {summary.groups_merged}/{summary.groups_found} "
            f"groups merged, {summary.products_affected} products affected"
        )
        return summary
