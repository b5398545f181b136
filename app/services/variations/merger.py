"""
Merge engine: turns one VariationGroup into a variable parent product with
attached variations.
"""

import logging
from typing import List, Optional
from uuid import UUID

from sqlalchemy.orm import Session

from app.core.config import settings
from app.db.repositories.product_repository import ProductRepository
from app.db.repositories.variation_attribute_repository import (
    VariationAttributeRepository,
)
from app.schemas.product import ProductInDB, ProductUpdate
from app.schemas.variation_attribute import VariationAttributeCreate
from app.services.variations.normalizer import sku_number
from app.services.variations.patterns import VariationPattern, extract_attributes
from app.services.variations.types import MergePlan, VariationGroup

logger = logging.getLogger(__name__)


class VariationMergeError(Exception):
    """Raised when a group cannot be merged."""

    def __init__(self, message: str, base_name: Optional[str] = None):
        super().__init__(message)
        self.base_name = base_name


class VariationMerger:
    """
    Rewrites the parent/variation hierarchy for a detected group.

    The member with the lowest trailing SKU number becomes the parent and is
    renamed to the group's base name; all other members point at it. Every
    member, parent included, gets attribute rows extracted from its own
    pre-merge name.
    """

    def __init__(
        self,
        db_session: Session,
        fallback_sku_number: Optional[int] = None,
        atomic: Optional[bool] = None,
        patterns: Optional[List[VariationPattern]] = None,
    ):
        self.db_session = db_session
        self.product_repo = ProductRepository(db_session)
        self.attribute_repo = VariationAttributeRepository(db_session)
        self.fallback_sku_number = (
            settings.VARIATION_FALLBACK_SKU_NUMBER
            if fallback_sku_number is None
            else fallback_sku_number
        )
        self.atomic = settings.VARIATION_MERGE_ATOMIC if atomic is None else atomic
        # Must match the rules the group was detected with
        self.patterns = patterns

    def sort_key(self, product: ProductInDB) -> int:
        return sku_number(product.sku, self.fallback_sku_number)

    def plan(self, group: VariationGroup) -> MergePlan:
        """Choose the parent and lay out the writes, without touching the store."""
        if len(group.products) < 2:
            raise VariationMergeError(
                f"Group '{group.base_name}' has fewer than two products",
                group.base_name,
            )

        # sorted() is stable: ties keep discovery order
        ordered = sorted(group.products, key=self.sort_key)
        parent, variations = ordered[0], ordered[1:]

        return MergePlan(
            base_name=group.base_name,
            parent_id=parent.id,
            parent_sku=parent.sku,
            parent_name=group.base_name.strip(),
            variation_ids=[p.id for p in variations],
            variation_skus=[p.sku for p in variations],
            attributes={
                p.id: extract_attributes(p.name, self.patterns) for p in group.products
            },
        )

    def merge(self, group: VariationGroup) -> UUID:
        """
        Merge ``group`` into a variable product. Returns the parent's id.

        In atomic mode the group's writes share one savepoint and a failure
        leaves the group untouched; otherwise each write commits on its own
        and a failure can leave a partial merge behind.
        """
        plan = self.plan(group)
        logger.info(f"Merging variation group: {plan.base_name}")

        if self.atomic:
            with self.db_session.begin_nested():
                self._apply(plan, commit=False)
            self.db_session.commit()
        else:
            self._apply(plan, commit=True)

        logger.info(
            f"Merged {len(group.products)} products into variable product "
            f"{plan.parent_sku}"
        )
        return plan.parent_id

    def _apply(self, plan: MergePlan, commit: bool) -> None:
        parent = self.product_repo.update(
            plan.parent_id,
            ProductUpdate(is_variable_product=True, name=plan.parent_name),
            commit=commit,
        )
        if parent is None:
            raise VariationMergeError(
                f"Parent product {plan.parent_id} not found", plan.base_name
            )
        logger.info(f"  Parent product: {plan.parent_sku}")

        for variation_id, variation_sku in zip(plan.variation_ids, plan.variation_skus):
            variation = self.product_repo.update(
                variation_id,
                ProductUpdate(parent_product_id=plan.parent_id),
                commit=commit,
            )
            if variation is None:
                raise VariationMergeError(
                    f"Variation product {variation_id} not found", plan.base_name
                )
            logger.debug(f"  + Added variation: {variation_sku}")

        for product_id, attributes in plan.attributes.items():
            if not attributes:
                logger.warning(
                    f"  Product {product_id} in '{plan.base_name}' has no attributes in its name"
                )
            for name, value in attributes.items():
                self.attribute_repo.create(
                    VariationAttributeCreate(
                        product_id=product_id, name=name, value=value, sort_order=0
                    ),
                    commit=commit,
                )
