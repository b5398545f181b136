# app/schemas/variation.py
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Dict, List, Optional
from uuid import UUID

from app.services.variations.types import (
    GroupMergeResult,
    MergePlan,
    MergeSummary,
    VariationGroup,
)


class CamelModel(BaseModel):
    """Serializes with camelCase keys for the storefront admin"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class VariationProductSummary(CamelModel):
    id: UUID
    sku: str
    name: str
    price: Optional[str] = None
    stock_status: str


class VariationAttributeValues(CamelModel):
    name: str = Field(..., description="Attribute category, e.g. 'Volume'")
    values: List[str]


class VariationGroupResponse(CamelModel):
    """A detected variation group as returned by the detect endpoint"""

    base_name: str
    base_sku_pattern: str
    product_count: int
    products: List[VariationProductSummary]
    attributes: List[VariationAttributeValues]

    @classmethod
    def from_group(cls, group: VariationGroup) -> "VariationGroupResponse":
        return cls(
            base_name=group.base_name,
            base_sku_pattern=group.base_sku_pattern,
            product_count=len(group.products),
            products=[
                VariationProductSummary(
                    id=p.id,
                    sku=p.sku,
                    name=p.name,
                    price=str(p.price) if p.price is not None else None,
                    stock_status=p.stock_status,
                )
                for p in group.products
            ],
            attributes=[
                VariationAttributeValues(name=name, values=sorted(values))
                for name, values in group.detected_attributes.items()
            ],
        )


class DetectResponse(CamelModel):
    success: bool = True
    groups_found: int
    groups: List[VariationGroupResponse]

    @classmethod
    def from_groups(cls, groups: List[VariationGroup]) -> "DetectResponse":
        return cls(
            groups_found=len(groups),
            groups=[VariationGroupResponse.from_group(g) for g in groups],
        )


class GroupMergeResultResponse(CamelModel):
    base_name: str
    base_sku_pattern: str
    status: str
    parent_id: Optional[UUID] = None
    product_ids: List[UUID]
    error: Optional[str] = None

    @classmethod
    def from_result(cls, result: GroupMergeResult) -> "GroupMergeResultResponse":
        return cls(
            base_name=result.group.base_name,
            base_sku_pattern=result.group.base_sku_pattern,
            status=result.status.value,
            parent_id=result.parent_id,
            product_ids=result.group.product_ids,
            error=result.error,
        )


class MergePlanResponse(CamelModel):
    base_name: str
    parent_id: UUID
    parent_sku: str
    parent_name: str
    variation_ids: List[UUID]
    variation_skus: List[str]
    attributes: Dict[str, Dict[str, str]] = Field(
        default_factory=dict, description="Extracted attributes keyed by product id"
    )

    @classmethod
    def from_plan(cls, plan: MergePlan) -> "MergePlanResponse":
        return cls(
            base_name=plan.base_name,
            parent_id=plan.parent_id,
            parent_sku=plan.parent_sku,
            parent_name=plan.parent_name,
            variation_ids=plan.variation_ids,
            variation_skus=plan.variation_skus,
            attributes={str(k): v for k, v in plan.attributes.items()},
        )


class MergeResponse(CamelModel):
    success: bool = True
    dry_run: bool = False
    groups_found: int
    groups_merged: int = 0
    products_affected: int = 0
    results: List[GroupMergeResultResponse] = Field(default_factory=list)
    plans: List[MergePlanResponse] = Field(default_factory=list)

    @classmethod
    def from_summary(cls, summary: MergeSummary) -> "MergeResponse":
        return cls(
            groups_found=summary.groups_found,
            groups_merged=summary.groups_merged,
            products_affected=summary.products_affected,
            results=[GroupMergeResultResponse.from_result(r) for r in summary.results],
        )

    @classmethod
    def from_plans(cls, plans: List[MergePlan]) -> "MergeResponse":
        return cls(
            dry_run=True,
            groups_found=len(plans),
            plans=[MergePlanResponse.from_plan(p) for p in plans],
        )
