# tests/services/test_merger.py
import pytest
from uuid import uuid4

from app.schemas.product import ProductInDB
from app.services.variations.grouping import VariationGrouper
from app.services.variations.merger import VariationMerger, VariationMergeError
from app.services.variations.patterns import VariationPattern
from app.services.variations.types import VariationGroup


def detect_one(variation_service):
    groups = variation_service.detect_all()
    assert len(groups) == 1
    return groups[0]


def test_plan_picks_lowest_sku_number(db_session, variation_service, energy_gel):
    group = detect_one(variation_service)

    plan = VariationMerger(db_session).plan(group)

    assert plan.parent_sku == "EPG02"
    assert plan.parent_name == "Energy Potion Gel"
    assert plan.variation_skus == ["EPG04", "EPG08"]
    assert plan.attributes[plan.parent_id] == {"Volume": "2 OZ", "Size": "2 OZ"}


def test_plan_prefers_numbered_sku_over_suffix(db_session, make_product, variation_service):
    make_product("EPGSM", "Energy Potion Gel Small")
    make_product("EPG04", "Energy Potion Gel 4 OZ")
    group = detect_one(variation_service)

    plan = VariationMerger(db_session).plan(group)

    assert plan.parent_sku == "EPG04"
    assert plan.variation_skus == ["EPGSM"]


def test_plan_ties_keep_discovery_order(db_session):
    products = [
        ProductInDB(id=uuid4(), sku="TEESM", name="Logo Tee Small"),
        ProductInDB(id=uuid4(), sku="TEELG", name="Logo Tee Large"),
    ]
    group = VariationGrouper().group(products)[0]

    plan = VariationMerger(db_session).plan(group)

    assert plan.parent_sku == "TEESM"
    assert plan.parent_name == "Logo Tee"


def test_plan_rejects_small_group(db_session):
    group = VariationGroup(
        base_name="Lonely Gel",
        base_sku_pattern="LG",
        products=[ProductInDB(id=uuid4(), sku="LG01", name="Lonely Gel 4 OZ")],
    )

    with pytest.raises(VariationMergeError) as exc_info:
        VariationMerger(db_session).plan(group)
    assert exc_info.value.base_name == "Lonely Gel"


def test_merge_builds_variable_product(
    db_session, variation_service, product_repository, attribute_repository, energy_gel
):
    group = detect_one(variation_service)

    parent_id = VariationMerger(db_session).merge(group)

    parent = product_repository.get_by_sku("EPG02")
    assert parent.id == parent_id
    assert parent.is_variable_product is True
    assert parent.name == "Energy Potion Gel"
    assert parent.parent_product_id is None

    variations = product_repository.list_variations(parent_id)
    assert [v.sku for v in variations] == ["EPG04", "EPG08"]
    for variation in variations:
        assert variation.is_variable_product is False
        assert variation.name.startswith("Energy Potion Gel ")

    # Each member gets rows from its own original name
    rows = attribute_repository.list_by_product(product_repository.get_by_sku("EPG04").id)
    assert [(r.name, r.value, r.sort_order) for r in rows] == [
        ("Size", "4 OZ", 0),
        ("Volume", "4 OZ", 0),
    ]
    parent_rows = attribute_repository.list_by_product(parent_id)
    assert {r.value for r in parent_rows} == {"2 OZ"}


def test_merge_product_without_attributes_gets_no_rows(
    db_session, make_product, attribute_repository
):
    first = make_product("KIT01", "Pleasure Kit")
    second = make_product("KIT02", "Pleasure Kit Black")
    group = VariationGroup(
        base_name="Pleasure Kit",
        base_sku_pattern="KIT",
        products=[ProductInDB.model_validate(first), ProductInDB.model_validate(second)],
        detected_attributes={"Color": {"BLACK"}},
    )

    VariationMerger(db_session).merge(group)

    assert attribute_repository.list_by_product(first.id) == []
    assert [r.value for r in attribute_repository.list_by_product(second.id)] == ["BLACK"]


def test_atomic_merge_failure_leaves_group_untouched(
    db_session, variation_service, product_repository, monkeypatch, energy_gel
):
    group = detect_one(variation_service)
    merger = VariationMerger(db_session, atomic=True)

    def fail(*args, **kwargs):
        raise RuntimeError("attribute write failed")

    monkeypatch.setattr(merger.attribute_repo, "create", fail)

    with pytest.raises(RuntimeError):
        merger.merge(group)
    db_session.rollback()

    parent = product_repository.get_by_sku("EPG02")
    assert parent.name == "Energy Potion Gel 2 OZ"
    assert parent.is_variable_product is False
    assert product_repository.list_variations(parent.id) == []


def test_non_atomic_merge_failure_leaves_partial_merge(
    db_session,
    variation_service,
    product_repository,
    attribute_repository,
    monkeypatch,
    energy_gel,
):
    group = detect_one(variation_service)
    merger = VariationMerger(db_session, atomic=False)

    def fail(*args, **kwargs):
        raise RuntimeError("attribute write failed")

    monkeypatch.setattr(merger.attribute_repo, "create", fail)

    with pytest.raises(RuntimeError):
        merger.merge(group)
    db_session.rollback()

    # Hierarchy writes were committed before the failure
    parent = product_repository.get_by_sku("EPG02")
    assert parent.name == "Energy Potion Gel"
    assert parent.is_variable_product is True
    assert len(product_repository.list_variations(parent.id)) == 2
    assert attribute_repository.list_by_product(parent.id) == []


def test_merge_missing_product_raises(db_session, make_product, product_repository):
    stored = make_product("EPG04", "Energy Potion Gel 4 OZ")
    group = VariationGroup(
        base_name="Energy Potion Gel",
        base_sku_pattern="EPG",
        products=[
            ProductInDB(id=uuid4(), sku="EPG02", name="Energy Potion Gel 2 OZ"),
            ProductInDB.model_validate(stored),
        ],
    )

    with pytest.raises(VariationMergeError) as exc_info:
        VariationMerger(db_session).merge(group)
    db_session.rollback()

    assert exc_info.value.base_name == "Energy Potion Gel"
    assert product_repository.get_by_sku("EPG04").parent_product_id is None


def test_merged_group_is_not_redetected(db_session, variation_service, energy_gel):
    VariationMerger(db_session).merge(detect_one(variation_service))

    assert variation_service.detect_all() == []


def test_plan_uses_merger_patterns(db_session):
    flavors = [VariationPattern(name="Flavor", regex=r"\b(CHERRY|MINT)\b")]
    products = [
        ProductInDB(id=uuid4(), sku="LB01", name="Lip Balm Cherry"),
        ProductInDB(id=uuid4(), sku="LB02", name="Lip Balm Mint"),
    ]
    group = VariationGrouper(patterns=flavors).group(products)[0]

    plan = VariationMerger(db_session, patterns=flavors).plan(group)

    assert plan.parent_name == "Lip Balm"
    assert plan.attributes == {
        products[0].id: {"Flavor": "CHERRY"},
        products[1].id: {"Flavor": "MINT"},
    }
