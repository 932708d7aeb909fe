"""Tests for the catalog retrieval pipeline."""

import pytest

from catalog.models.product import CatalogFilters, ProductCreate
from catalog.services.catalog_assembler import CatalogAssembler, collation_key

pytestmark = pytest.mark.unit


def _create(service, index: int, **overrides):
    fields = {
        "name": f"Produto {index:03d}",
        "code": f"LZ-{index:04d}",
        "main_image_url": f"https://cdn.example.com/{index}.jpg",
        "price": float(index),
    }
    fields.update(overrides)
    return service.create(ProductCreate(**fields))


def _seed(service, count: int):
    return [_create(service, index) for index in range(1, count + 1)]


def test_pagination_clamps_to_last_page(product_service, catalog_assembler):
    _seed(product_service, 50)

    result = catalog_assembler.catalog(
        CatalogFilters(current_page=5, items_per_page=24)
    )

    assert result.total_products_count == 50
    assert result.pagination.total_pages == 3
    assert result.pagination.current_page == 3
    assert [p.code for p in result.products] == ["LZ-0049", "LZ-0050"]
    assert result.pagination.has_previous is True
    assert result.pagination.has_next is False
    assert result.infinite_scroll is None


def test_pagination_middle_page(product_service, catalog_assembler):
    _seed(product_service, 50)

    result = catalog_assembler.catalog(
        CatalogFilters(current_page=2, items_per_page=12)
    )

    assert len(result.products) == 12
    assert result.products[0].code == "LZ-0013"
    assert result.pagination.total_pages == 5
    assert result.pagination.has_previous is True
    assert result.pagination.has_next is True


def test_empty_catalog_reports_single_page(catalog_assembler):
    result = catalog_assembler.catalog(CatalogFilters(current_page=4))

    assert result.products == []
    assert result.total_products_count == 0
    assert result.pagination.total_pages == 1
    assert result.pagination.current_page == 1
    assert result.pagination.has_previous is False
    assert result.pagination.has_next is False


def test_infinite_scroll_returns_everything_when_small(
    product_service, catalog_assembler
):
    _seed(product_service, 10)

    result = catalog_assembler.catalog(
        CatalogFilters(navigation_mode="infinite_scroll", loaded_items_count=0)
    )

    assert len(result.products) == 10
    assert result.infinite_scroll.loaded_items_count == 10
    assert result.infinite_scroll.has_more_items is False
    assert result.infinite_scroll.batch_size == 24
    assert result.infinite_scroll.is_loading is False
    assert result.pagination is None


def test_infinite_scroll_next_batch(product_service, catalog_assembler):
    _seed(product_service, 60)

    result = catalog_assembler.catalog(
        CatalogFilters(navigation_mode="infinite_scroll", loaded_items_count=24)
    )

    assert len(result.products) == 24
    assert result.products[0].code == "LZ-0025"
    assert result.infinite_scroll.loaded_items_count == 48
    assert result.infinite_scroll.has_more_items is True


def test_infinite_scroll_past_the_end(product_service, catalog_assembler):
    _seed(product_service, 5)

    result = catalog_assembler.catalog(
        CatalogFilters(navigation_mode="infinite_scroll", loaded_items_count=30)
    )

    assert result.products == []
    assert result.infinite_scroll.loaded_items_count == 5
    assert result.infinite_scroll.has_more_items is False


def test_price_sort_puts_nulls_last_both_ways(product_service, catalog_assembler):
    _create(product_service, 1, price=None)
    _create(product_service, 2, price=10.0)
    _create(product_service, 3, price=5.0)

    ascending = catalog_assembler.catalog(CatalogFilters(sort_criteria="price_asc"))
    descending = catalog_assembler.catalog(CatalogFilters(sort_criteria="price_desc"))

    assert [p.price for p in ascending.products] == [5.0, 10.0, None]
    assert [p.price for p in descending.products] == [10.0, 5.0, None]


def test_name_sort_is_case_insensitive(product_service, catalog_assembler):
    _create(product_service, 1, name="banqueta")
    _create(product_service, 2, name="Aparador")
    _create(product_service, 3, name="Cadeira")

    ascending = catalog_assembler.catalog(CatalogFilters(sort_criteria="name_asc"))
    descending = catalog_assembler.catalog(CatalogFilters(sort_criteria="name_desc"))

    assert [p.name for p in ascending.products] == ["Aparador", "banqueta", "Cadeira"]
    assert [p.name for p in descending.products] == ["Cadeira", "banqueta", "Aparador"]


def test_name_sort_ignores_accents(product_service, catalog_assembler):
    for index, name in enumerate(
        ["Zebra", "Água", "Banco", "Édredom", "Cadeira"], start=1
    ):
        _create(product_service, index, name=name)

    ascending = catalog_assembler.catalog(CatalogFilters(sort_criteria="name_asc"))
    descending = catalog_assembler.catalog(CatalogFilters(sort_criteria="name_desc"))

    expected = ["Água", "Banco", "Cadeira", "Édredom", "Zebra"]
    assert [p.name for p in ascending.products] == expected
    assert [p.name for p in descending.products] == expected[::-1]


def test_collation_key_breaks_ties_on_the_original_name():
    assert collation_key("Sofá") == ("sofa", "Sofá")
    assert sorted(["Sofá", "Sofa"], key=collation_key) == ["Sofa", "Sofá"]


def test_date_sorts(product_service, catalog_assembler, clock):
    _create(product_service, 1)
    clock.advance(days=1)
    _create(product_service, 2)
    clock.advance(days=1)
    _create(product_service, 3)

    newest = catalog_assembler.catalog(CatalogFilters(sort_criteria="date_newest"))
    oldest = catalog_assembler.catalog(CatalogFilters(sort_criteria="date_oldest"))

    assert [p.code for p in newest.products] == ["LZ-0003", "LZ-0002", "LZ-0001"]
    assert [p.code for p in oldest.products] == ["LZ-0001", "LZ-0002", "LZ-0003"]


def test_popularity_sort_is_stable_for_ties(product_service, catalog_assembler):
    first = _create(product_service, 1)
    second = _create(product_service, 2)
    third = _create(product_service, 3)
    product_service.record_interaction(third.id, "click")

    result = catalog_assembler.catalog(CatalogFilters(sort_criteria="popularity"))

    assert [p.id for p in result.products] == [third.id, first.id, second.id]


def test_is_new_is_recomputed_on_every_read(product_service, catalog_assembler, clock):
    _create(product_service, 1)

    assert catalog_assembler.catalog(CatalogFilters()).products[0].is_new is True

    clock.advance(days=31)

    assert catalog_assembler.catalog(CatalogFilters()).products[0].is_new is False


def test_listing_hides_counters_and_deleted_products(
    product_service, catalog_assembler
):
    kept = _create(product_service, 1)
    removed = _create(product_service, 2)
    product_service.delete(removed.id)

    result = catalog_assembler.catalog(CatalogFilters())

    assert [p.id for p in result.products] == [kept.id]
    item = result.products[0].model_dump()
    assert "view_count" not in item
    assert "popularity_score" not in item
    assert "created_at" not in item


def test_catalog_title_and_custom_batch_size(product_store, product_service, clock):
    _seed(product_service, 5)
    assembler = CatalogAssembler(
        product_store, catalog_title="Vitrine", batch_size=2, clock=clock
    )

    result = assembler.catalog(CatalogFilters(navigation_mode="infinite_scroll"))

    assert result.catalog_title == "Vitrine"
    assert len(result.products) == 2
    assert result.infinite_scroll.has_more_items is True


def test_items_per_page_must_be_an_allowed_option():
    with pytest.raises(ValueError):
        CatalogFilters(items_per_page=10)
