"""
Tests for candidate retrieval.
"""

from catalog_match.matching import CandidateRetriever, PRIORITY_ORDER
from catalog_match.models import ContentContext


async def test_filter_uses_categories_and_top_keyword(product_store, electronics_catalog):
    store = product_store(electronics_catalog)
    retriever = CandidateRetriever(store)
    context = ContentContext(categories=["Kitchen"], keywords=["mouse", "laptop"])

    candidates = await retriever.retrieve(context, ["mouse", "laptop"])

    assert [p.name for p in candidates] == ["Chef Knife", "Wireless Mouse"]
    call = store.calls[0]
    assert call.filters.categories == ["Kitchen"]
    assert call.filters.keyword == "mouse"
    assert call.order_by == PRIORITY_ORDER
    assert call.limit == 100


async def test_orders_by_priority_then_popularity(product_store, make_product):
    products = [
        make_product(name="low", admin_priority=10, popularity_score=99),
        make_product(name="tie-less-popular", admin_priority=70, popularity_score=10),
        make_product(name="tie-more-popular", admin_priority=70, popularity_score=80),
    ]
    retriever = CandidateRetriever(product_store(products))

    candidates = await retriever.retrieve(ContentContext(), [])

    assert [p.name for p in candidates] == ["tie-more-popular", "tie-less-popular", "low"]


async def test_excludes_inactive_products(product_store, electronics_catalog):
    retriever = CandidateRetriever(product_store(electronics_catalog))

    candidates = await retriever.retrieve(ContentContext(categories=["Electronics"]), [])

    assert all(p.is_active for p in candidates)
    assert "Retired Laptop" not in [p.name for p in candidates]


async def test_pool_is_capped(product_store, make_product):
    products = [make_product(name=f"Item {i}") for i in range(10)]
    retriever = CandidateRetriever(product_store(products), candidate_limit=3)

    assert len(await retriever.retrieve(ContentContext(), [])) == 3
    assert len(await retriever.retrieve(ContentContext(), [], limit=50)) == 3
    assert len(await retriever.retrieve(ContentContext(), [], limit=2)) == 2


async def test_no_signals_skips_filtering(product_store, electronics_catalog):
    store = product_store(electronics_catalog)
    retriever = CandidateRetriever(store)

    candidates = await retriever.retrieve(ContentContext(), [])

    assert store.calls[0].filters.is_empty
    assert len(candidates) == 4


async def test_falls_back_to_popular_products(product_store, electronics_catalog):
    store = product_store(electronics_catalog)
    retriever = CandidateRetriever(store)
    context = ContentContext(categories=["Garden"], keywords=["shovel"])

    pool = await retriever.retrieve_pool(context, ["shovel"], fallback_limit=2)

    assert pool.is_fallback
    assert [p.name for p in pool.products] == ["Chef Knife", "Gaming Laptop Pro"]
    assert store.calls[-1].filters is None
    assert store.calls[-1].limit == 2


async def test_pool_without_fallback(product_store, electronics_catalog):
    retriever = CandidateRetriever(product_store(electronics_catalog))

    pool = await retriever.retrieve_pool(
        ContentContext(categories=["Electronics"]), [], fallback_limit=5
    )

    assert not pool.is_fallback
    assert len(pool) == 2


async def test_empty_store_fallback_is_empty(product_store):
    retriever = CandidateRetriever(product_store([]))

    pool = await retriever.retrieve_pool(ContentContext(keywords=["laptop"]), ["laptop"], 5)

    assert pool.is_fallback
    assert pool.products == []


async def test_retrieve_category_is_exact(product_store, electronics_catalog):
    store = product_store(electronics_catalog)
    retriever = CandidateRetriever(store)

    products = await retriever.retrieve_category("Electronics", limit=20)

    assert [p.name for p in products] == ["Gaming Laptop Pro", "Office Laptop Slim"]
    assert store.calls[0].filters.exact_category == "Electronics"
