# tests/test_categories.py
import pytest
from fakes import product_form
from storefront.errors import Conflict, NotFound, ValidationError


@pytest.mark.asyncio
async def test_categories_listed_by_name_with_product_count(catalog):
    sports = await catalog.create_category({'name': 'Sports'})
    await catalog.create_category({'name': 'Books', 'description': 'Books and publications'})
    await catalog.create_product(product_form(sports.id))
    await catalog.create_product(product_form(sports.id))

    categories = await catalog.list_categories()

    assert [(c.name, c.product_count) for c in categories] == [('Books', 0), ('Sports', 2)]


@pytest.mark.asyncio
async def test_create_category_requires_name(catalog, store):
    with pytest.raises(ValidationError) as exc_info:
        await catalog.create_category({'name': '  ', 'description': 'nothing'})

    assert exc_info.value.errors == {'name': 'Name is required'}
    assert store.categories == {}


@pytest.mark.asyncio
async def test_update_category(catalog):
    category = await catalog.create_category({'name': 'Food'})

    updated = await catalog.update_category(category.id, {'name': 'Food & Beverage', 'description': 'Snacks'})

    assert updated.id == category.id
    assert updated.name == 'Food & Beverage'
    assert updated.description == 'Snacks'
    assert updated.created_at == category.created_at


@pytest.mark.asyncio
async def test_update_missing_category(catalog):
    with pytest.raises(NotFound):
        await catalog.update_category(7, {'name': 'Ghost'})


@pytest.mark.asyncio
async def test_delete_category_in_use_conflicts(catalog, store):
    category = await catalog.create_category({'name': 'Sports'})
    await catalog.create_product(product_form(category.id))

    with pytest.raises(Conflict):
        await catalog.delete_category(category.id)

    assert category.id in store.categories


@pytest.mark.asyncio
async def test_delete_unused_category(catalog, store):
    category = await catalog.create_category({'name': 'Sports'})

    await catalog.delete_category(category.id)

    assert store.categories == {}
    with pytest.raises(NotFound):
        await catalog.delete_category(category.id)


@pytest.mark.asyncio
async def test_category_detail_lists_its_products(catalog):
    sports = await catalog.create_category({'name': 'Sports'})
    books = await catalog.create_category({'name': 'Books'})
    await catalog.create_product(product_form(sports.id, name='Wilson Basketball'))
    await catalog.create_product(product_form(books.id, name='Laut Bercerita'))

    detail = await catalog.get_category_detail(sports.id)

    assert detail.product_count == 1
    assert [p.name for p in detail.products] == ['Wilson Basketball']
