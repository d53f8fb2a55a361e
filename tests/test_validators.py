# tests/test_validators.py
from decimal import Decimal
from storefront.utils.validators import (
    category_fields,
    product_fields,
    validate_category,
    validate_product,
)


def valid_product(**overrides):
    data = {'name': 'Puma RS-X', 'price': '1899000', 'stock': '35', 'category_id': '3'}
    data.update(overrides)
    return data


def test_valid_product():
    result = validate_product(valid_product())
    assert result.valid
    assert result.errors == {}


def test_price_must_be_positive_number():
    for price in ('0', '-5', 'abc', '', None, 'NaN', 'Infinity'):
        result = validate_product(valid_product(price=price))
        assert not result.valid
        assert 'price' in result.errors


def test_stock_must_be_non_negative_integer():
    assert validate_product(valid_product(stock='0')).valid
    for stock in ('-1', '2.5', 'ten', None):
        assert 'stock' in validate_product(valid_product(stock=stock)).errors


def test_category_id_must_be_integer():
    assert 'category_id' in validate_product(valid_product(category_id='abc')).errors
    assert 'category_id' in validate_product(valid_product(category_id=None)).errors
    # existence is checked by the foreign key, not here
    assert validate_product(valid_product(category_id='99999')).valid


def test_all_violations_reported_together():
    result = validate_product({'name': '  '})
    assert set(result.errors) == {'name', 'price', 'stock', 'category_id'}


def test_json_numbers_are_accepted():
    assert validate_product(valid_product(price=12.5, stock=3, category_id=1)).valid


def test_product_fields_are_typed():
    fields = product_fields(valid_product(name='  Puma RS-X ', description='  '))
    assert fields == {
        'name': 'Puma RS-X',
        'description': None,
        'price': Decimal('1899000'),
        'stock': 35,
        'category_id': 3,
    }


def test_category_name_required():
    assert validate_category({'name': 'Books'}).valid
    assert validate_category({'name': ' '}).errors == {'name': 'Name is required'}
    assert validate_category({}).errors == {'name': 'Name is required'}


def test_category_fields():
    assert category_fields({'name': ' Books ', 'description': 'Reading'}) == {
        'name': 'Books',
        'description': 'Reading',
    }


def test_price_must_fit_numeric_column():
    for price in ('0.001', '19.999', '1e20', '1000000000000'):
        assert 'price' in validate_product(valid_product(price=price)).errors
    for price in ('0.01', '19.99', '19.990', '999999999999.99'):
        assert validate_product(valid_product(price=price)).valid


def test_integers_must_fit_int4():
    assert 'stock' in validate_product(valid_product(stock='3000000000')).errors
    assert validate_product(valid_product(stock='2147483647')).valid
    for category_id in ('99999999999', '0', '-1'):
        assert 'category_id' in validate_product(valid_product(category_id=category_id)).errors


def test_missing_description_is_left_out():
    fields = product_fields(valid_product())
    assert 'description' not in fields
    assert product_fields(valid_product(description=None))['description'] is None
