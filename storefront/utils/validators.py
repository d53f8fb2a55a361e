# storefront/utils/validators.py
"""Field validation for the product and category forms.

Validators are pure: they never touch storage. Every rule runs so that all
violations are reported together, keyed by form field name. Whether a
category id points at an existing row is left to the products foreign key.

Limits follow the column types: ids and stock are PostgreSQL ``integer`` and
price is ``NUMERIC(14,2)``.
"""
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Mapping, Optional

MAX_ID = 2147483647
MAX_STOCK = 2147483647
PRICE_LIMIT = Decimal("1000000000000")
CENT = Decimal("0.01")


@dataclass
class ValidationResult:
    errors: Dict[str, str] = field(default_factory=dict)

    @property
    def valid(self) -> bool:
        return not self.errors


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def parse_decimal(value: Any) -> Optional[Decimal]:
    try:
        number = Decimal(_text(value))
    except InvalidOperation:
        return None
    if not number.is_finite():
        return None
    return number


def parse_int(value: Any) -> Optional[int]:
    try:
        return int(_text(value))
    except ValueError:
        return None


def valid_price(price: Optional[Decimal]) -> bool:
    """Positive, below 10^12 and with at most two decimal places"""
    if price is None or price <= 0 or price >= PRICE_LIMIT:
        return False
    return price.quantize(CENT) == price


def validate_category(data: Mapping[str, Any]) -> ValidationResult:
    result = ValidationResult()
    if not _text(data.get('name')):
        result.errors['name'] = 'Name is required'
    return result


def validate_product(data: Mapping[str, Any]) -> ValidationResult:
    result = ValidationResult()

    if not _text(data.get('name')):
        result.errors['name'] = 'Name is required'

    if not valid_price(parse_decimal(data.get('price'))):
        result.errors['price'] = 'Valid price is required'

    stock = parse_int(data.get('stock'))
    if stock is None or not 0 <= stock <= MAX_STOCK:
        result.errors['stock'] = 'Valid stock is required'

    category_id = parse_int(data.get('category_id'))
    if category_id is None or not 1 <= category_id <= MAX_ID:
        result.errors['category_id'] = 'Valid category is required'

    return result


def product_fields(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Typed column values for a product form that passed validate_product.

    ``description`` is only included when the caller sent it, so an update
    without the key leaves the stored description alone.
    """
    fields = {
        'name': _text(data.get('name')),
        'price': parse_decimal(data.get('price')),
        'stock': parse_int(data.get('stock')),
        'category_id': parse_int(data.get('category_id')),
    }
    if 'description' in data:
        fields['description'] = _text(data['description']) or None
    return fields


def category_fields(data: Mapping[str, Any]) -> Dict[str, Any]:
    description = _text(data.get('description'))
    return {
        'name': _text(data.get('name')),
        'description': description or None,
    }
