"""Fixed product catalog.

Three hardcoded records. Prices are Decimal so currency values never pass
through binary floating point.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class Category(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(..., alias="Id")
    name: str = Field(..., alias="Name")


class Product(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(..., alias="Id")
    name: str = Field(..., alias="Name")
    price: Decimal = Field(..., alias="Price")
    stock: int = Field(..., alias="Stock")
    category: Category = Field(..., alias="Category")


ELECTRONICS = (101, "Electronics")
ACCESSORIES = (102, "Accessories")

# (id, name, price, stock, (category id, category name))
_CATALOG = [
    (1, "Laptop", "1200.50", 25, ELECTRONICS),
    (2, "Headphones", "50.00", 100, ACCESSORIES),
    (3, "USB-C Cable", "15.99", 250, ACCESSORIES),
]


def generate_products() -> tuple[Product, ...]:
    """Build the catalog. Returns new, equal objects on every call."""
    return tuple(
        Product(
            id=product_id,
            name=name,
            price=Decimal(price),
            stock=stock,
            category=Category(id=category_id, name=category_name),
        )
        for product_id, name, price, stock, (category_id, category_name) in _CATALOG
    )
