"""Read-only product catalog."""
import json
from pathlib import Path
from typing import Dict, Iterable, Iterator, Optional, Tuple, Union

from giftcart.errors import ERROR_DUPLICATE_PRODUCT_ID, ERROR_INVALID_CATALOG
from .models import Product

DEFAULT_PRODUCTS: Tuple[Product, ...] = (
    Product(id=1, name="Laptop", price=500),
    Product(id=2, name="Smartphone", price=300),
    Product(id=3, name="Headphones", price=100),
    Product(id=4, name="Smartwatch", price=150),
)

DEFAULT_GIFT = Product(id=99, name="Wireless Mouse", price=0)


class Catalog:
    """
    Ordered, immutable collection of products.

    Iteration follows the order products were supplied in.
    """

    def __init__(self, products: Iterable[Product] = DEFAULT_PRODUCTS):
        self._products: Tuple[Product, ...] = tuple(products)
        self._by_id: Dict[int, Product] = {}
        for product in self._products:
            if product.id in self._by_id:
                raise ValueError(f"{ERROR_DUPLICATE_PRODUCT_ID}: {product.id}")
            self._by_id[product.id] = product

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "Catalog":
        """Load a catalog from a JSON list of {id, name, price} objects."""
        with open(path, encoding="utf-8") as fh:
            data = json.load(fh)
        if not isinstance(data, list):
            raise ValueError(f"{ERROR_INVALID_CATALOG}: {path}")
        return cls(Product.from_dict(item) for item in data)

    def get(self, product_id: int) -> Optional[Product]:
        """Product by id, or None."""
        return self._by_id.get(product_id)

    def __contains__(self, product_id: object) -> bool:
        return product_id in self._by_id

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def __len__(self) -> int:
        return len(self._products)

    @property
    def products(self) -> Tuple[Product, ...]:
        return self._products
