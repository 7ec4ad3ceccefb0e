import logging

from storefront.config import CATALOG_LEGACY_MODE
from storefront.models import Product

logger = logging.getLogger(__name__)

PRODUCTS: list[dict] = [
    {
        "id": 1,
        "name": "Samsung Galaxy S24 Ultra",
        "price": 124999,
        "rating": 4.5,
        "image": "/images/samsung-s24.jpg",
        "category": "mobiles",
    },
    {
        "id": 2,
        "name": "iPhone 15 Pro Max",
        "price": 159900,
        "rating": 4.7,
        "image": "/images/iphone-15.jpg",
        "category": "mobiles",
    },
    {
        "id": 3,
        "name": "OnePlus 12",
        "price": 64999,
        "rating": 4.4,
        "image": "/images/oneplus-12.jpg",
        "category": "mobiles",
    },
    {
        "id": 4,
        "name": "Google Pixel 8 Pro",
        "price": 106999,
        "rating": 4.6,
        "image": "/images/pixel-8.jpg",
        "category": "mobiles",
    },
    {
        "id": 5,
        "name": "Xiaomi 14 Pro",
        "price": 79999,
        "rating": 4.3,
        "image": "/images/xiaomi-14.jpg",
        "category": "mobiles",
    },
    {
        "id": 6,
        "name": "Vivo X100 Pro",
        "price": 89999,
        "rating": 4.5,
        "image": "/images/vivo-x100.jpg",
        "category": "mobiles",
    },
]


class ProductNotFound(LookupError):
    def __init__(self, product_id: int):
        super().__init__(f"Product not found: {product_id}")
        self.product_id = product_id


class Catalog:
    """Read-only product catalog.

    The product set is validated and frozen at construction. With
    ``legacy=True`` the catalog reproduces the original storefront quirks:
    the category filter is ignored and a lookup miss returns the first
    product instead of raising :class:`ProductNotFound`.
    """

    def __init__(self, products: list[dict], legacy: bool = False):
        self._products = tuple(Product(**p) for p in products)
        self.legacy = legacy

        seen: set[int] = set()
        for product in self._products:
            if product.id in seen:
                raise ValueError(f"Duplicate product id: {product.id}")
            seen.add(product.id)

    @property
    def products(self) -> tuple[Product, ...]:
        return self._products

    def list_by_category(self, category: str) -> list[Product]:
        if self.legacy:
            logger.debug("Legacy listing, ignoring category %r", category)
            return list(self._products)
        matches = [p for p in self._products if p.category == category]
        logger.debug("Category %r matched %d products", category, len(matches))
        return matches

    def get_by_id(self, product_id: int) -> Product:
        for product in self._products:
            if product.id == product_id:
                return product
        if self.legacy and self._products:
            logger.debug("Legacy lookup miss for id %s, returning first product", product_id)
            return self._products[0]
        raise ProductNotFound(product_id)

    def categories(self) -> list[str]:
        # dict keeps first-appearance order
        return list(dict.fromkeys(p.category for p in self._products))


catalog = Catalog(PRODUCTS, legacy=CATALOG_LEGACY_MODE)


def get_catalog() -> Catalog:
    return catalog
