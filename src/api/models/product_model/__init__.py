from .productsModel import (
    AvailabilityStatus,
    Product,
    ProductCategory,
    ProductSourceType,
)
from .wishlistsModel import Wishlist

__all__ = [
    "AvailabilityStatus",
    "Product",
    "ProductCategory",
    "ProductSourceType",
    "Wishlist",
]
