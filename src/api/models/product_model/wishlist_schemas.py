# src/api/models/product_model/wishlist_schemas.py
from typing import Optional, List

from sqlmodel import SQLModel

from src.api.models.product_model.productsModel import (
    AvailabilityStatus,
    ProductSourceType,
)
from src.api.models.product_model.wishlistsModel import WishlistRead


class ProductReadForWishlist(SQLModel):
    id: int
    name: str
    brand: str
    price: float
    discount: float = 0
    images: List[str] = []
    stock_quantity: int
    availability_status: AvailabilityStatus
    source_type: ProductSourceType
    shop_id: Optional[int] = None

    model_config = {"from_attributes": True}


class WishlistReadWithProduct(WishlistRead):
    # None only when the referenced product row no longer exists
    product: Optional[ProductReadForWishlist] = None
