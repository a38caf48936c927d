# src/api/models/product_model/wishlistsModel.py
from typing import TYPE_CHECKING, Literal, Optional
from sqlmodel import SQLModel, Field, Relationship

from src.api.models.baseModel import TimeStampReadModel, TimeStampedModel

if TYPE_CHECKING:
    from src.api.models import User, Product


class Wishlist(TimeStampedModel, table=True):
    __tablename__: Literal["wishlists"] = "wishlists"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    product_id: int = Field(foreign_key="products.id", index=True)

    user: Optional["User"] = Relationship(back_populates="wishlists")
    product: Optional["Product"] = Relationship(back_populates="wishlists")


class WishlistCreate(SQLModel):
    user_id: int
    product_id: int


class WishlistRead(TimeStampReadModel):
    id: int
    user_id: int
    product_id: int
