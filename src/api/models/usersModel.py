from typing import TYPE_CHECKING, List, Optional
from sqlmodel import Field, Relationship

from src.api.models.baseModel import TimeStampedModel

if TYPE_CHECKING:
    from src.api.models import Shop, Wishlist


class User(TimeStampedModel, table=True):
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=191)
    email: str = Field(max_length=191, index=True)
    # root users are site administrators and receive catalog stock alerts
    is_root: bool = Field(default=False)
    is_active: bool = Field(default=True)

    # relationships
    shops: List["Shop"] = Relationship(
        back_populates="owner",
        sa_relationship_kwargs={"foreign_keys": "Shop.owner_id"},
    )
    wishlists: List["Wishlist"] = Relationship(back_populates="user")

