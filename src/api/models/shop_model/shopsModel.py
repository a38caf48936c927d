# src/api/models/shop_model/shopsModel.py
from typing import Literal, Optional, List, TYPE_CHECKING
from sqlmodel import Field, Relationship

from src.api.models.baseModel import TimeStampedModel

if TYPE_CHECKING:
    from src.api.models import User, Product


class Shop(TimeStampedModel, table=True):
    __tablename__: Literal["shops"] = "shops"

    id: Optional[int] = Field(default=None, primary_key=True)
    owner_id: int = Field(foreign_key="users.id")
    name: Optional[str] = Field(default=None, max_length=191, unique=True)
    slug: Optional[str] = Field(default=None, max_length=191, index=True, unique=True)
    description: Optional[str] = None
    is_active: bool = Field(default=False)

    owner: "User" = Relationship(
        back_populates="shops",
        sa_relationship_kwargs={"foreign_keys": "[Shop.owner_id]"},
    )
    products: List["Product"] = Relationship(back_populates="shop")

