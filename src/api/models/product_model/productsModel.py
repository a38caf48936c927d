from typing import TYPE_CHECKING, Literal, Optional, List
from enum import Enum
from pydantic import field_validator, model_validator
from sqlmodel import JSON, Column, SQLModel, Field, Relationship

from src.api.models.baseModel import TimeStampReadModel, TimeStampedModel

if TYPE_CHECKING:
    from src.api.models import Shop, Wishlist


DEFAULT_RETURN_POLICY = "30-days return policy"

REQUIRED_FIELD_MESSAGES = {
    "name": "product should have a name",
    "description": "provide description for the product is required.",
    "brand": "Please provide the brand name",
    "price": "please provide price for your product",
    "stock_quantity": "please provide the exact number of available stock quantity for your product",
    "images": "please provide images for your product",
}


class ProductSourceType(str, Enum):
    WEBSITE = "Website"
    SHOP = "Shop"


class ProductCategory(str, Enum):
    ELECTRONICS = "Electronics"
    FASHION = "Fashion"
    HOME = "Home"
    BEAUTY = "Beauty"
    SPORTS = "Sports"
    TOYS = "Toys"
    BOOKS = "Books"
    GROCERY = "Grocery"
    HEALTH = "Health"
    AUTOMOTIVE = "Automotive"
    OTHER = "Other"


class AvailabilityStatus(str, Enum):
    AVAILABLE = "Available"
    UNAVAILABLE = "Unavailable"
    PRE_ORDER = "Pre-order"
    DISCONTINUED = "Discontinued"


class Product(TimeStampedModel, table=True):
    __tablename__: Literal["products"] = "products"

    id: Optional[int] = Field(default=None, primary_key=True)
    source_type: ProductSourceType = Field(default=ProductSourceType.WEBSITE)
    name: str = Field(max_length=191)
    description: str
    category: ProductCategory = Field(index=True)
    brand: str = Field(max_length=191, index=True)
    material: str = Field(max_length=191)
    price: float = Field(index=True)
    discount: float = Field(default=0)
    discount_codes: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    stock_quantity: int

    images: List[str] = Field(default_factory=list, sa_column=Column(JSON))
    videos: Optional[List[str]] = Field(default=None, sa_column=Column(JSON))
    color: Optional[str] = Field(default=None, max_length=191)
    manufacturer: Optional[str] = Field(default=None, max_length=191)
    supplier: Optional[str] = Field(default=None, max_length=191)

    average_rating: float = Field(default=4.5)
    total_reviews: int = Field(default=0)
    shipping_cost: Optional[float] = None
    shipping_methods: List[str] = Field(
        default_factory=lambda: ["standard"],
        sa_column=Column(JSON),
    )
    availability_status: AvailabilityStatus = Field(
        default=AvailabilityStatus.AVAILABLE, index=True
    )
    freezed: bool = Field(default=False)
    return_policy: str = Field(default=DEFAULT_RETURN_POLICY)

    # foreign key
    shop_id: Optional[int] = Field(default=None, foreign_key="shops.id", index=True)

    # relationships
    shop: Optional["Shop"] = Relationship(back_populates="products")
    wishlists: List["Wishlist"] = Relationship(
        back_populates="product",
        sa_relationship_kwargs={"cascade": "all, delete-orphan"},
    )


class ProductCreate(SQLModel):
    source_type: ProductSourceType = ProductSourceType.WEBSITE
    shop_id: Optional[int] = None
    name: str = Field(min_length=1, max_length=191)
    description: str = Field(min_length=1)
    category: ProductCategory
    brand: str = Field(min_length=1, max_length=191)
    material: str = Field(min_length=1, max_length=191)
    price: float
    discount: float = Field(default=0, ge=0)
    discount_codes: List[str] = Field(default_factory=list)
    stock_quantity: int
    images: List[str] = Field(min_length=1)
    videos: Optional[List[str]] = None
    color: Optional[str] = None
    manufacturer: Optional[str] = None
    supplier: Optional[str] = None
    average_rating: float = 4.5
    total_reviews: int = Field(default=0, ge=0)
    shipping_cost: Optional[float] = Field(default=None, ge=0)
    shipping_methods: List[str] = Field(default_factory=lambda: ["standard"])
    availability_status: AvailabilityStatus = AvailabilityStatus.AVAILABLE
    freezed: bool = False
    return_policy: str = DEFAULT_RETURN_POLICY

    @model_validator(mode="before")
    @classmethod
    def check_required_fields(cls, data):
        if isinstance(data, dict):
            missing = [
                message
                for field, message in REQUIRED_FIELD_MESSAGES.items()
                if data.get(field) is None
            ]
            if missing:
                raise ValueError("; ".join(missing))
        return data

    @field_validator("images")
    @classmethod
    def images_not_blank(cls, v):
        """Every image entry must be a non-empty URL/path"""
        if any(not image or not image.strip() for image in v):
            raise ValueError("images must not contain empty entries")
        return v

    @model_validator(mode="after")
    def check_shop_reference(self):
        if self.source_type == ProductSourceType.SHOP and self.shop_id is None:
            raise ValueError("shop_id is required when source_type is Shop")
        if self.source_type == ProductSourceType.WEBSITE and self.shop_id is not None:
            raise ValueError("shop_id is only allowed when source_type is Shop")
        return self


class ProductUpdate(SQLModel):
    source_type: Optional[ProductSourceType] = None
    shop_id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    category: Optional[ProductCategory] = None
    brand: Optional[str] = None
    material: Optional[str] = None
    price: Optional[float] = None
    discount: Optional[float] = None
    discount_codes: Optional[List[str]] = None
    stock_quantity: Optional[int] = None
    images: Optional[List[str]] = None
    videos: Optional[List[str]] = None
    color: Optional[str] = None
    manufacturer: Optional[str] = None
    supplier: Optional[str] = None
    average_rating: Optional[float] = None
    total_reviews: Optional[int] = None
    shipping_cost: Optional[float] = None
    shipping_methods: Optional[List[str]] = None
    availability_status: Optional[AvailabilityStatus] = None
    freezed: Optional[bool] = None
    return_policy: Optional[str] = None


class ShopReadForProduct(SQLModel):
    id: int
    owner_id: int
    name: Optional[str] = None
    slug: Optional[str] = None
    is_active: bool

    model_config = {"from_attributes": True}


class ProductRead(TimeStampReadModel):
    """Product with its shop kept as a bare reference (shop_id)"""

    id: int
    source_type: ProductSourceType
    shop_id: Optional[int] = None
    name: str
    description: str
    category: ProductCategory
    brand: str
    material: str
    price: float
    discount: float
    discount_codes: List[str] = []
    stock_quantity: int
    images: List[str]
    videos: Optional[List[str]] = None
    color: Optional[str] = None
    manufacturer: Optional[str] = None
    supplier: Optional[str] = None
    average_rating: float
    total_reviews: int
    shipping_cost: Optional[float] = None
    shipping_methods: List[str] = []
    availability_status: AvailabilityStatus
    freezed: bool
    return_policy: str


class ProductReadWithShop(ProductRead):
    """Product with its shop resolved; shop stays None for catalog products"""

    shop: Optional[ShopReadForProduct] = None
