# src/api/services/product_repository.py
"""
Product persistence: validation, stock-driven availability and out-of-stock alerts on
write, shop population on read.
"""
from typing import Any, Dict, List, Optional, Sequence, Union

from sqlalchemy.orm import selectinload
from sqlmodel import Session, func, select

from src.api.core.operation import applyFilters, paginate, updateOp
from src.api.core.email_notification_helper import EmailNotificationHelper
from src.api.models.shop_model.shopsModel import Shop
from src.api.models.product_model.productsModel import (
    AvailabilityStatus,
    Product,
    ProductCreate,
    ProductRead,
    ProductReadWithShop,
    ProductSourceType,
    ProductUpdate,
    ShopReadForProduct,
)

ProductResult = Union[ProductRead, ProductReadWithShop]


def apply_availability_rule(product: Product) -> Product:
    """Depleted stock always means Unavailable; positive stock keeps the given status"""
    if product.stock_quantity <= 0:
        product.availability_status = AvailabilityStatus.UNAVAILABLE
    return product


class ProductRepository:
    def __init__(self, session: Session, notifier=None):
        self.session = session
        # anything with notify_shop_out_of_stock(product, shop) / notify_admin_out_of_stock(product)
        self.notifier = notifier if notifier is not None else EmailNotificationHelper(session)

    # ============================================
    # WRITE
    # ============================================

    def save(self, draft: Union[ProductCreate, Dict[str, Any]]) -> Product:
        """
        Validate and persist a new product.

        Raises pydantic.ValidationError before anything is written when a required
        field is missing or a value is invalid.
        """
        if not isinstance(draft, ProductCreate):
            draft = ProductCreate.model_validate(draft)

        product = Product(**draft.model_dump())
        apply_availability_rule(product)

        self.session.add(product)
        self._commit()
        self.session.refresh(product)

        self.notify_if_out_of_stock(product)
        return product

    def _commit(self) -> None:
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

    def update(
        self, product_id: int, changes: Union[ProductUpdate, Dict[str, Any]]
    ) -> Optional[Product]:
        product = self.session.get(Product, product_id)
        if not product:
            return None
        return self._apply_update(product, changes)

    def _apply_update(self, product: Product, changes: Union[ProductUpdate, Dict[str, Any]]) -> Product:
        if not isinstance(changes, ProductUpdate):
            changes = ProductUpdate.model_validate(changes)

        # the merged record must still satisfy every create-time rule
        merged = {name: getattr(product, name) for name in ProductCreate.model_fields}
        merged.update(changes.model_dump(exclude_unset=True))
        ProductCreate.model_validate(merged)

        updateOp(product, changes, self.session)
        apply_availability_rule(product)

        self._commit()
        self.session.refresh(product)

        self.notify_if_out_of_stock(product)
        return product

    def delete(self, product_id: int) -> bool:
        product = self.session.get(Product, product_id)
        if not product:
            return False
        self.session.delete(product)
        self._commit()
        return True

    def notify_if_out_of_stock(self, product: Product) -> None:
        """
        Best-effort stock alert after a write. Never raises: a missing shop or a
        failing notifier is logged and the write stands.
        """
        if product.stock_quantity > 0:
            return

        if product.source_type == ProductSourceType.SHOP:
            try:
                shop = None
                if product.shop_id is not None:
                    shop = self.session.get(Shop, product.shop_id)
                if not shop:
                    print(f"[ERROR] Shop with ID {product.shop_id} not found")
                    return
                self.notifier.notify_shop_out_of_stock(product, shop)
            except Exception as e:
                print(f"[ERROR] Error sending product out of stock email: {e}")

        elif product.source_type == ProductSourceType.WEBSITE:
            try:
                self.notifier.notify_admin_out_of_stock(product)
            except Exception as e:
                print(f"[ERROR] Error sending product out of stock email to admin: {e}")

    # ============================================
    # READ
    # ============================================

    def _select(self, filters: Optional[Dict[str, Any]], auto_populate: bool):
        statement = applyFilters(select(Product), Product, filters)
        if auto_populate:
            statement = statement.options(selectinload(Product.shop))
        return statement.order_by(Product.id)

    @staticmethod
    def _to_read(product: Product, auto_populate: bool) -> ProductResult:
        if auto_populate:
            return ProductReadWithShop.model_validate(product)
        return ProductRead.model_validate(product)

    def find(
        self,
        filters: Optional[Dict[str, Any]] = None,
        auto_populate: bool = True,
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> List[ProductResult]:
        statement = paginate(self._select(filters, auto_populate), skip, limit)
        products = self.session.exec(statement).all()
        return [self._to_read(product, auto_populate) for product in products]

    def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        statement = applyFilters(select(func.count(Product.id)), Product, filters)
        return self.session.exec(statement).one()

    def find_one(
        self, filters: Optional[Dict[str, Any]] = None, auto_populate: bool = True
    ) -> Optional[ProductResult]:
        product = self.session.exec(self._select(filters, auto_populate)).first()
        return self._to_read(product, auto_populate) if product else None

    def find_by_id(self, product_id: int, auto_populate: bool = True) -> Optional[ProductResult]:
        return self.find_one({"id": product_id}, auto_populate=auto_populate)

    def find_one_and_update(
        self,
        filters: Dict[str, Any],
        changes: Union[ProductUpdate, Dict[str, Any]],
        auto_populate: bool = True,
    ) -> Optional[ProductResult]:
        product = self.session.exec(self._select(filters, auto_populate=False)).first()
        if not product:
            return None
        product = self._apply_update(product, changes)
        return self.find_by_id(product.id, auto_populate=auto_populate)

    def populate_shop(self, items: Sequence[ProductResult]) -> List[ProductReadWithShop]:
        """
        Resolve the shop on reference-only reads. Already populated items are
        returned as they are and cost no lookup.
        """
        pending_ids = {
            item.shop_id
            for item in items
            if not isinstance(item, ProductReadWithShop) and item.shop_id is not None
        }
        shops = {}
        if pending_ids:
            rows = self.session.exec(select(Shop).where(Shop.id.in_(list(pending_ids)))).all()
            shops = {shop.id: ShopReadForProduct.model_validate(shop) for shop in rows}

        populated = []
        for item in items:
            if isinstance(item, ProductReadWithShop):
                populated.append(item)
            else:
                populated.append(
                    ProductReadWithShop(**item.model_dump(), shop=shops.get(item.shop_id))
                )
        return populated
