# src/api/services/wishlist_repository.py
from typing import Any, Dict, List, Optional, Sequence, Union

from sqlalchemy.orm import selectinload
from sqlmodel import Session, func, select

from src.api.core.operation import applyFilters, paginate
from src.api.models.product_model.productsModel import Product
from src.api.models.product_model.wishlistsModel import (
    Wishlist,
    WishlistCreate,
    WishlistRead,
)
from src.api.models.product_model.wishlist_schemas import (
    ProductReadForWishlist,
    WishlistReadWithProduct,
)

WishlistResult = Union[WishlistRead, WishlistReadWithProduct]


class WishlistRepository:
    def __init__(self, session: Session):
        self.session = session

    def save(self, entry: Union[WishlistCreate, Dict[str, Any]]) -> Wishlist:
        """Persist a (user, product) pair. Duplicate pairs are not rejected here."""
        if not isinstance(entry, WishlistCreate):
            entry = WishlistCreate.model_validate(entry)

        item = Wishlist(**entry.model_dump())
        self.session.add(item)
        self._commit()
        self.session.refresh(item)
        return item

    def delete(self, item_id: int) -> bool:
        item = self.session.get(Wishlist, item_id)
        if not item:
            return False
        self.session.delete(item)
        self._commit()
        return True

    def _commit(self) -> None:
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

    def count(self, filters: Optional[Dict[str, Any]] = None) -> int:
        statement = applyFilters(select(func.count(Wishlist.id)), Wishlist, filters)
        return self.session.exec(statement).one()

    def _select(self, filters: Optional[Dict[str, Any]], auto_populate: bool):
        statement = applyFilters(select(Wishlist), Wishlist, filters)
        if auto_populate:
            statement = statement.options(selectinload(Wishlist.product))
        return statement.order_by(Wishlist.id)

    @staticmethod
    def _to_read(item: Wishlist, auto_populate: bool) -> WishlistResult:
        if auto_populate:
            return WishlistReadWithProduct.model_validate(item)
        return WishlistRead.model_validate(item)

    def find(
        self,
        filters: Optional[Dict[str, Any]] = None,
        auto_populate: bool = True,
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> List[WishlistResult]:
        statement = paginate(self._select(filters, auto_populate), skip, limit)
        items = self.session.exec(statement).all()
        return [self._to_read(item, auto_populate) for item in items]

    def find_one(
        self, filters: Optional[Dict[str, Any]] = None, auto_populate: bool = True
    ) -> Optional[WishlistResult]:
        item = self.session.exec(self._select(filters, auto_populate)).first()
        return self._to_read(item, auto_populate) if item else None

    def find_by_id(self, item_id: int, auto_populate: bool = True) -> Optional[WishlistResult]:
        return self.find_one({"id": item_id}, auto_populate=auto_populate)

    def populate_product(self, items: Sequence[WishlistResult]) -> List[WishlistReadWithProduct]:
        """Resolve the product on reference-only reads; populated items pass through untouched"""
        pending_ids = {
            item.product_id for item in items if not isinstance(item, WishlistReadWithProduct)
        }
        products = {}
        if pending_ids:
            rows = self.session.exec(select(Product).where(Product.id.in_(list(pending_ids)))).all()
            products = {p.id: ProductReadForWishlist.model_validate(p) for p in rows}

        populated = []
        for item in items:
            if isinstance(item, WishlistReadWithProduct):
                populated.append(item)
            else:
                populated.append(
                    WishlistReadWithProduct(**item.model_dump(), product=products.get(item.product_id))
                )
        return populated
