# src/api/routers/wishlistRoute.py
from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.core.dependencies import GetSession
from src.api.core.response import api_response, raiseExceptions
from src.api.models.product_model.productsModel import Product
from src.api.models.product_model.wishlistsModel import WishlistCreate
from src.api.models.usersModel import User
from src.api.services.wishlist_repository import WishlistRepository

router = APIRouter(prefix="/wishlist", tags=["Wishlist"])


def get_wishlist_repository(session: GetSession) -> WishlistRepository:
    return WishlistRepository(session)


WishlistRepo = Annotated[WishlistRepository, Depends(get_wishlist_repository)]


# ✅ ADD TO WISHLIST
@router.post("/add")
def add_to_wishlist(request: WishlistCreate, session: GetSession, repo: WishlistRepo):
    raiseExceptions(
        (session.get(User, request.user_id), 404, "User not found"),
        (session.get(Product, request.product_id), 404, "Product not found"),
    )

    item = repo.save(request)
    return api_response(201, "Item added to wishlist successfully", repo.find_by_id(item.id))


# ✅ GET WISHLIST ITEM BY ID
@router.get("/read/{id}")
def read_wishlist_item(id: int, repo: WishlistRepo, populate: bool = True):
    item = repo.find_by_id(id, auto_populate=populate)
    raiseExceptions((item, 404, "Wishlist item not found"))

    return api_response(200, "Wishlist item found", item)


# ✅ GET USER WISHLIST
@router.get("/user/{user_id}")
def user_wishlist(
    user_id: int,
    repo: WishlistRepo,
    skip: int = 0,
    limit: int = 50,
    populate: bool = True,
):
    filters = {"user_id": user_id}
    total = repo.count(filters)
    items = repo.find(filters, auto_populate=populate, skip=skip, limit=limit)
    return api_response(200, "Wishlist found", items, total)


# ✅ REMOVE FROM WISHLIST
@router.delete("/remove/{id}")
def remove_from_wishlist(id: int, repo: WishlistRepo):
    raiseExceptions((repo.delete(id), 404, "Wishlist item not found"))
    return api_response(200, "Item removed from wishlist successfully")
