from typing import Annotated, Optional

from fastapi import APIRouter, Depends

from src.api.core.dependencies import GetSession
from src.api.core.response import api_response, raiseExceptions
from src.api.models.product_model.productsModel import (
    AvailabilityStatus,
    ProductCategory,
    ProductCreate,
    ProductSourceType,
    ProductUpdate,
)
from src.api.services.product_repository import ProductRepository

router = APIRouter(prefix="/product", tags=["Product"])


def get_product_repository(session: GetSession) -> ProductRepository:
    return ProductRepository(session)


ProductRepo = Annotated[ProductRepository, Depends(get_product_repository)]


# ✅ CREATE
@router.post("/create")
def create(request: ProductCreate, repo: ProductRepo):
    product = repo.save(request)
    return api_response(201, "Product Created Successfully", repo.find_by_id(product.id))


# ✅ UPDATE
@router.put("/update/{id}")
def update(id: int, request: ProductUpdate, repo: ProductRepo):
    product = repo.update(id, request)
    raiseExceptions((product, 404, "Product not found"))

    return api_response(200, "Product Updated Successfully", repo.find_by_id(product.id))


# ✅ READ
@router.get("/read/{id}")
def get(id: int, repo: ProductRepo, populate: bool = True):
    product = repo.find_by_id(id, auto_populate=populate)
    raiseExceptions((product, 404, "Product not found"))

    return api_response(200, "Product Found", product)


# ✅ DELETE
@router.delete("/delete/{id}")
def delete(id: int, repo: ProductRepo):
    raiseExceptions((repo.delete(id), 404, "Product not found"))
    return api_response(200, f"Product {id} deleted")


# ✅ LIST
@router.get("/list")
def list_products(
    repo: ProductRepo,
    category: Optional[ProductCategory] = None,
    brand: Optional[str] = None,
    availability_status: Optional[AvailabilityStatus] = None,
    source_type: Optional[ProductSourceType] = None,
    shop_id: Optional[int] = None,
    skip: int = 0,
    limit: int = 10,
    populate: bool = True,
):
    candidates = {
        "category": category,
        "brand": brand,
        "availability_status": availability_status,
        "source_type": source_type,
        "shop_id": shop_id,
    }
    filters = {key: value for key, value in candidates.items() if value is not None}

    total = repo.count(filters)
    products = repo.find(filters, auto_populate=populate, skip=skip, limit=limit)
    return api_response(200, "data found", products, total)
