from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.core.middleware.error_handling import register_exception_handlers
from src.lib.db_con import create_db_and_tables
from src.api.routers import (
    # product
    productRoute,
    # wishlist
    wishlistRoute,
)


# Define app lifespan: this runs once when the app starts and when it shuts down
@asynccontextmanager
async def lifespan(app: FastAPI):
    print("[APP] Application starting up...")
    create_db_and_tables()

    yield

    print("[APP] Application shutting down...")


app = FastAPI(lifespan=lifespan, root_path="/api")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_exception_handlers(app)


@app.get("/")
def root():
    return {"message": "Product & wishlist service is running"}


# Product
app.include_router(productRoute.router)
# wishlist
app.include_router(wishlistRoute.router)
