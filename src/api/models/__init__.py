# root
from .usersModel import User

# shop
from .shop_model import Shop

# product
from .product_model.productsModel import Product

# wishlist
from .product_model.wishlistsModel import Wishlist

# email
from .email_model.emailModel import Emailtemplate


__all__ = [
    # root
    "User",
    # shop
    "Shop",
    # product
    "Product",
    # wishlist
    "Wishlist",
    # email
    "Emailtemplate",
]
