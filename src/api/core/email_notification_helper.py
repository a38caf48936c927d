# email_notification_helper.py
"""
Stock alert emails for shop owners and site administrators
Works on top of the template mailer in email_helper
"""
from typing import List, Optional
from sqlmodel import Session, select

from src import config
from src.api.models.usersModel import User
from src.api.models.shop_model.shopsModel import Shop
from src.api.models.product_model.productsModel import Product
from src.api.core.email_helper import send_email


class EmailNotificationHelper:
    """Sends out-of-stock alerts; all sends are fire-and-forget"""

    # Email Template IDs (update these based on your actual template IDs)
    TEMPLATE_OUT_OF_STOCK = 13
    TEMPLATE_OUT_OF_STOCK_ADMIN = 19

    def __init__(self, session: Session):
        self.session = session

    def get_shop_owner(self, shop: Shop) -> Optional[User]:
        return self.session.get(User, shop.owner_id)

    def get_admin_emails(self) -> List[str]:
        """All active root user emails plus the configured ADMIN_EMAILS, de-duplicated"""
        admin_users = self.session.exec(
            select(User).where(User.is_root == True, User.is_active == True)  # noqa: E712
        ).all()
        emails = [admin.email for admin in admin_users if admin.email]
        for email in config.ADMIN_EMAILS:
            if email not in emails:
                emails.append(email)
        return emails

    @staticmethod
    def _product_replacements(product: Product) -> dict:
        return {
            "product_name": product.name,
            "product_id": product.id,
            "brand": product.brand,
            "stock_quantity": product.stock_quantity,
            "availability_status": product.availability_status.value,
            "product_url": f"{config.DOMAIN}/product/{product.id}",
        }

    # ============================================
    # OUT OF STOCK
    # ============================================

    def notify_shop_out_of_stock(self, product: Product, shop: Shop):
        """
        Send out of stock alert email to the owner of the shop selling the product

        Args:
            product: The product whose stock ran out
            shop: The shop the product belongs to
        """
        owner = self.get_shop_owner(shop)
        if not owner or not owner.email:
            print(f"[ERROR] No owner email found for shop {shop.id}")
            return None

        replacements = {
            **self._product_replacements(product),
            "shop_name": shop.name or "",
            "owner_name": owner.name or "Shop Owner",
        }
        thread = send_email(
            to_email=[{"name": owner.name, "email": owner.email}],
            email_template_id=self.TEMPLATE_OUT_OF_STOCK,
            replacements=replacements,
            session=self.session,
        )
        print(f"[EMAIL] Out of stock email queued for {owner.email}")
        return thread

    def notify_admin_out_of_stock(self, product: Product):
        """
        Send out of stock alert email to site administrators for catalog products

        Args:
            product: The product whose stock ran out
        """
        admin_emails = self.get_admin_emails()
        if not admin_emails:
            print(f"[ERROR] No admin emails configured, skipping alert for product {product.id}")
            return None

        thread = send_email(
            to_email=admin_emails,
            email_template_id=self.TEMPLATE_OUT_OF_STOCK_ADMIN,
            replacements=self._product_replacements(product),
            session=self.session,
        )
        print(f"[EMAIL] Admin out of stock email queued for {', '.join(admin_emails)}")
        return thread
