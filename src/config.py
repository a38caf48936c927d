import os

from dotenv import load_dotenv

load_dotenv()

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./ecommerce.db")
DOMAIN = os.getenv("DOMAIN", "http://localhost:8000")

# =============================================================================
# SMTP / Email
# =============================================================================

SMTP_HOST = os.getenv("SMTP_HOST", "smtp.gmail.com")
SMTP_PORT = int(os.getenv("SMTP_PORT", "587"))
SMTP_USERNAME = os.getenv("SMTP_USERNAME")
SMTP_PASSWORD = os.getenv("SMTP_PASSWORD")
SMTP_USE_TLS = os.getenv("SMTP_USE_TLS", "True").lower() == "true"
FROM_EMAIL = os.getenv("FROM_EMAIL", SMTP_USERNAME or "no-reply@localhost")
FROM_NAME = os.getenv("FROM_NAME", "System")

# Extra recipients for admin stock alerts, besides root users
ADMIN_EMAILS = [
    email.strip()
    for email in os.getenv("ADMIN_EMAILS", "").replace(";", ",").split(",")
    if email.strip()
]
