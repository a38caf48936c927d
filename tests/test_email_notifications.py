import pytest

from src import config
from src.api.core import email_notification_helper as notification_module
from src.api.core.email_helper import EmailHelper
from src.api.core.email_notification_helper import EmailNotificationHelper
from src.api.models.email_model.emailModel import Emailtemplate
from src.api.models.usersModel import User
from src.api.services.product_repository import ProductRepository


@pytest.fixture
def sent(monkeypatch):
    calls = []

    def fake_send_email(**kwargs):
        calls.append(kwargs)

    monkeypatch.setattr(notification_module, "send_email", fake_send_email)
    return calls


@pytest.fixture
def lamp(session, notifier, product_data):
    return ProductRepository(session, notifier=notifier).save({**product_data, "stock_quantity": 0})


# ============================================
# EmailNotificationHelper
# ============================================


def test_shop_alert_goes_to_owner(session, sent, shop, owner, lamp):
    EmailNotificationHelper(session).notify_shop_out_of_stock(lamp, shop)

    assert len(sent) == 1
    call = sent[0]
    assert call["to_email"] == [{"name": "Sara Owner", "email": "owner@example.com"}]
    assert call["email_template_id"] == EmailNotificationHelper.TEMPLATE_OUT_OF_STOCK
    assert call["replacements"]["shop_name"] == "Lamp Corner"
    assert call["replacements"]["product_name"] == "Desk Lamp"
    assert call["replacements"]["availability_status"] == "Unavailable"


def test_admin_alert_goes_to_root_users_and_configured_addresses(session, sent, admin, owner, lamp, monkeypatch):
    monkeypatch.setattr(config, "ADMIN_EMAILS", ["ops@example.com", "admin@example.com"])

    EmailNotificationHelper(session).notify_admin_out_of_stock(lamp)

    assert len(sent) == 1
    assert sent[0]["to_email"] == ["admin@example.com", "ops@example.com"]
    assert sent[0]["email_template_id"] == EmailNotificationHelper.TEMPLATE_OUT_OF_STOCK_ADMIN


def test_admin_alert_without_recipients_is_skipped(session, sent, lamp, monkeypatch, capsys):
    monkeypatch.setattr(config, "ADMIN_EMAILS", [])

    EmailNotificationHelper(session).notify_admin_out_of_stock(lamp)

    assert sent == []
    assert "[ERROR] No admin emails configured" in capsys.readouterr().out


def test_inactive_root_users_are_not_alerted(session, sent, lamp, monkeypatch):
    monkeypatch.setattr(config, "ADMIN_EMAILS", [])
    session.add(User(name="Former Admin", email="gone@example.com", is_root=True, is_active=False))
    session.commit()

    EmailNotificationHelper(session).notify_admin_out_of_stock(lamp)

    assert sent == []


def test_repository_uses_email_helper_by_default(session, sent, shop, product_data):
    repo = ProductRepository(session)
    repo.save({**product_data, "source_type": "Shop", "shop_id": shop.id, "stock_quantity": 0})

    assert [call["email_template_id"] for call in sent] == [EmailNotificationHelper.TEMPLATE_OUT_OF_STOCK]


# ============================================
# EmailHelper
# ============================================


@pytest.fixture
def template(session):
    template = Emailtemplate(
        id=EmailNotificationHelper.TEMPLATE_OUT_OF_STOCK,
        name="Out of stock",
        slug="out-of-stock",
        subject="{{product_name}} is out of stock",
        html_content="<p>Hi {{owner_name}}, restock {{product_name}} at {{shop_name}}.</p>",
    )
    session.add(template)
    session.commit()
    return template


def test_render_template_applies_replacements(session, template):
    subject, html = EmailHelper().render_template(
        session,
        template.id,
        {"product_name": "Desk Lamp", "owner_name": "Sara", "shop_name": "Lamp Corner"},
    )

    assert subject == "Desk Lamp is out of stock"
    assert html == "<p>Hi Sara, restock Desk Lamp at Lamp Corner.</p>"


def test_render_template_skips_missing_and_inactive(session, template, capsys):
    helper = EmailHelper()
    assert helper.render_template(session, 999) is None

    template.is_active = False
    session.add(template)
    session.commit()
    assert helper.render_template(session, template.id) is None

    out = capsys.readouterr().out
    assert "Email template with ID 999 not found" in out
    assert f"Email template with ID {template.id} is not active" in out


def test_send_email_delivers_in_background(session, template, monkeypatch):
    delivered = []
    helper = EmailHelper()
    monkeypatch.setattr(
        helper,
        "_send_email_sync",
        lambda to_email, subject, html_content: delivered.append((to_email, subject)),
    )

    thread = helper.send_email(
        "owner@example.com", template.id, {"product_name": "Desk Lamp"}, session=session
    )
    thread.join(timeout=5)

    assert delivered == [("owner@example.com", "Desk Lamp is out of stock")]


def test_send_email_without_template_starts_nothing(session):
    assert EmailHelper().send_email("owner@example.com", 999, session=session) is None


def test_format_email_addresses():
    helper = EmailHelper()

    assert helper._format_email_addresses("a@example.com; b@example.com") == [
        ("a@example.com", "a@example.com"),
        ("b@example.com", "b@example.com"),
    ]
    assert helper._format_email_addresses([{"name": "Sara", "email": "s@example.com"}]) == [
        ("Sara", "s@example.com")
    ]
    assert helper._format_email_addresses(["x@example.com"]) == [("x@example.com", "x@example.com")]


def test_build_message_has_plain_and_html_parts():
    msg = EmailHelper()._build_message(
        [{"name": "Sara", "email": "s@example.com"}], "Subject", "<p>Hello</p>"
    )

    parts = msg.get_payload()
    assert msg["To"] == "Sara <s@example.com>"
    assert [part.get_content_type() for part in parts] == ["text/plain", "text/html"]
    assert parts[0].get_payload() == "Hello"
