# email_helper.py
import re
import smtplib
import threading
import traceback
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formataddr
from typing import List, Optional, Union, Dict, Any

from sqlmodel import Session, select

from src import config
from src.api.models.email_model.emailModel import Emailtemplate

Recipients = Union[str, List[str], List[Dict[str, str]]]


class EmailHelper:
    def __init__(self):
        self.smtp_host = config.SMTP_HOST
        self.smtp_port = config.SMTP_PORT
        self.smtp_username = config.SMTP_USERNAME
        self.smtp_password = config.SMTP_PASSWORD
        self.smtp_use_tls = config.SMTP_USE_TLS
        self.from_email = config.FROM_EMAIL
        self.from_name = config.FROM_NAME

    def _get_template_from_db(self, session: Session, email_template_id: int) -> Optional[Emailtemplate]:
        """Retrieve email template from database"""
        statement = select(Emailtemplate).where(Emailtemplate.id == email_template_id)
        return session.exec(statement).first()

    def _apply_replacements(self, text: str, replacements: Dict[str, Any]) -> str:
        """Apply replacements to text using {{key}} format"""
        if not text or not replacements:
            return text

        for key, value in replacements.items():
            placeholder = f"{{{{{key}}}}}"
            text = text.replace(placeholder, str(value))
        return text

    def _format_email_addresses(self, emails: Recipients) -> List[tuple]:
        """
        Normalize recipients into [(name, email), ...]

        Accepts:
        - String: "a@example.com" or "a@example.com; b@example.com"
        - List of strings: ["a@example.com", "b@example.com"]
        - List of dicts: [{"name": "John Doe", "email": "john@example.com"}]
        """
        if isinstance(emails, str):
            parsed = [e.strip() for e in emails.replace(";", ",").split(",") if e.strip()]
            return [(email, email) for email in parsed]
        if isinstance(emails, list):
            if emails and isinstance(emails[0], dict):
                return [
                    (item.get("name") or item["email"], item["email"])
                    for item in emails
                    if item.get("email")
                ]
            return [(email, email) for email in emails if email]
        return []

    def _build_message(self, to_email: Recipients, subject: str, html_content: str) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = formataddr((self.from_name, self.from_email))
        msg["To"] = ", ".join(
            formataddr((name, email)) for name, email in self._format_email_addresses(to_email)
        )

        # plain text fallback stripped from the html body
        plain_text_content = re.sub("<[^<]+?>", "", html_content)
        msg.attach(MIMEText(plain_text_content, "plain"))
        msg.attach(MIMEText(html_content, "html"))
        return msg

    def _send_email_sync(self, to_email: Recipients, subject: str, html_content: str) -> bool:
        recipients = [email for _, email in self._format_email_addresses(to_email)]
        if not recipients:
            print("[EMAIL ERROR] No recipients given, email not sent")
            return False

        msg = self._build_message(to_email, subject, html_content)
        try:
            with smtplib.SMTP(self.smtp_host, self.smtp_port, timeout=30) as server:
                if self.smtp_use_tls:
                    server.starttls()
                if self.smtp_username and self.smtp_password:
                    server.login(self.smtp_username, self.smtp_password)
                server.send_message(msg, to_addrs=recipients)

            print(f"[EMAIL] Email sent successfully to {', '.join(recipients)}")
            return True

        except smtplib.SMTPAuthenticationError as e:
            print(f"[EMAIL ERROR] Authentication failed: {e}")
            return False
        except smtplib.SMTPException as e:
            print(f"[EMAIL ERROR] SMTP error: {e}")
            return False
        except OSError as e:
            print(f"[EMAIL ERROR] Connection to {self.smtp_host}:{self.smtp_port} failed: {e}")
            return False

    def render_template(
        self,
        session: Session,
        email_template_id: int,
        replacements: Optional[Dict[str, Any]] = None,
    ) -> Optional[tuple]:
        """
        Load an active template and apply replacements.

        Returns (subject, html_content) or None when the template is missing or inactive.
        """
        template = self._get_template_from_db(session, email_template_id)
        if not template:
            print(f"[EMAIL ERROR] Email template with ID {email_template_id} not found")
            return None
        if not template.is_active:
            print(f"[EMAIL ERROR] Email template with ID {email_template_id} is not active")
            return None

        subject = self._apply_replacements(template.subject, replacements or {})
        html_content = self._apply_replacements(template.html_content or "", replacements or {})
        return subject, html_content

    def send_email(
        self,
        to_email: Recipients,
        email_template_id: int,
        replacements: Optional[Dict[str, Any]] = None,
        session: Optional[Session] = None,
    ) -> Optional[threading.Thread]:
        """
        Render a stored template and deliver it over SMTP in a background thread

        The template is loaded on the calling thread so the session never crosses
        threads; only the SMTP exchange runs in the background.

        Args:
            to_email: Recipient(s) - string, list of strings, or list of dicts with name/email
            email_template_id: ID of the email template from database
            replacements: Dictionary of replacements for {{key}} template tags
            session: SQLModel session (a new one is opened on the default engine if not provided)

        Returns:
            The started delivery thread, or None when nothing was sent
        """
        if session is not None:
            rendered = self.render_template(session, email_template_id, replacements)
        else:
            from src.lib.db_con import engine

            with Session(engine) as local_session:
                rendered = self.render_template(local_session, email_template_id, replacements)

        if rendered is None:
            return None
        subject, html_content = rendered

        def send_in_background():
            try:
                self._send_email_sync(to_email, subject, html_content)
            except Exception as e:
                print(f"[EMAIL ERROR] Exception in background email sending: {e}")
                print(f"[EMAIL ERROR] Full traceback:\n{traceback.format_exc()}")

        thread = threading.Thread(target=send_in_background)
        thread.daemon = True
        thread.start()
        return thread


# Create global instance
email_helper = EmailHelper()


# Convenience function
def send_email(
    to_email: Recipients,
    email_template_id: int,
    replacements: Optional[Dict[str, Any]] = None,
    session: Optional[Session] = None,
) -> Optional[threading.Thread]:
    """
    Convenience function to send email in background

    Example usage:
        send_email(
            to_email=[{"name": "Shop Owner", "email": "owner@example.com"}],
            email_template_id=13,
            replacements={"product_name": "Desk Lamp"},
        )
    """
    return email_helper.send_email(
        to_email=to_email,
        email_template_id=email_template_id,
        replacements=replacements,
        session=session,
    )
