from typing import Literal, Optional
from sqlmodel import Field

from src.api.models.baseModel import TimeStampedModel


class Emailtemplate(TimeStampedModel, table=True):
    __tablename__: Literal["email_template"] = "email_template"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=191, nullable=False)
    slug: str = Field(max_length=191, index=True, unique=True)
    subject: str = Field(max_length=300, nullable=False)
    html_content: Optional[str] = None
    is_active: bool = Field(default=True)
    language: str = Field(default="en", max_length=191)

