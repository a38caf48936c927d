from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlmodel import SQLModel


# Update only the fields that are provided in the request
def updateOp(instance, request, session):
    data = request.model_dump(exclude_unset=True)
    for key, value in data.items():
        setattr(instance, key, value)
    if hasattr(instance, "updated_at"):
        instance.updated_at = datetime.now(timezone.utc)
    session.add(instance)

    return instance


def applyFilters(statement, Model: type[SQLModel], filters: Optional[Dict[str, Any]] = None):
    """
    Equality filters on table columns.

    filters = {"brand": "Acme", "category": ProductCategory.HOME}
    A list/tuple/set value matches any of its members.
    """
    if not filters:
        return statement

    columns = Model.__table__.columns
    for key, value in filters.items():
        if key not in columns:
            raise ValueError(f"Unknown filter field '{key}' for {Model.__name__}")
        attr = getattr(Model, key)
        if isinstance(value, (list, tuple, set)):
            statement = statement.where(attr.in_(list(value)))
        elif value is None:
            statement = statement.where(attr.is_(None))
        else:
            statement = statement.where(attr == value)
    return statement


def paginate(statement, skip: int = 0, limit: Optional[int] = None):
    if skip:
        statement = statement.offset(skip)
    if limit is not None:
        statement = statement.limit(limit)
    return statement
