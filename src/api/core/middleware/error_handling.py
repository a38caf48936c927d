import re

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError, OperationalError

from src.api.core.response import error_response


def register_exception_handlers(app):

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ):
        return error_response(422, "Validation error", data={"errors": exc.errors()})

    # raised by repositories when a merged update breaks a product rule
    @app.exception_handler(ValidationError)
    async def model_validation_exception_handler(request: Request, exc: ValidationError):
        return error_response(
            422,
            "Validation error",
            data={"errors": exc.errors(include_url=False, include_context=False)},
        )

    @app.exception_handler(ValueError)
    async def value_exception_handler(request: Request, exc: ValueError):
        return error_response(400, str(exc))

    @app.exception_handler(IntegrityError)
    async def integrity_exception_handler(request: Request, exc: IntegrityError):
        msg = str(exc.orig) if exc.orig else str(exc)
        if "duplicate key value violates unique constraint" in msg:
            m = re.search(r"Key \((.*?)\)=\((.*?)\)", msg)
            if m:
                field, value = m.groups()
                msg = f"Duplicate entry: {field} = {value}"
            else:
                msg = "Duplicate key violation"
        elif "foreign key" in msg.lower():
            msg = "Referenced record does not exist"
        return error_response(409, msg)

    @app.exception_handler(OperationalError)
    async def operational_exception_handler(request: Request, exc: OperationalError):
        return error_response(503, "Database unavailable, try again later")

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        print(f"[ERROR] {exc}")
        return error_response(500, "Internal Server Error")
