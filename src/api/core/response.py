from typing import Any, Optional, Union
from decimal import Decimal

from fastapi import HTTPException
from fastapi.encoders import (
    jsonable_encoder,
)
from fastapi.responses import (
    JSONResponse,
)

MONETARY_FIELDS = {"price", "discount", "shipping_cost"}


def format_monetary_values(obj, path_key=None):
    """Recursively format monetary fields in the response"""
    if isinstance(obj, dict):
        result = {}
        for key, value in obj.items():
            if key in MONETARY_FIELDS and isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
                # Return as string with 2 decimal places
                result[key] = f"{float(value):.2f}"
            elif isinstance(value, (dict, list)):
                result[key] = format_monetary_values(value, key)
            else:
                result[key] = value
        return result
    elif isinstance(obj, list):
        return [format_monetary_values(item, path_key) for item in obj]
    else:
        return obj


def _envelope(code: int, detail: str, data=None, total: Optional[int] = None, money: bool = True) -> dict:
    content = {
        "success": (1 if code < 300 else 0),
        "detail": detail,
        "data": format_monetary_values(jsonable_encoder(data)) if money else jsonable_encoder(data),
    }
    if total is not None:
        content["total"] = total
    return content


def api_response(
    code: int,
    detail: str,
    data: Optional[Union[dict, list, Any]] = None,
    total: Optional[int] = None,
):
    # Raise error if code >= 400
    if code >= 400:
        raise HTTPException(
            status_code=code,
            detail=detail,
        )

    return JSONResponse(
        status_code=code,
        content=_envelope(code, detail, data, total),
    )


def error_response(code: int, detail: str, data: Optional[Union[dict, list]] = None):
    """Error envelope for exception handlers, which must return rather than raise.
    Echoed client input is passed through as sent."""
    return JSONResponse(status_code=code, content=_envelope(code, detail, data, money=False))


def raiseExceptions(*conditions: tuple[Any, int | None, str | None, bool | None]):
    """
    Example usage:
        raiseExceptions(
            (product, 404, "Product not found"),
            (product.freezed, 403, "Product is frozen", True),
        )
    """
    for cond in conditions:
        # Unpack with defaults
        condition = cond[0] if len(cond) > 0 else False  # Condition
        code = cond[1] if len(cond) > 1 else 400
        detail = cond[2] if len(cond) > 2 else "error"
        isCond = cond[3] if len(cond) > 3 else False

        if isCond and condition:  # Fail if condition is True
            return api_response(code, detail)
        elif not condition and not isCond:  # Fail if condition is False
            return api_response(code, detail)
    return None  # everything passed
