from .operation import updateOp, applyFilters, paginate
from .response import api_response, raiseExceptions
from .dependencies import GetSession


__all__ = [
    "GetSession",
    "api_response",
    "raiseExceptions",
    "updateOp",
    "applyFilters",
    "paginate",
]
