from typing import Optional

from fastapi import status
from fastapi.responses import JSONResponse


def api_response(
    *,
    result: Optional[str] = None,
    message: Optional[str] = None,
    status_code: int = status.HTTP_200_OK,
) -> JSONResponse:
    """
    Single source of truth for ALL API responses.
    Defaults `status` to "ok" below 400 and "error" otherwise; `message` is only
    included when given.
    """
    if result is None:
        result = "ok" if status_code < 400 else "error"

    content = {"status": result}
    if message is not None:
        content["message"] = message

    return JSONResponse(status_code=status_code, content=content)
