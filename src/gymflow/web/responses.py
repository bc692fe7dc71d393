"""Uniform JSON envelopes: {"success": true, ...} and {"success": false, "message": ...}."""

from fastapi.responses import JSONResponse


def ok(message: str | None = None, status_code: int = 200, **data) -> JSONResponse:
    body = {"success": True}
    if message:
        body["message"] = message
    body.update(data)
    return JSONResponse(status_code=status_code, content=body)


def error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
    )
