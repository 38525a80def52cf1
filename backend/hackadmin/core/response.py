from typing import Any, Optional

from bson import ObjectId
from fastapi import HTTPException
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

ENCODERS = {ObjectId: str}


class APIError(HTTPException):
    """HTTPException that also carries an `error` payload for the envelope."""

    def __init__(self, status_code: int, message: str, error: Any = None):
        super().__init__(status_code=status_code, detail=message)
        self.error = error


def build_success(message: str, data: Any, status_code: int = 200) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(
            {"status": "success", "message": message, "data": data},
            custom_encoder=ENCODERS,
        ),
    )


def build_error(message: str, error: Any = None, status_code: int = 500,
                headers: Optional[dict] = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(
            {"status": "error", "message": message, "error": error},
            custom_encoder=ENCODERS,
        ),
        headers=headers,
    )


def no_store(response: JSONResponse) -> JSONResponse:
    response.headers["Cache-Control"] = "no-store"
    return response
