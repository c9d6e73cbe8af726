"""Turning OperationResult values into HTTP responses."""

from typing import Any, Callable

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from messenger.application.common.result import OperationResult, StatusCategory

STATUS_CODES = {
    StatusCategory.CREATED: status.HTTP_201_CREATED,
    StatusCategory.OK: status.HTTP_200_OK,
    StatusCategory.CONFLICT: status.HTTP_409_CONFLICT,
    StatusCategory.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


def message_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def result_response(
    result: OperationResult, body: Callable[[Any], dict[str, Any]]
) -> JSONResponse:
    """
    Failures carry only {message}; successes add body(result.payload).
    """
    content: dict[str, Any] = {"message": result.message}
    if result.succeeded:
        content.update(body(result.payload))
    return JSONResponse(
        status_code=STATUS_CODES[result.status], content=jsonable_encoder(content)
    )
