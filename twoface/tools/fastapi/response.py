""" JSON responses from dual errors

Ok values become HTTP 200 with the value serialized into JSON for the body.
Errors become whatever HTTP error was chosen, with the user-facing description set as the JSON body:

    {"error": "page not found"}

The internal error is never looked at.

Example:

    @app.get('/users/{user_id}/name')
    @json_endpoint
    def get_username(user_id: int):
        with describe_err(HttpExternal(HTTPStatus.INTERNAL_SERVER_ERROR, 'Database was unavailable')):
            return query_db_for_username(user_id)
"""

from __future__ import annotations

import functools
import inspect
import json
import logging
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, Union

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette import status

from twoface.error import DualError
from twoface.translate import _

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HttpExternal:
    """ External error description for HTTP: a status code and a static text for the user """
    code: Union[HTTPStatus, int]
    text: str

    def __str__(self):
        return self.text


class StandardJSONResponse(JSONResponse):
    """ JSON response rendered with the default `json.dumps()` separators: `{"error": "page not found"}`

    Starlette renders compact JSON; this one keeps the spaces. `NaN` and `Infinity` are still rejected.
    """

    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=False, allow_nan=False).encode('utf-8')


def json_response(outcome: Union[Any, DualError[HttpExternal]], *, _=_) -> StandardJSONResponse:
    """ Convert the outcome of an operation into a JSON response

    Always produces a response: this function does not fail.

    Args:
        outcome: Either a value to serialize, or a `DualError` to report
        _: Translation function for the fallback message

    Returns:
        * 200 with the value as JSON
        * The error's status code with `{"error": <external text>}`
        * 500 when the value cannot be serialized. The serializer's error is logged, not reported.
    """
    if isinstance(outcome, DualError):
        return error_response(outcome)

    # NOTE: JSONResponse renders the body right in the constructor, so encoding errors surface here
    try:
        return StandardJSONResponse(
            status_code=status.HTTP_200_OK,
            content=jsonable_encoder(outcome),
        )
    # Value OK but couldn't be serialized into JSON
    except (TypeError, ValueError, RecursionError):
        logger.exception("Couldn't serialize the response")
        return StandardJSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={'error': _("Couldn't construct the JSON response")},
        )


def error_response(error: DualError[HttpExternal]) -> StandardJSONResponse:
    """ Convert a `DualError` into a JSON error response

    The status code comes from `error.external.code`; the body is `{"error": str(error)}`.
    An `external` without a `code` is reported as a 500.
    """
    return StandardJSONResponse(
        status_code=int(getattr(error.external, 'code', status.HTTP_500_INTERNAL_SERVER_ERROR)),
        content={'error': str(error)},
    )


def json_endpoint(func):
    """ Decorator: the view returns a value or raises a `DualError`; the response is made with `json_response()`

    Works with both sync and async views.
    Other exceptions are not handled: see `register_exception_handlers()`.
    """
    if inspect.iscoroutinefunction(func):
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                value = await func(*args, **kwargs)
            except DualError as e:
                return error_response(e)
            else:
                return json_response(value)
    else:
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            try:
                value = func(*args, **kwargs)
            except DualError as e:
                return error_response(e)
            else:
                return json_response(value)

    return wrapper
