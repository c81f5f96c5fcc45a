from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from twoface.error import DualError, describe
from twoface.translate import _
from .response import HttpExternal, error_response


def register_exception_handlers(app: FastAPI, *, passthru: bool = False):
    """ Register exception handlers on a FastAPI application

    With these handlers, a view can raise `DualError` directly: it is reported with `error_response()`.

    Args:
        passthru: Let unexpected errors pass through. Used in testing.
            Otherwise, every other Python exception is reported as a generic 500 error, with no details.
    """
    app.add_exception_handler(DualError, dual_error_exception_handler)

    # Starlette installs the `Exception` handler into ServerErrorMiddleware:
    # it sends our response, then re-raises the exception for the server to log it.
    if not passthru:
        app.add_exception_handler(Exception, unexpected_exception_handler)


async def dual_error_exception_handler(request: Request, e: DualError) -> JSONResponse:
    """ Exception handler: dual errors. Only the external part is reported. """
    return error_response(e)


async def unexpected_exception_handler(request: Request, e: Exception, *, _=_) -> JSONResponse:
    """ Exception handler: unexpected exceptions; generic server error

    Every Python exception thrown in a view is described as "Internal server error"
    """
    return error_response(
        describe(e, HttpExternal(HTTPStatus.INTERNAL_SERVER_ERROR, _('Internal server error')))
    )
