""" Exception chaining """

from typing import TypeVar


ExceptionT = TypeVar('ExceptionT', bound=BaseException)


def exception_from(new_exception: ExceptionT, cause_exception: BaseException) -> ExceptionT:
    """ Mark `new_exception` as caused by `cause_exception`, without raising anything

    Same as `raise new_exception from cause_exception`, but usable at construction time:
    the new exception also inherits the traceback of its cause, so that a log record shows where the failure happened.
    """
    new_exception.__cause__ = cause_exception
    return new_exception.with_traceback(cause_exception.__traceback__)
