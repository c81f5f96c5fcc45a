""" Dual errors: an internal error paired with an external description

Every failure has two faces:

* The internal error

    The original exception: an I/O error, a database error, a failed downstream call.
    It may contain sensitive implementation details: file paths, SQL text, credentials, stack context.
    It is meant for the server logs only.

* The external description

    A user-friendly description that is safe to show to anyone: "page not found", "database unavailable".
    It is what the end-user sees.

`DualError` holds both, and its text representation only ever shows the external part.
The internal error is reachable only through explicit attribute access: `err.internal` (or `err.__cause__`),
which is meant for your logging code.

Example:

    def load_profile(user_id: int) -> str:
        with describe_err('Could not load your profile'):
            return open(f'/srv/profiles/{user_id}.json').read()

    # ...somewhere at the boundary:
    try:
        profile = load_profile(1234)
    except DualError as e:
        logger.error('Profile failure', exc_info=e.internal)
        profile = str(e)  # -> 'Could not load your profile'

Note that `DualError` never logs anything by itself: logging `internal` is the caller's job.
"""

from __future__ import annotations

import functools
import inspect
from typing import Generic, TypeVar, Union

from twoface.util.exception import exception_from


# The external payload: anything that renders with str()
ExternalT = TypeVar('ExternalT')

# Anything that denotes a failure
InternalSource = Union[BaseException, str]


class DualError(Exception, Generic[ExternalT]):
    """ An internal error, with an external description for the user

    Attributes:
        internal: The underlying error. May contain sensitive information; never show it to users.
        external: A user-friendly error that doesn't contain any sensitive information.
    """

    # The underlying error. Sensitive. Only available to your logging code.
    internal: BaseException

    # User-facing description: a string, or a structured value that renders with str()
    external: ExternalT

    def __init__(self, internal: InternalSource, external: ExternalT):
        # No `args`: nothing but our own __str__() is able to render this exception
        super().__init__()
        self.internal = as_internal_error(internal)
        self.external = external
        exception_from(self, self.internal)

    @classmethod
    def describe(cls, internal: InternalSource, external: ExternalT) -> DualError[ExternalT]:
        """ Describe an internal error to your users """
        return cls(internal, external)

    def __reduce__(self):
        # `args` are empty: rebuild from both parts
        return type(self), (self.internal, self.external)

    def __str__(self):
        # Only the external part. The internal error remains private.
        return str(self.external)

    def __repr__(self):
        return f'{type(self).__name__}(external={self.external!r})'


def as_internal_error(source: InternalSource) -> BaseException:
    """ Convert anything that denotes a failure into an exception object

    Exceptions are taken as they are; a string becomes a `RuntimeError` with this message.

    Raises:
        TypeError: the value does not denote a failure
    """
    if isinstance(source, BaseException):
        return source
    elif isinstance(source, str):
        return RuntimeError(source)
    else:
        raise TypeError(f'Cannot use {type(source).__name__} as an internal error')


def describe(internal: InternalSource, external: ExternalT) -> DualError[ExternalT]:
    """ Add a user-facing description to an internal error

    This is a pure constructor: it does not log and does not format anything.

    Args:
        internal: The failure: an exception, or an error message string
        external: The description to show to the user instead
    """
    return DualError(internal, external)


class describe_err(Generic[ExternalT]):
    """ Describe any error that comes out of this block to your users

    Results pass through unchanged: when the block succeeds, nothing happens.
    When it fails, the exception is wrapped into a `DualError` with the given `external` description.

    Works as a context manager (`with` and `async with`) and as a decorator for both sync and async functions.

    Example:
        with describe_err(HttpExternal(HTTPStatus.NOT_FOUND, 'page not found')):
            data = open('secret-filename').read()

        @describe_err('Database was unavailable')
        async def query_db_for_username(user_id: int) -> str:
            ...

    Args:
        external: The user-facing description
        catch: Exception classes to describe. Others are propagated as they are.

    Raises:
        DualError: wraps the original exception
    """

    def __init__(self, external: ExternalT, *, catch: Union[type[BaseException], tuple[type[BaseException], ...]] = Exception):
        self.external = external
        self.catch = catch

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if exc_value is not None and isinstance(exc_value, self.catch):
            raise DualError(exc_value, self.external) from exc_value
        return False

    async def __aenter__(self):
        return self.__enter__()

    async def __aexit__(self, exc_type, exc_value, traceback):
        return self.__exit__(exc_type, exc_value, traceback)

    def __call__(self, func):
        # Coroutines fail when awaited, not when created: the block has to be inside the coroutine
        if inspect.iscoroutinefunction(func):
            @functools.wraps(func)
            async def wrapper(*args, **kwargs):
                with self:
                    return await func(*args, **kwargs)
        else:
            @functools.wraps(func)
            def wrapper(*args, **kwargs):
                with self:
                    return func(*args, **kwargs)

        return wrapper
