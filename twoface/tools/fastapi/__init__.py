""" FastAPI integration: convert dual errors into HTTP responses

Requires the `fastapi` extra: `pip install twoface[fastapi]`
"""

from .response import HttpExternal, json_response, error_response, json_endpoint
from .exception_handlers import register_exception_handlers
