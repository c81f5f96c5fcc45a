""" twoface: errors with two faces

An internal error is for your logs; an external description is for your users.
Only the external one is ever rendered.
"""

from .error import DualError, describe, describe_err, as_internal_error
