from .logging import *
from .signature import *
from .wrappers import *

__all__ = [
    "config_logger",
    "logger_wraps",
    "curry",
    "signature_of",
    "required_arity",
    "is_unary",
    "ensure_unary",
    "argument_type",
    "result_type",
    "unary_signature",
    "returns_maybe",
    "maybe_value_type",
    "is_convertible",
]
