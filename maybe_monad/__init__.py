from loguru import logger

logger.disable("maybe_monad")

from . import constants, utils
from .combinators import and_then_maybe, lift_maybe, to_maybe
from .config import auto_match_config, configuration, logger_config
from .maybe import (
    Just,
    Maybe,
    Nothing,
    NothingError,
    flatten_maybe,
    from_optional,
    is_just,
    is_nothing,
    just,
    just_with_default,
    nothing,
    throw_on_nothing,
    unsafe_get_just,
)

__all__ = [
    "Maybe",
    "Just",
    "Nothing",
    "NothingError",
    "just",
    "nothing",
    "from_optional",
    "is_just",
    "is_nothing",
    "unsafe_get_just",
    "just_with_default",
    "throw_on_nothing",
    "flatten_maybe",
    "lift_maybe",
    "and_then_maybe",
    "to_maybe",
    "configuration",
    "constants",
    "utils",
    "auto_match_config",
    "logger_config",
]
