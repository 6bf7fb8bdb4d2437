"""
Reads configuration from a yaml file and returns a dictionary of configuration settings

A configuration object is a dictionary where each key has the format <prefix>__<parameter>.
"""

from functools import cache, wraps, reduce
import re
import inspect
import sys
import yaml
import toolz as tz
from toolz import curried

from .constants import CONFIG_PATH

_with_prefix = lambda prefix, dict_: tz.keymap(lambda k: f"{prefix}__{k}", dict_)


def _load_section(config_path: str, section: str) -> dict:
    with open(config_path, "r") as file:
        config = yaml.safe_load(file) or {}
    return dict(config.get(section) or {})


@cache
def logger_config(config_path: str = CONFIG_PATH) -> dict:
    config = _load_section(config_path, "logger")

    # Replace string with corresponding file object if present
    mapping = {"stdout": sys.stdout, "stderr": sys.stderr}
    sink = config.get("sink", "stderr")
    config["sink"] = mapping.get(sink, sink)

    # Retention only makes sense for file sinks
    if config["sink"] in [sys.stdout, sys.stderr]:
        config.pop("retention", None)
    return _with_prefix("logger", config)


def configuration(config_path: str = CONFIG_PATH) -> dict:
    """
    The entire configuration for the project
    """
    return reduce(
        tz.merge,
        [
            logger_config(config_path),
        ],
    )


def auto_match_config(*, prefixes: list[str] = []):
    """
    Automatically pass configuration values to function parameters

    A configuration object is a dictionary where each key has the format
    `<prefix>__<parameter>.` Prefixes are stripped before being passed to
    the function parameters. Subset of the dictionary can be selected
    by specifying the prefixes of the keys to select.

    Note that if a function have the parameter `kwargs`, the remaining
    configuration dictionary after passing the values to the other
    parameters will be passed to the `kwargs` parameter.

    If a function is called with explicit keyword arguments with the same
    name in the configuration dictionary, the explicit keyword argument
    will override the value in the configuration dictionary. E.g. `level="INFO"`
    in `config_logger(level="INFO", **config)` will take precedence over
    `config["logger__level"]`.

    Parameters
    ----------
    prefixes : list[str] (optional)
        Beginning string of the keys delimited by "__" in the configuration
        dictionary. If specified, only the keys that have the prefix
        are passed to the function.

    Examples
    --------
    >>> @auto_match_config(prefixes=["logger"])
    ... def show(level, sink=None):
    ...    print(level)
    >>> config = {"logger__level": "DEBUG", "other__level": "INFO"}
    >>> show(**config)
    DEBUG
    >>> show(level="WARNING", **config)
    WARNING
    """

    def wrapper(func):

        @wraps(func)
        def wrapped(*args, **kwargs):
            strip_prefix = lambda k: re.sub(r"^[^_]*__", "", k)

            params = inspect.signature(func).parameters
            # length 1 means key don't begin with a prefix, hence not from config
            non_config_kwargs = tz.keyfilter(lambda k: len(k.split("__")) == 1, kwargs)
            filtered_kwargs = tz.pipe(
                kwargs,
                # all keys with a prefix (i.e. from config)
                curried.keyfilter(lambda k: len(k.split("__")) > 1),
                (
                    curried.keyfilter(lambda k: k.split("__")[0] in prefixes)
                    if prefixes
                    else tz.identity
                ),
                curried.keymap(strip_prefix),
                # let non_config_kwargs override config values
                lambda config_kwargs: tz.merge(config_kwargs, non_config_kwargs),
                (
                    curried.keyfilter(lambda k: k in params)
                    if "kwargs" not in params
                    else tz.identity  # don't filter, pass rest of args to kwargs
                ),
            )

            return func(*args, **filtered_kwargs)

        return wrapped

    return wrapper
