from __future__ import annotations
from typing import TypeVar, Optional, Callable, Any, Generic, Union, cast

import pathlib
import importlib.util
import logging
import os

_provider: dict[str, Any] = {}
_consumer: dict[str, Any] = {}

logger = logging.getLogger(__name__)


T = TypeVar('T')
class _ConfiguredValue(Generic[T]):
    def __init__(self, name: str, value: Optional[T], default: Optional[T]):
        self._name = name
        self._value: Optional[T] = None
        self._default = default

        self.update(value)

    def update(self, value: Optional[T]) -> None:
        self._value = value if value is not None else self._default

    def __call__(self) -> Optional[T]:
        return self._value

    def __str__(self) -> str:
        return "%-50s %-20s %s" % (self._name, self._value, ("(default: %s)" % self._default) if self._default != self._value else "")

def _update_config(at_c: Union[_ConfiguredValue[T], dict[str, Any]], at_p: Union[Any, dict[str, Any]]) -> None:
    if isinstance(at_c, _ConfiguredValue):
        at_c.update(cast(T, at_p))
    elif isinstance(at_c, dict):
        for k in at_c.keys():
            _update_config(at_c[k], at_p[k] if (isinstance(at_p, dict) and k in at_p) else None)
    else:
        logger.warning("Config: Unexpected %s", at_c)

def print_config(at_c: Optional[Union[_ConfiguredValue[Any], dict[str, Any]]]=None) -> str:
    if at_c is None:
        at_c = _consumer

    if isinstance(at_c, _ConfiguredValue):
        return str(at_c)
    elif isinstance(at_c, dict):
        return "\n".join([print_config(at_c[k]) for k in at_c.keys()])
    else:
        logger.warning("Config: Unexpected %s", at_c)
        return ""

def _find_config(path: Optional[str]) -> pathlib.Path:
    if path is not None:
        return pathlib.Path(path).expanduser()

    home = os.environ['HOME'] if 'HOME' in os.environ else '/'
    result = pathlib.Path(home) / '.config' / 'swipeable' / 'config.py'

    if not result.is_file():
        result = pathlib.Path('/etc') / 'swipeable' / 'config.py'

    if not result.is_file():
        result = default_config_path()

    return result

def default_config_path() -> pathlib.Path:
    return pathlib.Path(__file__).parent.absolute() / 'default_config.py'

def _load(path: pathlib.Path) -> dict[str, Any]:
    spec = importlib.util.spec_from_file_location("swipeable_user_config", str(path))
    if spec is None or spec.loader is None:
        raise ImportError("Cannot load config from %s" % path)

    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module.__dict__

def load_config(path: Optional[str]=None, fallback: bool=True) -> None:
    """
    Execute a python config module and push its values into every
    configured_value declared so far (and every one declared later)
    """
    global _provider

    config_path = _find_config(path)
    logger.info("Loading config at %s", config_path)

    try:
        _provider = _load(config_path)
    except Exception:
        if fallback:
            logger.exception("Error loading config - falling back to default")
            try:
                _provider = _load(default_config_path())
            except Exception:
                logger.exception("Error loading default config")
                _provider = {}
        else:
            logger.exception("Error loading config")

    _update_config(_consumer, _provider)


def reset_config() -> None:
    """
    Forget any loaded config, every configured_value falls back to its default
    """
    global _provider
    _provider = {}
    _update_config(_consumer, _provider)


def configured_value(path: str, default: Optional[T]=None) -> Callable[[], T]:
    result = None
    try:
        v: Any = _provider
        for k in path.split("."):
            v = v[k]

        result = v
    except (KeyError, TypeError):
        pass

    c = _consumer
    for k in path.split(".")[:-1]:
        try:
            c = c[k]
        except KeyError:
            c[k] = {}
            c = c[k]

    k = path.split(".")[-1]
    if k in c and isinstance(c[k], _ConfiguredValue):
        return cast(Callable[[], T], c[k])

    res = _ConfiguredValue(path, result, default)
    c[k] = res
    return cast(Callable[[], T], res)
