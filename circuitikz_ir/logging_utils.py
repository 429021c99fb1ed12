from __future__ import annotations

import inspect
import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Iterable, MutableMapping, Optional, Sequence, Set, TypeVar, cast

from .ast import Circuit, Position

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxstring = 120
_repr.maxother = 160
_repr.maxlist = 8
_repr.maxtuple = 8
_repr.maxdict = 8


def _safe_repr(value: Any, *, max_length: int = 300) -> str:
    summary = getattr(value, "debug_summary", None)
    if callable(summary):
        return summary()
    if isinstance(value, Position):
        return f"({value.x}, {value.y})"
    if isinstance(value, Circuit):
        return f"Circuit({len(value)} element(s))"
    try:
        rendered = _repr.repr(value)
    except Exception as exc:  # pragma: no cover - repr of user objects
        rendered = f"<repr-error {exc!r}>"
    if len(rendered) > max_length:
        return rendered[:max_length] + "... (truncated)"
    return rendered


def _format_arguments(args: Sequence[Any], kwargs: MutableMapping[str, Any]) -> str:
    parts = [_safe_repr(arg) for arg in args]
    parts.extend(f"{key}={_safe_repr(value)}" for key, value in kwargs.items())
    return ", ".join(parts) if parts else "no-args"


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Return a decorator that logs entry, exit and result of a call at DEBUG."""

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func

        qualname = name or getattr(func, "__qualname__", func.__name__)

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if not logger.isEnabledFor(logging.DEBUG):
                return func(*args, **kwargs)
            logger.debug("-> %s(%s)", qualname, _format_arguments(args, kwargs))
            result = func(*args, **kwargs)
            if log_result:
                logger.debug("<- %s = %s", qualname, _safe_repr(result))
            return result

        setattr(wrapper, "_debug_logging_wrapped", True)
        return cast(F, wrapper)

    return decorator


def apply_debug_logging(
    namespace: MutableMapping[str, Any],
    *,
    logger: Optional[logging.Logger] = None,
    skip: Optional[Iterable[str]] = None,
) -> None:
    """Wrap the functions and methods defined in a module with :func:`debug_log_call`."""

    module_name = namespace.get("__name__")
    logger = logger or logging.getLogger(str(module_name))
    skip_set: Set[str] = set(skip or [])

    for name, value in list(namespace.items()):
        if name in skip_set or getattr(value, "__module__", None) != module_name:
            continue
        if inspect.isfunction(value):
            namespace[name] = debug_log_call(logger, name=name)(value)
        elif inspect.isclass(value):
            for attr, member in list(vars(value).items()):
                if attr.startswith("__") or not inspect.isfunction(member):
                    continue
                setattr(value, attr, debug_log_call(logger, name=f"{name}.{attr}")(member))
