"""Logger identity resolution from explicit values or the calling frame."""

from __future__ import annotations

import inspect
from types import ModuleType


class CallerResolutionError(RuntimeError):
    """Raised when the calling module cannot be determined from the stack."""


def identity_for(target: str | type | ModuleType) -> str:
    """Return the logger name for a name, class or module.

    Examples
    --------
    >>> identity_for('payments.api')
    'payments.api'
    >>> class Worker: ...
    >>> identity_for(Worker).endswith('.Worker')
    True
    """

    if isinstance(target, str):
        if not target.strip():
            raise ValueError("logger name must not be empty")
        return target
    if isinstance(target, ModuleType):
        return target.__name__
    if isinstance(target, type):
        return f"{target.__module__}.{target.__qualname__}"
    raise TypeError(f"Cannot derive a logger name from {type(target).__name__!r}")


def caller_identity(depth: int = 1) -> str:
    """Return the ``__name__`` of the module ``depth`` frames above the caller.

    ``depth=1`` names the module that called the function invoking
    :func:`caller_identity`. Frames injected by decorators or proxies shift the
    result, so pass an explicit identity wherever that matters.
    """

    frame = inspect.currentframe()
    try:
        target = frame.f_back if frame is not None else None
        for _ in range(depth):
            if target is None:
                break
            target = target.f_back
        if target is None:
            raise CallerResolutionError("Could not find the calling frame")
        name = target.f_globals.get("__name__")
        if not isinstance(name, str) or not name:
            raise CallerResolutionError("Calling frame has no module name")
        return name
    finally:
        del frame


__all__ = ["CallerResolutionError", "caller_identity", "identity_for"]
