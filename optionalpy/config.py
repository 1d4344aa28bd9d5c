from __future__ import annotations
import contextlib
import contextvars
import math
import os
from dataclasses import dataclass, field, replace
from typing import Any, Iterator, Optional, Tuple

from .logger import ConsoleLogger


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes", "on")


def default_logger() -> ConsoleLogger:
    return ConsoleLogger(
        "optionalpy",
        level=os.environ.get("OPTIONALPY_LOG_LEVEL", "INFO"),
        json_output=_env_flag("OPTIONALPY_LOG_JSON"),
    )


@dataclass(frozen=True)
class BoundaryConfig:
    """Settings for the raw-value boundary (``from_nullable`` and the adapters).

    ``None`` is always absent-like. ``absent_sentinels`` adds more absent-like
    objects; they are matched by identity, so a payload's ``__eq__`` can never
    make a value look absent.
    """

    absent_sentinels: Tuple[Any, ...] = ()
    nan_is_absent: bool = False
    logger: ConsoleLogger = field(default_factory=default_logger, compare=False)

    def is_absent_like(self, raw: Any) -> bool:
        if raw is None:
            return True
        if any(raw is s for s in self.absent_sentinels):
            return True
        return self.nan_is_absent and isinstance(raw, float) and math.isnan(raw)


_config: contextvars.ContextVar[BoundaryConfig] = contextvars.ContextVar(
    "optionalpy_config", default=BoundaryConfig()
)


def get_config() -> BoundaryConfig:
    return _config.get()


def configure(**changes: Any) -> BoundaryConfig:
    """Replace fields of the active config for the current context."""
    cfg = replace(_config.get(), **changes)
    _config.set(cfg)
    return cfg


@contextlib.contextmanager
def using(config: Optional[BoundaryConfig] = None, **changes: Any) -> Iterator[BoundaryConfig]:
    """Scope a config to a ``with`` block; the previous one is restored on exit."""
    base = config if config is not None else _config.get()
    cfg = replace(base, **changes) if changes else base
    token = _config.set(cfg)
    try:
        yield cfg
    finally:
        _config.reset(token)
