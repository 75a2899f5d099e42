"""Context-local validation settings."""

from __future__ import annotations

import contextlib
from contextvars import ContextVar
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass(frozen=True)
class ValidationConfig:
    """
    Settings that influence how errors are keyed.

    Attributes:
        error_tag: Dataclass ``field(metadata=...)`` key holding the name a
            field is reported under. ``"-"`` means "use the attribute name".
        use_aliases: Report pydantic model fields under their
            ``serialization_alias`` / ``alias`` when one is declared.
    """

    error_tag: str = "json"
    use_aliases: bool = True


_DEFAULT_CONFIG = ValidationConfig()

_config_var: ContextVar[ValidationConfig | None] = ContextVar(
    "rulebound_config", default=None
)


def get_config() -> ValidationConfig:
    """Get the settings for the current context."""
    config = _config_var.get()
    if config is None:
        return _DEFAULT_CONFIG
    return config


def set_config(config: ValidationConfig | None) -> None:
    """Set (or with ``None`` reset) the settings for the current context."""
    _config_var.set(config)


@contextlib.contextmanager
def use_config(config: ValidationConfig) -> Iterator[ValidationConfig]:
    """Apply *config* for the duration of a ``with`` block."""
    token = _config_var.set(config)
    try:
        yield config
    finally:
        _config_var.reset(token)
