"""
Process-wide settings for expression equivalence.

Settings live in a single global instance, replaced wholesale through
``set_config`` and restored with ``reset_config``.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple
import threading


@dataclass(frozen=True)
class EquivalenceConfig:
    epsilon: float = 1e-9                 # tolerance of the numeric comparator
    exempt_originals: Tuple[float, ...] = field(default=(1.0, -1.0))  # may be absorbed by normalization

    def __post_init__(self):
        if self.epsilon < 0:
            raise ValueError(f"epsilon must be non-negative, got {self.epsilon}")


_GLOBAL_CONFIG: Optional[EquivalenceConfig] = None
_CONFIG_LOCK = threading.Lock()


def get_config() -> EquivalenceConfig:
    """Get the global settings, creating the defaults on first use"""
    global _GLOBAL_CONFIG
    if _GLOBAL_CONFIG is not None:
        return _GLOBAL_CONFIG
    with _CONFIG_LOCK:
        if _GLOBAL_CONFIG is None:
            _GLOBAL_CONFIG = EquivalenceConfig()
    return _GLOBAL_CONFIG


def set_config(config: Optional[EquivalenceConfig] = None, **overrides) -> EquivalenceConfig:
    """Install new global settings.

    Either pass a full ``EquivalenceConfig`` or keyword overrides applied on
    top of the current settings.

    Normal forms already cached on nodes are not recomputed: a new epsilon
    only affects nodes normalized after the change.
    """
    global _GLOBAL_CONFIG
    if config is None:
        current = get_config()
        config = EquivalenceConfig(
            epsilon=overrides.get('epsilon', current.epsilon),
            exempt_originals=tuple(overrides.get('exempt_originals', current.exempt_originals)),
        )
    with _CONFIG_LOCK:
        _GLOBAL_CONFIG = config
    return config


def reset_config():
    """Restore the default settings"""
    global _GLOBAL_CONFIG
    with _CONFIG_LOCK:
        _GLOBAL_CONFIG = None
