"""
numgrid Config - Package Configuration

Holds the package-wide defaults: default element types, the seed used by
default random samplers, repr truncation and CSV loading defaults.
Configuration can be set globally or overridden per thread within a
``with config.local(...)`` block.
"""

from __future__ import annotations

import logging
import os
import threading
from dataclasses import asdict, dataclass
from typing import Any, Callable, Dict, List, Optional

from ._dtypes import DType, validate_dtype


logger = logging.getLogger("numgrid.config")


# =============================================================================
# Configuration Classes
# =============================================================================

def _seed_from_env() -> Optional[int]:
    raw = os.environ.get("NUMGRID_SEED", "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer NUMGRID_SEED=%r", raw)
        return None


@dataclass
class RandomConfig:
    """Configuration for default random samplers."""
    seed: Optional[int] = None     # None = fresh OS entropy per sampler


@dataclass
class DTypeConfig:
    """Element types used when none is given and none can be inferred."""
    default_int: DType = DType.INT64
    default_float: DType = DType.FLOAT64


@dataclass
class PrintConfig:
    """Configuration for container reprs."""
    threshold: int = 8             # Truncate when more elements than this
    edgeitems: int = 3             # Elements shown at each end when truncated


@dataclass
class LoadConfig:
    """Defaults for CSV loading."""
    delimiter: str = ","
    has_headers: bool = False


# =============================================================================
# Global Configuration Manager
# =============================================================================

_SECTIONS = ("random", "dtype", "printing", "load")


class NumgridConfig:
    """
    Global configuration manager for numgrid.

    Example:
        # Global configuration
        numgrid.config.random = RandomConfig(seed=42)

        # Local configuration (context manager)
        with numgrid.config.local(printing=PrintConfig(threshold=100)):
            print(big_vector)
        # Back to global config
    """

    def __init__(self):
        self._global_random = RandomConfig(seed=_seed_from_env())
        self._global_dtype = DTypeConfig()
        self._global_printing = PrintConfig()
        self._global_load = LoadConfig()

        # Thread-local storage for context overrides
        self._local = threading.local()

        # Callbacks for config changes
        self._callbacks: Dict[str, List[Callable]] = {name: [] for name in _SECTIONS}

    def _get(self, name: str):
        override = getattr(self._local, name, None)
        if override is not None:
            return override
        return getattr(self, f"_global_{name}")

    def _set(self, name: str, value: Any):
        setattr(self, f"_global_{name}", value)
        self._notify(name, value)

    # -------------------------------------------------------------------------
    # Property Accessors (with thread-local override support)
    # -------------------------------------------------------------------------

    @property
    def random(self) -> RandomConfig:
        """Get random configuration."""
        return self._get("random")

    @random.setter
    def random(self, value: RandomConfig):
        self._set("random", value)

    @property
    def dtype(self) -> DTypeConfig:
        """Get default element type configuration."""
        return self._get("dtype")

    @dtype.setter
    def dtype(self, value: DTypeConfig):
        self._set("dtype", value)

    @property
    def printing(self) -> PrintConfig:
        """Get repr configuration."""
        return self._get("printing")

    @printing.setter
    def printing(self, value: PrintConfig):
        self._set("printing", value)

    @property
    def load(self) -> LoadConfig:
        """Get CSV loading configuration."""
        return self._get("load")

    @load.setter
    def load(self, value: LoadConfig):
        self._set("load", value)

    # -------------------------------------------------------------------------
    # Convenience Properties
    # -------------------------------------------------------------------------

    @property
    def seed(self) -> Optional[int]:
        """Seed for default random samplers."""
        return self.random.seed

    @seed.setter
    def seed(self, value: Optional[int]):
        self._global_random.seed = value
        self._notify("random", self._global_random)

    # -------------------------------------------------------------------------
    # Context Manager Support
    # -------------------------------------------------------------------------

    def local(self, **kwargs) -> "_LocalConfigContext":
        """
        Create a local configuration context.

        Args:
            **kwargs: Configuration overrides (random, dtype, printing, load)

        Returns:
            Context manager
        """
        unknown = set(kwargs) - set(_SECTIONS)
        if unknown:
            raise TypeError(f"Unknown configuration section(s): {sorted(unknown)}")
        return _LocalConfigContext(self, **kwargs)

    def _set_local(self, **kwargs) -> Dict[str, Any]:
        previous = {}
        for key, value in kwargs.items():
            previous[key] = getattr(self._local, key, None)
            if value is not None:
                setattr(self._local, key, value)
        return previous

    def _restore_local(self, previous: Dict[str, Any]):
        for key, value in previous.items():
            setattr(self._local, key, value)

    # -------------------------------------------------------------------------
    # Callback Registration
    # -------------------------------------------------------------------------

    def on_change(self, config_name: str, callback: Callable):
        """
        Register callback for configuration changes.

        Args:
            config_name: Name of config section ("random", "dtype", ...)
            callback: Function called with the new section value
        """
        if config_name not in self._callbacks:
            raise ValueError(f"Unknown configuration section: {config_name}")
        self._callbacks[config_name].append(callback)

    def _notify(self, config_name: str, value: Any):
        for callback in self._callbacks.get(config_name, []):
            try:
                callback(value)
            except Exception:
                logger.exception("Config callback %r for %r failed", callback, config_name)

    # -------------------------------------------------------------------------
    # Reset
    # -------------------------------------------------------------------------

    def reset(self):
        """Reset all configurations to defaults."""
        self._global_random = RandomConfig(seed=_seed_from_env())
        self._global_dtype = DTypeConfig()
        self._global_printing = PrintConfig()
        self._global_load = LoadConfig()

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Export configuration as dictionary."""
        return {
            "random": asdict(self.random),
            "dtype": {
                "default_int": self.dtype.default_int.label,
                "default_float": self.dtype.default_float.label,
            },
            "printing": asdict(self.printing),
            "load": asdict(self.load),
        }

    def __repr__(self) -> str:
        return f"NumgridConfig({self.to_dict()})"


class _LocalConfigContext:
    """Context manager for local configuration override."""

    def __init__(self, config: NumgridConfig, **kwargs):
        self._config = config
        self._kwargs = kwargs
        self._previous: Dict[str, Any] = {}

    def __enter__(self):
        self._previous = self._config._set_local(**self._kwargs)
        return self._config

    def __exit__(self, exc_type, exc_val, exc_tb):
        self._config._restore_local(self._previous)
        return False


# =============================================================================
# Global Instance
# =============================================================================

config = NumgridConfig()


# =============================================================================
# Convenience Functions
# =============================================================================

def get_config() -> NumgridConfig:
    """Get the global configuration instance."""
    return config


def set_seed(seed: Optional[int]):
    """Seed every default random sampler created from now on."""
    config.seed = seed


def set_printoptions(threshold: Optional[int] = None, edgeitems: Optional[int] = None):
    """
    Configure container reprs.

    Args:
        threshold: Truncate reprs of containers with more elements than this
        edgeitems: Number of elements kept at each end when truncating
    """
    current = config.printing
    config.printing = PrintConfig(
        threshold=current.threshold if threshold is None else threshold,
        edgeitems=current.edgeitems if edgeitems is None else edgeitems,
    )


def set_default_dtypes(default_int=None, default_float=None):
    """Change the element types chosen when a container's dtype is inferred."""
    current = config.dtype
    config.dtype = DTypeConfig(
        default_int=validate_dtype(default_int, current.default_int),
        default_float=validate_dtype(default_float, current.default_float),
    )
