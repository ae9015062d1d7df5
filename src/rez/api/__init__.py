"""Host-facing API for rez."""

from .modules import MODULE_NAMES, load_modules

__all__ = ["MODULE_NAMES", "load_modules"]
