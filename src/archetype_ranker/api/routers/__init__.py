"""API routers."""

from . import classify

__all__ = ["classify"]
