"""Pydantic models for planar-kernel."""

from .config import KernelConfig

__all__ = ["KernelConfig"]
