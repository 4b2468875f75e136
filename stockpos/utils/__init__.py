"""Utility modules."""

from stockpos.utils.logging import setup_logging
from stockpos.utils.tracing import ActionTracer

__all__ = ["setup_logging", "ActionTracer"]
