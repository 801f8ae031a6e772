"""Utility helpers for sqlbatch."""

from sqlbatch.utils.logger import get_logger

__all__ = ["get_logger"]
