"""Helpers for the SMART WALLET CLI."""

from .db_url import sanitize_url
from .messages import error, success, warn

__all__ = ["error", "sanitize_url", "success", "warn"]
