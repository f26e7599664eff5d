"""Utility modules for docsym."""

from docsym.utils.logging import configure_logging

__all__ = ["configure_logging"]
