"""
Adapters Layer - External Interfaces

This package contains adapters between the price model and its callers:
- Formatting (display output)
"""

__all__ = []
