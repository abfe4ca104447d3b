"""
Adapters Layer - External Interfaces

This package contains all adapters for external systems:
- Providers (bulletin sources: CNB web site, local files)
- Formatting (output)
"""

__all__ = []
