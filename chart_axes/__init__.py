"""Cartesian axis and layout engine.

Derives declarative axis and grid configuration for two-dimensional
charts from a computed chart model and a settings snapshot.
"""

__all__ = [
    "config",
    "layout",
    "models",
    "rendering",
]
