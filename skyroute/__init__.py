"""Path planning helpers for aerial vehicles: geometry, Bezier curves, path metrics, A* search and polar-histogram tools."""

__version__ = "0.1.0"