"""Ray Canvas: numeric and raster foundation of a software ray tracer.

This package contains the homogeneous tuple algebra (points, vectors,
colors) and the pixel canvas that every later rendering stage writes into.

Architecture layers (strict one-way dependency):
    scripts/ → src/raster/ → src/tuples/ → src/utils/

Key invariants:
    - Vectors carry w=0, points carry w=1; arithmetic preserves both
    - One float equality policy everywhere: EPSILON = half machine epsilon
    - Colors are unclamped floats until export
    - Canvas export is RGB8 PNG, row-major, y=0 first
    - YAML-only configs
"""

__version__ = "0.1.0"
