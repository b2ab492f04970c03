"""Vector drawing primitives: colours, matrices, paths, flattening, dashing and stroking."""

__all__ = [
    "color",
    "context",
    "curve",
    "dasher",
    "flattener",
    "line",
    "matrix",
    "path",
    "stroker",
    "styles",
    "text",
    "util",
]