"""Default configuration values for vector2d."""

from __future__ import annotations

DEFAULT_X = 0.0
DEFAULT_Y = 0.0

# Absolute per-component tolerance used by Vector2D.is_close.
DEFAULT_TOLERANCE = 1e-9

# Upper bound applied to the normalized dot product before acos.
ANGLE_COS_LIMIT = 1.0

DEFAULT_JSON_INDENT = 2
