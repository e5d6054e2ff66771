"""Conversions between Vector2D and third-party point types.

Each submodule imports its library at load time; import only the ones whose
library is installed.
"""
