"""
Model module for grouping filenames and inferring per-position roles and formats.
"""

from .builder import ModelBuilder, dominant_type
from .inference import FormatInferencer, RoleInferencer, render_number
from .models import Model, PatternGroup, PositionStats

__all__ = [
    "FormatInferencer",
    "Model",
    "ModelBuilder",
    "PatternGroup",
    "PositionStats",
    "RoleInferencer",
    "dominant_type",
    "render_number",
]
