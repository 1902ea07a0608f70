"""Level verification for wordwheel."""

from .verify import (
    verify_level,
    validate_vocabulary,
    validate_crossings,
    validate_geometry,
    validate_connectivity,
    validate_runs,
)
from .models import ValidationError, ValidationResult
from .grid import Run, build_grid, grid_bounds, render_grid, render_level, extract_runs

__all__ = [
    # Main verification
    "verify_level",
    "validate_vocabulary",
    "validate_crossings",
    "validate_geometry",
    "validate_connectivity",
    "validate_runs",
    # Models
    "ValidationError",
    "ValidationResult",
    # Grid utilities
    "Run",
    "build_grid",
    "grid_bounds",
    "render_grid",
    "render_level",
    "extract_runs",
]
