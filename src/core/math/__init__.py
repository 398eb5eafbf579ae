"""
Core math modules

Числовой контракт скаляра, контракт координаты фиксированной размерности
и производные операции над ним.
"""

# Scalar
from src.core.math.scalar import (
    SCALAR_OPERATIONS,
    Scalar,
    ScalarContractViolation,
    is_scalar_type,
    scalar_max,
    scalar_min,
    scalar_zero,
)

# Coordinate contract
from src.core.math.coordinate import (
    Coordinate,
    CoordinateContractViolation,
    CoordinateIndexError,
    check_index,
    is_coordinate,
    validate_coordinate_type,
)

# Coordinate operations
from src.core.math.coordinate_ops import (
    add,
    all_satisfy,
    component_wise,
    components,
    diff,
    fold,
    map_components,
    max_of_bounds,
    min_of_bounds,
    new_from_value,
    origin,
    scale,
    square_distance,
    square_length,
    sub,
    update_value_at,
)

# Tolerance
from src.core.math.tolerance import (
    EPS_COORD_COMPARE_ABS,
    EPS_COORD_COMPARE_REL,
    coordinates_close,
    is_finite_coordinate,
)

__all__ = [
    # Scalar — Constants
    "SCALAR_OPERATIONS",
    # Scalar — Types
    "Scalar",
    # Scalar — Exceptions
    "ScalarContractViolation",
    # Scalar — Functions
    "is_scalar_type",
    "scalar_max",
    "scalar_min",
    "scalar_zero",
    # Coordinate — Types
    "Coordinate",
    # Coordinate — Exceptions
    "CoordinateContractViolation",
    "CoordinateIndexError",
    # Coordinate — Functions
    "check_index",
    "is_coordinate",
    "validate_coordinate_type",
    # Coordinate operations
    "add",
    "all_satisfy",
    "component_wise",
    "components",
    "diff",
    "fold",
    "map_components",
    "max_of_bounds",
    "min_of_bounds",
    "new_from_value",
    "origin",
    "scale",
    "square_distance",
    "square_length",
    "sub",
    "update_value_at",
    # Tolerance — Constants
    "EPS_COORD_COMPARE_ABS",
    "EPS_COORD_COMPARE_REL",
    # Tolerance — Functions
    "coordinates_close",
    "is_finite_coordinate",
]
