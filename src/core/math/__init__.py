"""
Core math modules для CalcVis

Численные движки (производная, первообразная) и сэмплирование.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    # Display range
    DISPLAY_Y_MAX,
    DISPLAY_Y_MIN,
    # NaN/Inf checks
    is_valid_float,
    validate_finite,
    # Epsilon comparisons
    all_close,
    is_close,
    # Clamp
    clamp,
    clamp_to_display_range,
)

# Differentiation Engine
from src.core.math.differentiation import differentiate, secant_slope

# Integration Engine
from src.core.math.integration import integrate, trapezoid_area

# Sampling
from src.core.math.sampling import (
    DEFAULT_PRESET_NAME,
    PRESETS,
    Generator,
    Preset,
    SamplingConfig,
    describe_presets,
    get_preset,
    preset_names,
    sample_function,
    sample_preset,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "EPS_FLOAT_COMPARE_ABS",
    "EPS_FLOAT_COMPARE_REL",
    # Numerical Safeguards — Display range
    "DISPLAY_Y_MAX",
    "DISPLAY_Y_MIN",
    # Numerical Safeguards — NaN/Inf checks
    "is_valid_float",
    "validate_finite",
    # Numerical Safeguards — Epsilon comparisons
    "all_close",
    "is_close",
    # Numerical Safeguards — Clamp
    "clamp",
    "clamp_to_display_range",
    # Differentiation
    "differentiate",
    "secant_slope",
    # Integration
    "integrate",
    "trapezoid_area",
    # Sampling — Constants
    "DEFAULT_PRESET_NAME",
    "PRESETS",
    # Sampling — Types
    "Generator",
    "Preset",
    "SamplingConfig",
    # Sampling — Functions
    "describe_presets",
    "get_preset",
    "preset_names",
    "sample_function",
    "sample_preset",
]
