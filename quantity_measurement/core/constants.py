"""
Numeric constants for quantity conversion and comparison.

Conversion constants use exact definitions where one exists.
References:
    - International yard and pound agreement (1959)
    - NIST SP 811, Appendix B
"""

from typing import Final

# Tolerance for comparing two base-unit magnitudes
EPSILON: Final[float] = 1e-6

# Decimal places kept when hashing a base-unit magnitude.
# Matches EPSILON so that equal quantities hash alike.
HASH_PRECISION: Final[int] = 6

# Length (base: foot)
INCHES_PER_FOOT: Final[float] = 12.0
FEET_PER_YARD: Final[float] = 3.0
CM_PER_INCH: Final[float] = 2.54
CM_PER_FOOT: Final[float] = CM_PER_INCH * INCHES_PER_FOOT  # 30.48

# Weight (base: kilogram)
GRAMS_PER_KILOGRAM: Final[float] = 1000.0
KG_PER_POUND: Final[float] = 0.45359237
OUNCES_PER_POUND: Final[float] = 16.0

# Volume (base: litre)
ML_PER_LITRE: Final[float] = 1000.0
LITRES_PER_GALLON: Final[float] = 3.78541  # US liquid gallon

# Temperature (base: degree Celsius)
KELVIN_OFFSET: Final[float] = 273.15
FAHRENHEIT_OFFSET: Final[float] = 32.0
ABSOLUTE_ZERO_C: Final[float] = -KELVIN_OFFSET
