# domain/geometry/constants.py
"""Constants for geometric calculations."""
import sys

# Tolerance for every approximate comparison (absolute, in input units)
EPSILON = 1e-10

# Returned by the intercept queries when the intercept is undefined
UNBOUNDED_INTERCEPT = sys.float_info.max
