"""Right ascension conversions between time and angle

ASCENSION converts an astronomical right ascension written as a time of
day (hours, minutes, seconds and nanoseconds) into degrees and back.
Every conversion is available as a fast float variant and as an exact
variant computed with 20 significant decimal digits.

The following packages and modules are included:

:mod:`~ascension.tests`
    code tests

:mod:`~ascension.transformations`
    transformations between different notations

"""

from . import transformations
from .tests import run_tests
from .transformations.right_ascension import (
    degrees_to_time,
    degrees_to_time_exact,
    nanos_of_second,
    supports_conversion,
    time_to_degrees,
    time_to_degrees_exact,
)
from .transformations.temporal import OutOfRangeError, TimeOfDay, UnsupportedTemporalError

__all__ = [
    'OutOfRangeError',
    'TimeOfDay',
    'UnsupportedTemporalError',
    'degrees_to_time',
    'degrees_to_time_exact',
    'nanos_of_second',
    'run_tests',
    'supports_conversion',
    'time_to_degrees',
    'time_to_degrees_exact',
    'transformations',
]
