"""Convert right ascension notations.

:mod:`~ascension.transformations.angles`
    conversion from hours to degrees

:mod:`~ascension.transformations.base`
    conversion from sexagesimal to decimal

:mod:`~ascension.transformations.right_ascension`
    conversion of right ascension between time and degrees, with a
    fast float and an exact decimal variant

:mod:`~ascension.transformations.temporal`
    nanosecond resolution times of day and access to time fields


"""
from . import angles, base, right_ascension, temporal

__all__ = ['angles',
           'base',
           'right_ascension',
           'temporal']
