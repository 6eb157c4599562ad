""" Convert right ascension between time and angle

    Right ascension is usually written as a time of day, where 24 hours
    make up the full circle.  These functions convert such a time into
    degrees and back again.

    Each conversion comes in two variants which share the same formula:

    - a fast variant, computed with binary floats;
    - an exact variant, computed with :class:`~decimal.Decimal` in a
      fixed working context (:data:`MATH_CONTEXT`) so that results are
      identical on every platform.

    Example usage:

    .. code-block:: python

        >>> import datetime
        >>> from ascension.transformations import right_ascension
        >>> right_ascension.time_to_degrees(datetime.time(18, 0))
        270.0
        >>> right_ascension.time_to_degrees_exact(datetime.time(6, 45, 8))
        Decimal('101.28333333333333333')
        >>> right_ascension.degrees_to_time(270.0)
        TimeOfDay(18, 0, 0, 0)

    Angles are not normalised.  An angle which does not fall within a
    single day of right ascension, [0, 360) degrees, raises an
    :class:`~ascension.transformations.temporal.OutOfRangeError`.

"""
import logging
import math
from decimal import (Context, Decimal, Overflow, MAX_EMAX, MAX_PREC, MIN_EMIN,
                     ROUND_DOWN, ROUND_HALF_UP, localcontext)

from . import angles, base
from .temporal import (HOUR_OF_DAY, MINUTE_OF_HOUR, SECOND_OF_MINUTE,
                       NANO_OF_SECOND, NANOS_PER_DAY, NANOS_PER_HOUR,
                       TimeOfDay, OutOfRangeError, UnsupportedTemporalError,
                       get_field, is_supported)

logger = logging.getLogger('ascension.right_ascension')

#: Working context for the exact conversions.
MATH_CONTEXT = Context(prec=20, rounding=ROUND_HALF_UP)

#: Context for products which must not be rounded.
EXACT_CONTEXT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)

#: Units in the last place of a working precision angle by which
#: :func:`time_to_degrees_exact` may fall short of the true angle.
ROUND_TRIP_ULPS = 4

NANO = 1e-9
NANO_EXACT = Decimal('1E-9')

#: Nanoseconds per degree of right ascension.
HOUR_CONV = float(NANOS_PER_HOUR) / angles.DEGREES_PER_HOUR
HOUR_CONV_EXACT = MATH_CONTEXT.divide(Decimal(NANOS_PER_HOUR),
                                      angles.DEGREES_PER_HOUR)


def supports_conversion(temporal):
    """Check if a temporal object can be converted to an angle

    The conversion requires the hour, minute and second fields.  The
    nanosecond field is used when present but is not required.

    :param temporal: object exposing time fields as attributes.
    :return: True if the required fields are available.

    """
    return (is_supported(temporal, HOUR_OF_DAY) and
            is_supported(temporal, MINUTE_OF_HOUR) and
            is_supported(temporal, SECOND_OF_MINUTE))


def nanos_of_second(temporal):
    """Get the fractional part of the second in nanoseconds

    Only the finest sub-second field of the object is read.  Coarser
    fields, like milliseconds, are assumed to be derived from it.  See
    :func:`~ascension.transformations.temporal.get_field` for objects
    whose `nanosecond` attribute is not the nanoseconds of the second.

    :param temporal: object exposing time fields as attributes.
    :return: nanoseconds, or 0 if the object has no sub-second field.

    """
    nanos = get_field(temporal, NANO_OF_SECOND)
    if nanos is None:
        return 0
    return int(nanos)


def time_to_degrees(temporal, exact=False):
    """Convert a right ascension time to an angle in degrees

    :param temporal: object exposing time fields as attributes, e.g.
                     :class:`datetime.time` or
                     :class:`~ascension.transformations.temporal.TimeOfDay`.
    :param exact: if True use the exact variant and return a Decimal.
    :return: angle in degrees.

    """
    if exact:
        return time_to_degrees_exact(temporal)
    return _time_to_degrees(temporal, float, NANO)


def time_to_degrees_exact(temporal):
    """Convert a right ascension time to an angle in degrees

    Computed in :data:`MATH_CONTEXT`, the result is not rounded any
    further.

    :param temporal: object exposing time fields as attributes.
    :return: angle in degrees as a Decimal.

    """
    with localcontext(MATH_CONTEXT):
        return _time_to_degrees(temporal, Decimal, NANO_EXACT)


def degrees_to_time(angle, exact=False):
    """Convert a right ascension angle to a time

    The nanosecond count is truncated toward zero, not rounded.

    :param angle: angle in degrees, in the range [0, 360).
    :param exact: if True use the exact variant.
    :return: :class:`~ascension.transformations.temporal.TimeOfDay`.

    """
    if exact:
        return degrees_to_time_exact(angle)

    angle = float(angle)
    nanos = _degrees_to_nanos(angle, HOUR_CONV)
    if not math.isfinite(nanos):
        _reject(angle)
    return _nanos_to_time(int(nanos), angle)


def degrees_to_time_exact(angle):
    """Convert a right ascension angle to a time

    The angle is scaled to nanoseconds without rounding and the count is
    truncated toward zero.  A count which falls short of the next whole
    nanosecond by no more than the rounding error of a working precision
    angle, :data:`ROUND_TRIP_ULPS` units in its last place, is taken as
    that nanosecond.  Angles from :func:`time_to_degrees_exact` therefore
    convert back to the time they came from.

    :param angle: angle in degrees as a Decimal, or anything Decimal
                  accepts, in the range [0, 360).
    :return: :class:`~ascension.transformations.temporal.TimeOfDay`.

    """
    if not isinstance(angle, Decimal):
        angle = Decimal(str(angle))
    if not angle.is_finite():
        _reject(angle)

    try:
        with localcontext(EXACT_CONTEXT):
            nanos = _degrees_to_nanos(angle, HOUR_CONV_EXACT)
            whole = nanos.to_integral_value(rounding=ROUND_DOWN)
            if 0 < nanos < NANOS_PER_DAY - 1:
                if whole + 1 - nanos <= _round_trip_error(angle):
                    whole += 1
    except Overflow:
        _reject(angle)
    if not 0 <= whole < NANOS_PER_DAY:
        _reject(angle)
    return TimeOfDay.from_nano_of_day(int(whole))


def _time_fields(temporal):
    if not supports_conversion(temporal):
        raise UnsupportedTemporalError('Unsupported temporal, hour, minute '
                                       'and second are required: %r' %
                                       (temporal,))
    return (int(get_field(temporal, HOUR_OF_DAY)),
            int(get_field(temporal, MINUTE_OF_HOUR)),
            int(get_field(temporal, SECOND_OF_MINUTE)),
            nanos_of_second(temporal))


def _time_to_degrees(temporal, number, nano):
    """Formula shared by both variants, evaluated in type `number`"""
    hour, minute, second, nanos = _time_fields(temporal)
    seconds = number(second) + number(nanos) * nano
    hours = base.sexagesimal_to_decimal(number(hour), number(minute), seconds)
    return angles.hours_to_degrees(hours)


def _degrees_to_nanos(angle, hour_conv):
    return angle * hour_conv


def _round_trip_error(angle):
    """Nanoseconds spanned by the rounding error of a working precision angle"""
    ulp = Decimal(1).scaleb(angle.adjusted() - MATH_CONTEXT.prec + 1)
    return ROUND_TRIP_ULPS * ulp * HOUR_CONV_EXACT


def _nanos_to_time(nanos, angle):
    if not 0 <= nanos < NANOS_PER_DAY:
        _reject(angle)
    return TimeOfDay.from_nano_of_day(nanos)


def _reject(angle):
    logger.debug('Angle %s is outside a single day of right ascension',
                 angle)
    raise OutOfRangeError('Right ascension angle out of range [0, 360): %s' %
                          angle)
