""" Time of day values and field access

    Right ascension is written as a time of day.  The conversions accept
    any object that exposes the usual time fields as attributes, such as
    :class:`datetime.time`, :class:`datetime.datetime` or the
    nanosecond resolution :class:`TimeOfDay` defined here.

    Example usage:

    .. code-block:: python

        >>> from ascension.transformations.temporal import TimeOfDay
        >>> t = TimeOfDay(5, 34, 31, 940000000)
        >>> t.nano_of_day
        20071940000000
        >>> str(TimeOfDay.from_nano_of_day(t.nano_of_day))
        '05:34:31.940000000'

"""
import datetime
import operator
from functools import total_ordering

NANOS_PER_MICRO = 1000
NANOS_PER_SECOND = 1000000000
NANOS_PER_MINUTE = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY = 24 * NANOS_PER_HOUR

#: Names of the fields a temporal object can expose.
HOUR_OF_DAY = 'hour'
MINUTE_OF_HOUR = 'minute'
SECOND_OF_MINUTE = 'second'
NANO_OF_SECOND = 'nanosecond'

#: Valid values for each field, upper bound exclusive.
FIELD_RANGES = {HOUR_OF_DAY: (0, 24),
                MINUTE_OF_HOUR: (0, 60),
                SECOND_OF_MINUTE: (0, 60),
                NANO_OF_SECOND: (0, NANOS_PER_SECOND)}


class OutOfRangeError(ValueError):

    """A value falls outside the range of a single day"""


class UnsupportedTemporalError(TypeError):

    """A temporal object lacks the fields needed for a conversion"""


def get_field(temporal, field):
    """Get the value of a field, or None if it is not available

    Only one sub-second field is consulted.  `nanosecond` is read when
    the object has it, and must hold the nanoseconds of the second
    (0 - 999999999).  Objects that only offer microseconds, like
    :class:`datetime.time`, have their microsecond scaled instead.
    Coarser fields are assumed to be projections of that one field.
    Objects whose `nanosecond` means something else are misread: a
    pandas Timestamp keeps only the nanoseconds past the microsecond
    (0 - 999) there, so convert it with ``to_pydatetime()`` first.

    :param temporal: object exposing time fields as attributes.
    :param field: one of the field names of this module.
    :return: integer value of the field or None.

    """
    value = getattr(temporal, field, None)
    if value is None and field == NANO_OF_SECOND:
        micros = getattr(temporal, 'microsecond', None)
        if micros is not None:
            value = micros * NANOS_PER_MICRO
    return value


def is_supported(temporal, field):
    """Check if a temporal object exposes a field

    :param temporal: object exposing time fields as attributes.
    :param field: one of the field names of this module.

    """
    return get_field(temporal, field) is not None


@total_ordering
class TimeOfDay(object):

    """A time within a single day, with nanosecond resolution

    Instances are immutable.  Fields outside their valid range raise
    :class:`OutOfRangeError`, so a TimeOfDay always lies in
    [00:00:00, 24:00:00).

    """

    __slots__ = ('_hour', '_minute', '_second', '_nanosecond')

    def __init__(self, hour=0, minute=0, second=0, nanosecond=0):
        values = (hour, minute, second, nanosecond)
        fields = (HOUR_OF_DAY, MINUTE_OF_HOUR, SECOND_OF_MINUTE,
                  NANO_OF_SECOND)
        checked = []
        for field, value in zip(fields, values):
            value = _integer(field, value)
            low, high = FIELD_RANGES[field]
            if not low <= value < high:
                raise OutOfRangeError('Invalid value for %s: %r (valid '
                                      'range %d - %d)' %
                                      (field, value, low, high - 1))
            checked.append(value)
        for name, value in zip(self.__slots__, checked):
            object.__setattr__(self, name, value)

    @classmethod
    def from_nano_of_day(cls, nano_of_day):
        """Create a time from the nanoseconds elapsed since midnight

        :param nano_of_day: integer in the range [0, NANOS_PER_DAY).

        """
        nano_of_day = _integer('nano of day', nano_of_day)
        if not 0 <= nano_of_day < NANOS_PER_DAY:
            raise OutOfRangeError('Invalid value for nano of day: %r (valid '
                                  'range 0 - %d)' %
                                  (nano_of_day, NANOS_PER_DAY - 1))
        hour, remainder = divmod(nano_of_day, NANOS_PER_HOUR)
        minute, remainder = divmod(remainder, NANOS_PER_MINUTE)
        second, nanosecond = divmod(remainder, NANOS_PER_SECOND)
        return cls(hour, minute, second, nanosecond)

    @classmethod
    def from_time(cls, time):
        """Create a time from a :class:`datetime.time` or datetime

        Timezone information is ignored.

        """
        return cls(time.hour, time.minute, time.second,
                   time.microsecond * NANOS_PER_MICRO)

    @property
    def hour(self):
        return self._hour

    @property
    def minute(self):
        return self._minute

    @property
    def second(self):
        return self._second

    @property
    def nanosecond(self):
        return self._nanosecond

    @property
    def microsecond(self):
        return self._nanosecond // NANOS_PER_MICRO

    @property
    def nano_of_day(self):
        """Nanoseconds elapsed since midnight"""
        return (self._hour * NANOS_PER_HOUR +
                self._minute * NANOS_PER_MINUTE +
                self._second * NANOS_PER_SECOND +
                self._nanosecond)

    def to_time(self):
        """Convert to :class:`datetime.time`, truncating to microseconds"""
        return datetime.time(self._hour, self._minute, self._second,
                             self.microsecond)

    def __setattr__(self, name, value):
        raise AttributeError('TimeOfDay is immutable')

    def __eq__(self, other):
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self.nano_of_day == other.nano_of_day

    def __lt__(self, other):
        if not isinstance(other, TimeOfDay):
            return NotImplemented
        return self.nano_of_day < other.nano_of_day

    def __hash__(self):
        return hash(self.nano_of_day)

    def __reduce__(self):
        return (self.__class__, (self._hour, self._minute, self._second,
                                 self._nanosecond))

    def __repr__(self):
        return '%s(%d, %d, %d, %d)' % (self.__class__.__name__, self._hour,
                                       self._minute, self._second,
                                       self._nanosecond)

    def __str__(self):
        return '%02d:%02d:%02d.%09d' % (self._hour, self._minute,
                                        self._second, self._nanosecond)


def _integer(field, value):
    """Return `value` as an int, rejecting bools and non-integral numbers"""
    if isinstance(value, bool):
        raise TypeError('Invalid value for %s: %r is not an integer' %
                        (field, value))
    return operator.index(value)
