""" Perform angle related transformations

    Right ascension runs through 24 hours in a full circle, so one
    hour of right ascension spans 15 degrees.

"""

#: Degrees of arc per hour of right ascension.
DEGREES_PER_HOUR = 15


def hours_to_degrees(angle):
    """Converts decimal hours to degrees

    The multiplication is done in the numeric type of the input, so
    a :class:`~decimal.Decimal` stays a Decimal and is rounded in the
    active decimal context.

    :param angle: angle in decimal hours
    :return: angle in degrees

    """
    return angle * DEGREES_PER_HOUR
