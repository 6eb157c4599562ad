"""Perform base conversions

Conversion from base 60 (sexagesimal) hours to base 10 (decimal).

"""


def sexagesimal_to_decimal(hd, minutes, seconds):
    """Convert sexagesimal hours or degrees to decimal.

    Warning! Ensure each part has the correct sign.
    e.g. -111d36m12s should be entered as (-111, -36, -12).

    The divisors are integers, so the sum is evaluated in the type of
    the parts.  Floats give floats, while :class:`~decimal.Decimal`
    parts are divided and added in the active decimal context.

    :param hd: hours or degrees.
    :param minutes: minutes or arcminutes.
    :param seconds: seconds or arcseconds.
    :return: decimal hours or degrees.

    """
    return hd + minutes / 60 + seconds / 3600
