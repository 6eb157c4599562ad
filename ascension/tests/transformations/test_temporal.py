import unittest
import copy
import datetime
import pickle
from types import SimpleNamespace

from ascension.transformations import temporal
from ascension.transformations.temporal import TimeOfDay, OutOfRangeError


class TimeOfDayTests(unittest.TestCase):

    def test_fields(self):
        t = TimeOfDay(5, 34, 31, 940000000)
        self.assertEqual((t.hour, t.minute, t.second, t.nanosecond),
                         (5, 34, 31, 940000000))
        self.assertEqual(t.microsecond, 940000)
        self.assertEqual(TimeOfDay(), TimeOfDay(0, 0, 0, 0))

    def test_nano_of_day(self):
        self.assertEqual(TimeOfDay().nano_of_day, 0)
        self.assertEqual(TimeOfDay(5, 34, 31, 940000000).nano_of_day, 20071940000000)
        self.assertEqual(TimeOfDay(23, 59, 59, 999999999).nano_of_day,
                         temporal.NANOS_PER_DAY - 1)

    def test_from_nano_of_day(self):
        self.assertEqual(TimeOfDay.from_nano_of_day(0), TimeOfDay())
        self.assertEqual(TimeOfDay.from_nano_of_day(20071940000000),
                         TimeOfDay(5, 34, 31, 940000000))
        self.assertEqual(TimeOfDay.from_nano_of_day(temporal.NANOS_PER_DAY - 1),
                         TimeOfDay(23, 59, 59, 999999999))

    def test_from_nano_of_day_out_of_range(self):
        for nanos in (-1, temporal.NANOS_PER_DAY, 10 * temporal.NANOS_PER_DAY):
            with self.assertRaises(OutOfRangeError):
                TimeOfDay.from_nano_of_day(nanos)

    def test_fields_out_of_range(self):
        for fields in ((24, 0, 0, 0), (-1, 0, 0, 0), (0, 60, 0, 0),
                       (0, 0, 60, 0), (0, 0, 0, 1000000000), (0, 0, 0, -1)):
            with self.assertRaises(OutOfRangeError):
                TimeOfDay(*fields)

    def test_fields_must_be_integers(self):
        for fields in ((5.7, 0, 0, 0), (True, 0, 0, 0), (0, 0, 0, 1.5), ('5', 0, 0, 0)):
            with self.assertRaises(TypeError):
                TimeOfDay(*fields)
        with self.assertRaises(TypeError):
            TimeOfDay.from_nano_of_day(1.5e9)

    def test_out_of_range_is_value_error(self):
        with self.assertRaises(ValueError):
            TimeOfDay(25)

    def test_datetime_time(self):
        time_obj = datetime.time(11, 30, 36, 135756)
        t = TimeOfDay.from_time(time_obj)
        self.assertEqual(t, TimeOfDay(11, 30, 36, 135756000))
        self.assertEqual(t.to_time(), time_obj)
        self.assertEqual(TimeOfDay(11, 30, 36, 135756999).to_time(), time_obj)

    def test_immutable(self):
        t = TimeOfDay(1, 2, 3, 4)
        with self.assertRaises(AttributeError):
            t.hour = 5
        with self.assertRaises(AttributeError):
            t._nanosecond = 5
        self.assertEqual(t, TimeOfDay(1, 2, 3, 4))

    def test_ordering_and_hash(self):
        times = [TimeOfDay(12), TimeOfDay(0, 0, 0, 1), TimeOfDay(), TimeOfDay(11, 59, 59, 999999999)]
        self.assertEqual(sorted(times), [TimeOfDay(), TimeOfDay(0, 0, 0, 1),
                                         TimeOfDay(11, 59, 59, 999999999), TimeOfDay(12)])
        self.assertEqual(len({TimeOfDay(6), TimeOfDay(6, 0, 0, 0), TimeOfDay(18)}), 2)
        self.assertNotEqual(TimeOfDay(6), datetime.time(6))

    def test_copy_and_pickle(self):
        t = TimeOfDay(23, 59, 59, 999999999)
        self.assertEqual(copy.copy(t), t)
        self.assertEqual(copy.deepcopy(t), t)
        self.assertEqual(pickle.loads(pickle.dumps(t)), t)

    def test_str_and_repr(self):
        t = TimeOfDay(5, 4, 3, 21)
        self.assertEqual(str(t), '05:04:03.000000021')
        self.assertEqual(repr(t), 'TimeOfDay(5, 4, 3, 21)')


class FieldAccessTests(unittest.TestCase):

    def test_get_field(self):
        t = TimeOfDay(1, 2, 3, 4)
        self.assertEqual(temporal.get_field(t, temporal.HOUR_OF_DAY), 1)
        self.assertEqual(temporal.get_field(t, temporal.MINUTE_OF_HOUR), 2)
        self.assertEqual(temporal.get_field(t, temporal.SECOND_OF_MINUTE), 3)
        self.assertEqual(temporal.get_field(t, temporal.NANO_OF_SECOND), 4)

    def test_get_field_microseconds(self):
        time_obj = datetime.time(1, 2, 3, 4)
        self.assertEqual(temporal.get_field(time_obj, temporal.NANO_OF_SECOND), 4000)
        dt = datetime.datetime(2010, 12, 25, 1, 2, 3, 4)
        self.assertEqual(temporal.get_field(dt, temporal.NANO_OF_SECOND), 4000)

    def test_single_sub_second_field(self):
        """The nanosecond field is preferred over the microsecond field"""

        source = SimpleNamespace(hour=1, minute=2, second=3, microsecond=4, nanosecond=4005)
        self.assertEqual(temporal.get_field(source, temporal.NANO_OF_SECOND), 4005)

    def test_missing_field(self):
        source = SimpleNamespace(hour=1, minute=2)
        self.assertIsNone(temporal.get_field(source, temporal.SECOND_OF_MINUTE))
        self.assertIsNone(temporal.get_field(source, temporal.NANO_OF_SECOND))
        self.assertFalse(temporal.is_supported(source, temporal.SECOND_OF_MINUTE))
        self.assertTrue(temporal.is_supported(source, temporal.MINUTE_OF_HOUR))
        self.assertFalse(temporal.is_supported(datetime.date(2010, 12, 25),
                                               temporal.HOUR_OF_DAY))


if __name__ == '__main__':
    unittest.main()
