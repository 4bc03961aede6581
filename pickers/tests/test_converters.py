# pickers/tests/test_converters.py
from django.test import SimpleTestCase

from pickers.converters import MomentFormatConverter


class MomentFormatConverterTests(SimpleTestCase):
    def setUp(self):
        self.converter = MomentFormatConverter()

    def test_numeric_date(self):
        self.assertEqual(self.converter.convert("dd/MM/yyyy"), "DD/MM/YYYY")
        self.assertEqual(self.converter.convert("d/M/yy"), "D/M/YY")

    def test_single_y_is_full_year(self):
        self.assertEqual(self.converter.convert("MMM d, y"), "MMM D, YYYY")

    def test_time_tokens_are_kept(self):
        self.assertEqual(self.converter.convert("HH:mm:ss"), "HH:mm:ss")
        self.assertEqual(self.converter.convert("h:mm a"), "h:mm A")

    def test_day_of_week(self):
        self.assertEqual(self.converter.convert("EEE d"), "ddd D")
        self.assertEqual(self.converter.convert("EEEE d"), "dddd D")
        self.assertEqual(self.converter.convert("EEEEEE"), "dd")

    def test_timezone(self):
        self.assertEqual(self.converter.convert("ZZZZZ"), "Z")
        self.assertEqual(self.converter.convert("Z"), "ZZ")

    def test_quoted_literals(self):
        self.assertEqual(self.converter.convert("d 'de' MMMM 'de' y"), "D [de] MMMM [de] YYYY")
        self.assertEqual(self.converter.convert("yyyy-MM-dd'T'HH:mm"), "YYYY-MM-DDTHH:mm")
        self.assertEqual(self.converter.convert("h 'o''clock' a"), "h [o'clock] A")
        self.assertEqual(self.converter.convert("HH''mm"), "HH'mm")

    def test_stand_alone_month(self):
        self.assertEqual(self.converter.convert("LLLL y"), "MMMM YYYY")

    def test_empty_pattern(self):
        self.assertEqual(self.converter.convert(""), "")
        self.assertEqual(self.converter.convert(None), "")
