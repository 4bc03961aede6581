# pickers/tests/test_formatting.py
import datetime
from unittest.mock import patch

from django.test import SimpleTestCase
from django.utils import translation

from pickers.exceptions import DateFormatError, InvalidOptionsError
from pickers.formatting import (
    FALLBACK_PATTERN,
    FULL,
    LONG,
    MEDIUM,
    NONE,
    SHORT,
    format_date_value,
    get_current_locale,
    get_pattern,
    parse_date_value,
)

TIME_LETTERS = set("hHkKmsSa")


class GetPatternTests(SimpleTestCase):
    def test_date_styles_without_time(self):
        for locale in ("en_US", "fr", "de_DE"):
            for style in (FULL, LONG, MEDIUM, SHORT):
                with self.subTest(locale=locale, style=style):
                    pattern = get_pattern(locale, style, NONE)
                    self.assertTrue(pattern)
                    self.assertFalse(TIME_LETTERS & set(pattern), pattern)

    def test_medium_date_en_us(self):
        self.assertEqual(get_pattern("en_US", MEDIUM), "MMM d, y")

    def test_date_and_time(self):
        pattern = get_pattern("en_US", SHORT, MEDIUM)
        self.assertIn("M/d/yy", pattern)
        self.assertIn("ss", pattern)
        self.assertIn("mm", get_pattern("fr", MEDIUM, SHORT))
        self.assertNotIn("s", get_pattern("fr", MEDIUM, SHORT))

    def test_dash_separated_locale(self):
        self.assertEqual(get_pattern("en-US", MEDIUM), get_pattern("en_US", MEDIUM))

    def test_no_styles(self):
        self.assertEqual(get_pattern("en_US", NONE, NONE), FALLBACK_PATTERN)

    def test_unknown_style(self):
        with self.assertRaises(InvalidOptionsError):
            get_pattern("en_US", 7)
        with self.assertRaises(InvalidOptionsError):
            get_pattern("en_US", MEDIUM, 12)

    def test_unknown_locale(self):
        with self.assertRaises(InvalidOptionsError):
            get_pattern("xx_YY", MEDIUM)


class FormatDateValueTests(SimpleTestCase):
    def test_date(self):
        self.assertEqual(format_date_value(datetime.date(1900, 1, 1), "dd/MM/yyyy", "en_US"), "01/01/1900")

    def test_datetime(self):
        value = datetime.datetime(2021, 7, 14, 9, 5, 3)
        self.assertEqual(format_date_value(value, "yyyy-MM-dd HH:mm:ss", "fr"), "2021-07-14 09:05:03")

    def test_localized_names(self):
        value = datetime.date(2020, 3, 4)
        self.assertEqual(format_date_value(value, "d MMMM y", "fr"), "4 mars 2020")
        self.assertEqual(format_date_value(value, "MMMM d, y", "en_US"), "March 4, 2020")

    def test_unknown_locale(self):
        with self.assertRaises(DateFormatError) as cm:
            format_date_value(datetime.date(2020, 3, 4), "dd/MM/yyyy", "xx_YY")
        self.assertEqual(str(cm.exception), 'The format "dd/MM/yyyy" is invalid.')

    @patch("pickers.formatting.format_datetime")
    def test_non_string_result(self, mock_format):
        mock_format.return_value = None
        with self.assertRaises(DateFormatError):
            format_date_value(datetime.date(2020, 3, 4), "dd/MM/yyyy", "en_US")


class ParseDateValueTests(SimpleTestCase):
    def test_numeric(self):
        self.assertEqual(
            parse_date_value("04/03/2020", "dd/MM/yyyy", "en_US"), datetime.datetime(2020, 3, 4)
        )
        self.assertEqual(
            parse_date_value("2020-03-04 10:30:15", "yyyy-MM-dd HH:mm:ss", "fr"),
            datetime.datetime(2020, 3, 4, 10, 30, 15),
        )

    def test_localized_month_names(self):
        self.assertEqual(parse_date_value("4 mars 2020", "d MMM y", "fr"), datetime.datetime(2020, 3, 4))
        self.assertEqual(parse_date_value("4 févr. 2020", "d MMM y", "fr"), datetime.datetime(2020, 2, 4))
        self.assertEqual(
            parse_date_value("4 Février 2020", "d MMMM y", "fr"), datetime.datetime(2020, 2, 4)
        )
        self.assertEqual(parse_date_value("Mar 4, 2020", "MMM d, y", "en_US"), datetime.datetime(2020, 3, 4))

    def test_round_trips_formatted_values(self):
        value = datetime.datetime(2020, 2, 4, 22, 5, 9)
        for locale in ("en_US", "fr", "de_DE"):
            for style in (FULL, LONG, MEDIUM, SHORT):
                pattern = get_pattern(locale, style, MEDIUM)
                with self.subTest(locale=locale, pattern=pattern):
                    formatted = format_date_value(value, pattern, locale)
                    self.assertEqual(parse_date_value(formatted, pattern, locale), value)

    def test_am_pm(self):
        self.assertEqual(
            parse_date_value("3/4/20, 10:30 PM", "M/d/yy, h:mm a", "en_US"),
            datetime.datetime(2020, 3, 4, 22, 30),
        )
        self.assertEqual(
            parse_date_value("3/4/20, 12:05 am", "M/d/yy, h:mm a", "en_US"),
            datetime.datetime(2020, 3, 4, 0, 5),
        )

    def test_no_match(self):
        self.assertIsNone(parse_date_value("4 mars 2020", "d MMM y", "en_US"))
        self.assertIsNone(parse_date_value("31/02/2020", "dd/MM/yyyy", "en_US"))
        self.assertIsNone(parse_date_value("2020-03-04", "dd/MM/yyyy", "en_US"))

    def test_unsupported_pattern(self):
        self.assertIsNone(parse_date_value("AD 2020", "G y", "en_US"))
        self.assertIsNone(parse_date_value("10:30", "HH:mm", "en_US"))

    def test_empty(self):
        self.assertIsNone(parse_date_value("", None, "en_US"))
        self.assertIsNone(parse_date_value(None, "dd/MM/yyyy", "en_US"))
        self.assertIsNone(parse_date_value("04/03/2020", "dd/MM/yyyy", "xx_YY"))


class CurrentLocaleTests(SimpleTestCase):
    def test_follows_active_language(self):
        with translation.override("fr"):
            self.assertEqual(get_current_locale(), "fr")
        with translation.override("en-us"):
            self.assertEqual(get_current_locale(), "en_US")
