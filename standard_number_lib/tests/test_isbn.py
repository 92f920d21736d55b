#!/usr/bin/env python3

import unittest

from ..custom_exceptions import (StandardNumberError, MalformedInputError,
                                 BadChecksumError)
from ..hyphenation import RangeTable
from ..isbn import ISBN


class TestISBNNormalize(unittest.TestCase):

    def test_dehyphenate(self):
        self.assertEqual('000111333', ISBN().set('000-111-333').normalize().normalized_value())

    def test_finds_isbn_in_junk(self):
        isbn = ISBN().set('3-9803350-5-4 kart. : DM 24.00').normalize().verify()
        self.assertEqual('3980335054', isbn.normalized_value())

    def test_normalize_does_not_raise(self):
        isbn = ISBN().set('no numbers here').normalize()
        self.assertIsNone(isbn.normalized_value())


class TestISBNVerify(unittest.TestCase):

    def test_too_short(self):
        with self.assertRaises(MalformedInputError):
            ISBN().set('12-7').normalize().verify()

    def test_truncated(self):
        with self.assertRaises(MalformedInputError):
            ISBN().set('ISBN').normalize().verify()

    def test_bad_checksum(self):
        with self.assertRaises(BadChecksumError):
            ISBN().set('3980335055').normalize().verify()

    def test_errors_are_value_errors(self):
        with self.assertRaises(ValueError):
            ISBN().set('3980335055').normalize().verify()

    def test_is_valid(self):
        self.assertTrue(ISBN().set('3-9803350-5-4').normalize().is_valid())
        self.assertFalse(ISBN().set('3-9803350-5-5').normalize().is_valid())

    def test_x_in_thirteen_digits(self):
        with self.assertRaises(MalformedInputError):
            ISBN().ean(True).set('978355175213X').normalize().verify()

    def test_wrong_prefix(self):
        with self.assertRaises(MalformedInputError):
            ISBN().ean(True).set('9773551752130').normalize().verify()

    def test_not_a_title_from_a_magazine(self):
        with self.assertRaises(MalformedInputError):
            ISBN().set('1435-1838 = Lehrergilde-Rundbrief').create_checksum(True).normalize().verify()


class TestISBNRepair(unittest.TestCase):

    def test_fix_checksum(self):
        isbn = ISBN().set('3616065810').create_checksum(True).normalize().verify()
        self.assertEqual('361606581X', isbn.normalized_value())

    def test_missing_check_character(self):
        isbn = ISBN().set('361606581').create_checksum(True).verify()
        self.assertEqual('361606581X', isbn.normalized_value())

    def test_missing_check_character_without_repair(self):
        with self.assertRaises(MalformedInputError):
            ISBN().set('361606581').verify()

    def test_fix_ean(self):
        isbn = ISBN().ean(True).set('978-3-551-75213-1').create_checksum(True).normalize().verify()
        self.assertEqual('9783551752130', isbn.normalized_value())
        self.assertEqual('978-3-551-75213-0', isbn.format())

    def test_ean_only_fixed_when_preferred(self):
        with self.assertRaises(BadChecksumError):
            ISBN().set('978-3-551-75213-1').create_checksum(True).normalize().verify()

    def test_missing_ean_check_digit(self):
        isbn = ISBN().ean(True).set('978355175213').create_checksum(True).verify()
        self.assertEqual('9783551752130', isbn.normalized_value())

    def test_wrong_and_dirty(self):
        # correct ISBN-10 is 3-451-04112-X
        with self.assertRaises(MalformedInputError):
            ISBN().ean(False).set('ISBN ISBN 3-451-4112-X kart. : DM 24.80').create_checksum(True).normalize().verify()

    def test_repair_is_deterministic(self):
        first = ISBN().set('3616065810').create_checksum(True).normalize().verify()
        second = ISBN().set('3616065810').create_checksum(True).normalize().verify()
        self.assertEqual(first.normalized_value(), second.normalized_value())


class TestISBNForms(unittest.TestCase):

    def test_ean(self):
        isbn = ISBN().ean(True).set('978-3-551-75213-0').normalize().verify()
        self.assertEqual('9783551752130', isbn.normalized_value())
        self.assertEqual('978-3-551-75213-0', isbn.format())
        self.assertTrue(isbn.is_ean())

    def test_short_form_of_ean(self):
        isbn = ISBN().set('978-3-551-75213-0').normalize().verify()
        self.assertEqual('3551752133', isbn.normalized_value())
        self.assertEqual('3-551-75213-3', isbn.format())
        self.assertTrue(isbn.is_ean())

    def test_variants(self):
        isbn = ISBN().set('1-9339-8817-7.').normalize()
        self.assertTrue(isbn.is_valid())
        self.assertFalse(isbn.is_ean())
        self.assertEqual('1-933988-17-7', isbn.ean(False).format())
        self.assertEqual('1933988177', isbn.ean(False).normalized_value())
        self.assertEqual('978-1-933988-17-7', isbn.ean(True).format())
        self.assertEqual('9781933988177', isbn.ean(True).normalized_value())

    def test_round_trip(self):
        isbn = ISBN().set('0306406152').normalize().verify()
        self.assertEqual('9780306406157', isbn.long_value())
        back = ISBN().set(isbn.long_value()).normalize().verify()
        self.assertEqual('0306406152', back.short_value())

    def test_979_has_no_short_form(self):
        isbn = ISBN().ean(True).set('979-10-90636-07-1').normalize().verify()
        self.assertEqual('9791090636071', isbn.normalized_value())
        self.assertEqual('979-10-90636-07-1', isbn.format())
        self.assertIsNone(isbn.short_value())

    def test_979_is_invalid_when_short_form_preferred(self):
        isbn = ISBN().set('979-10-90636-07-1').normalize()
        self.assertFalse(isbn.is_valid())
        with self.assertRaises(StandardNumberError):
            isbn.verify()

    def test_979_rechecked_when_short_form_preferred_later(self):
        isbn = ISBN().ean(True).set('979-10-90636-07-1').normalize().verify()
        isbn.ean(False)
        self.assertEqual('9791090636071', isbn.normalized_value())
        self.assertIsNone(isbn.format())
        self.assertFalse(isbn.is_valid())

    def test_normalize_after_verify_keeps_ean(self):
        isbn = ISBN().ean(True).set('3980335054').normalize().verify().normalize()
        self.assertEqual('9783980335058', isbn.normalized_value())
        self.assertEqual('978-3-9803350-5-8', isbn.format())

    def test_hyphenation_outside_english_groups(self):
        for value, expected in [('9782070360024', '2-07-036002-4'),
                                ('9784062748681', '4-06-274868-1'),
                                ('9788804668237', '88-04-66823-7')]:
            with self.subTest(value=value):
                isbn = ISBN().set(value).normalize().verify()
                self.assertEqual(expected, isbn.format())

    def test_format_before_verify(self):
        self.assertIsNone(ISBN().set('3980335054').normalize().format())

    def test_format_is_stable(self):
        isbn = ISBN().set('3980335054').normalize().verify()
        self.assertEqual(isbn.format(), isbn.format())
        self.assertEqual('3-9803350-5-4', isbn.format())

    def test_format_recomputed_after_ean_toggle(self):
        isbn = ISBN().set('3980335054').normalize().verify()
        self.assertEqual('3-9803350-5-4', isbn.format())
        self.assertEqual('978-3-9803350-5-8', isbn.ean(True).format())

    def test_unknown_range_is_not_hyphenated(self):
        isbn = ISBN(ranges=RangeTable([])).ean(True).set('9783551752130').normalize().verify()
        self.assertEqual('9783551752130', isbn.format())

    def test_country_and_publisher_code(self):
        isbn = ISBN().ean(True).set('978-3-551-75213-0').normalize().verify()
        self.assertEqual('978-3-551', isbn.get_country_and_publisher_code())
        isbn = ISBN().ean(True).set('9791090636071').normalize().verify()
        self.assertEqual('979-10-90636', isbn.get_country_and_publisher_code())

    def test_typed_variants(self):
        isbn = ISBN().set('3980335054').normalize().verify()
        self.assertEqual(['ISBN 3-9803350-5-4', 'ISBN 3980335054'],
                         isbn.get_typed_variants())


class TestISBNLifecycle(unittest.TestCase):

    def test_type(self):
        self.assertEqual('isbn', ISBN().type())

    def test_reset(self):
        isbn = ISBN().ean(True).set('9783551752130').create_checksum(True).normalize().verify()
        isbn.reset()
        self.assertIsNone(isbn.normalized_value())
        self.assertFalse(isbn.ean_preferred)
        self.assertFalse(isbn.create_with_checksum)
        self.assertIsNone(isbn.format())

    def test_reuse_after_reset(self):
        isbn = ISBN().set('3980335054').normalize().verify()
        isbn.reset().set('0306406152').normalize().verify()
        self.assertEqual('0-306-40615-2', isbn.format())

    def test_equality(self):
        a = ISBN().set('3-9803350-5-4').normalize().verify()
        b = ISBN().set('3980335054').normalize().verify()
        self.assertEqual(a, b)
        self.assertEqual(1, len({a, b}))

    def test_ordering(self):
        a = ISBN().set('0306406152').normalize().verify()
        b = ISBN().set('3980335054').normalize().verify()
        self.assertEqual([a, b], sorted([b, a]))


if __name__ == '__main__':
    unittest.main()
