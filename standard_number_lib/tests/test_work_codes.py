#!/usr/bin/env python3

import unittest

from ..custom_exceptions import MalformedInputError, BadChecksumError
from ..work_codes import ISAN, ISWC


class TestISWC(unittest.TestCase):

    def test_valid(self):
        iswc = ISWC().set('T-034524680-1').normalize().verify()
        self.assertEqual('T0345246801', iswc.normalized_value())
        self.assertEqual('ISWC T-034524680-1', iswc.format())

    def test_dotted(self):
        iswc = ISWC().set('T-041.436.204-1').normalize().verify()
        self.assertEqual('T0414362041', iswc.normalized_value())

    def test_dotted_lowercase(self):
        iswc = ISWC().set('iswc t-034.524.680-1').normalize().verify()
        self.assertEqual('T0345246801', iswc.normalized_value())

    def test_bad_checksum(self):
        with self.assertRaises(BadChecksumError):
            ISWC().set('T-034524680-2').normalize().verify()

    def test_repair(self):
        iswc = ISWC().set('T-034524680-2').create_checksum(True).normalize().verify()
        self.assertEqual('T0345246801', iswc.normalized_value())

    def test_missing_check_digit(self):
        iswc = ISWC().set('T-034524680').create_checksum(True).normalize().verify()
        self.assertEqual('T0345246801', iswc.normalized_value())

    def test_missing_check_digit_without_repair(self):
        with self.assertRaises(MalformedInputError):
            ISWC().set('T-034524680').normalize().verify()

    def test_too_short(self):
        with self.assertRaises(MalformedInputError):
            ISWC().set('T-03452468').normalize().verify()

    def test_typed_variants(self):
        iswc = ISWC().set('T0345246801').normalize()
        self.assertEqual(['ISWC T-034524680-1', 'ISWC T0345246801'],
                         iswc.get_typed_variants())


class TestISAN(unittest.TestCase):

    def test_valid(self):
        isan = ISAN().set('ISAN B159-D8FA-0124-0000-K').normalize().verify()
        self.assertEqual('B159D8FA01240000K', isan.normalized_value())
        self.assertEqual('ISAN B159-D8FA-0124-0000-K', isan.format())
        self.assertFalse(isan.is_versioned())

    def test_trailing_space(self):
        isan = ISAN().set('ISAN 0000-3BAB-9352-0000-G ').normalize().verify()
        self.assertEqual('00003BAB93520000G', isan.normalized_value())

    def test_digit_check_character(self):
        isan = ISAN().set('1881-66C7-3420-0000-3').normalize().verify()
        self.assertEqual('188166C7342000003', isan.normalized_value())

    def test_lowercase(self):
        isan = ISAN().set('isan: b159-d8fa-0124-0000-k').normalize().verify()
        self.assertEqual('B159D8FA01240000K', isan.normalized_value())

    def test_versioned(self):
        isan = ISAN().set('0000-3BAB-9352-0000-G-0000-0000-Q').normalize().verify()
        self.assertEqual('00003BAB93520000G00000000Q', isan.normalized_value())
        self.assertEqual('ISAN 0000-3BAB-9352-0000-G-0000-0000-Q', isan.format())
        self.assertTrue(isan.is_versioned())

    def test_bad_checksum(self):
        with self.assertRaises(BadChecksumError):
            ISAN().set('ISAN B159-D8FA-0124-0000-A').normalize().verify()

    def test_bad_version_checksum(self):
        with self.assertRaises(BadChecksumError):
            ISAN().set('0000-3BAB-9352-0000-G-0000-0000-R').normalize().verify()

    def test_repair(self):
        isan = ISAN().set('ISAN B159-D8FA-0124-0000-A').create_checksum(True)
        isan.normalize().verify()
        self.assertEqual('B159D8FA01240000K', isan.normalized_value())

    def test_repair_version_checksum(self):
        isan = ISAN().set('0000-3BAB-9352-0000-X-0000-0000-X').create_checksum(True)
        isan.normalize().verify()
        self.assertEqual('00003BAB93520000G00000000Q', isan.normalized_value())

    def test_not_hex(self):
        with self.assertRaises(MalformedInputError):
            ISAN().set('ISAN B159-D8FG-0124-0000-K').normalize().verify()

    def test_junk_even_when_repairing(self):
        with self.assertRaises(MalformedInputError):
            ISAN().set('1435-1838 = Lehrergilde-Rundbrief').create_checksum(True).normalize().verify()

    def test_typed_variants(self):
        isan = ISAN().set('B159D8FA01240000K').normalize()
        self.assertEqual(['ISAN B159-D8FA-0124-0000-K', 'ISAN B159D8FA01240000K'],
                         isan.get_typed_variants())


if __name__ == '__main__':
    unittest.main()
