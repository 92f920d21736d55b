#!/usr/bin/env python3

import unittest

from ..custom_exceptions import MalformedInputError, BadChecksumError
from ..trade_items import EAN, GTIN, UPC


class TestEAN(unittest.TestCase):

    def test_valid(self):
        ean = EAN().set('7501031311309').normalize().verify()
        self.assertEqual('7501031311309', ean.normalized_value())

    def test_spaces(self):
        ean = EAN().set('4 007630 000116').normalize().verify()
        self.assertEqual('4007630000116', ean.normalized_value())

    def test_repair(self):
        ean = EAN().set('4 007630 000110').create_checksum(True).normalize().verify()
        self.assertEqual('4007630000116', ean.normalized_value())

    def test_bad_checksum(self):
        with self.assertRaises(BadChecksumError):
            EAN().set('7501031311308').normalize().verify()

    def test_too_short(self):
        with self.assertRaises(MalformedInputError):
            EAN().set('750103131').normalize().verify()


class TestGTIN(unittest.TestCase):

    def test_gtin13(self):
        self.assertTrue(GTIN().set('4104420033801').normalize().is_valid())

    def test_isbn_as_gtin(self):
        self.assertTrue(GTIN().set('978-3-652-00226-4').normalize().is_valid())

    def test_issn_as_gtin(self):
        gtin = GTIN().set('9771869712038').normalize().verify()
        self.assertEqual('9771869712038', gtin.format())

    def test_gtin8(self):
        self.assertTrue(GTIN().set('96385074').normalize().is_valid())

    def test_gtin14(self):
        self.assertTrue(GTIN().set('07501031311309').normalize().is_valid())

    def test_wrong_length(self):
        with self.assertRaises(MalformedInputError):
            GTIN().set('1234567890').normalize().verify()

    def test_repair(self):
        gtin = GTIN().set('4104420033800').create_checksum(True).normalize().verify()
        self.assertEqual('4104420033801', gtin.normalized_value())


class TestUPC(unittest.TestCase):

    def test_valid(self):
        upc = UPC().set('796030114977').normalize().verify()
        self.assertEqual('796030114977', upc.normalized_value())

    def test_another_valid(self):
        self.assertTrue(UPC().set('036000291452').normalize().is_valid())

    def test_invalid(self):
        self.assertFalse(UPC().set('036000291453').normalize().is_valid())

    def test_repair_missing_check_digit(self):
        upc = UPC().set('03600029145').create_checksum(True).normalize().verify()
        self.assertEqual('036000291452', upc.normalized_value())

    def test_missing_check_digit_without_repair(self):
        with self.assertRaises(MalformedInputError):
            UPC().set('03600029145').normalize().verify()


if __name__ == '__main__':
    unittest.main()
