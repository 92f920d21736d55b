#!/usr/bin/env python3
"""
Barcode-ish numbers: EAN-13, GTIN (8, 12, 13 or 14 digits) and UPC-A.

These are all simple single-format numbers with a weighted decimal check
digit, so there's not much to them beyond the base class.
"""

import re

from .checksum import EAN13, GTINCheck, UPCA
from .custom_exceptions import MalformedInputError
from .standard_number import StandardNumber


class EAN(StandardNumber):
    """
    International Article Number, formerly European Article Number
    """
    TYPE = 'ean'
    PATTERN = re.compile(r'\b[0-9 ]{13,18}\b')
    CHECKSUM = EAN13()
    LENGTH = 13

    def clean(self, txt):
        return txt.replace(' ', '')


class GTIN(StandardNumber):
    """
    Global Trade Item Number.  Also accepts ISBNs, ISMNs and ISSN-derived
    GTINs, as these are all GTIN-13s.
    """
    TYPE = 'gtin'
    PATTERN = re.compile(r'\b[0-9-]{3,18}\b')
    CHECKSUM = GTINCheck()
    LENGTHS = (8, 12, 13, 14)

    def check(self):
        if len(self.value) not in self.LENGTHS:
            raise MalformedInputError('%s is not a GTIN-8, -12, -13 or -14' %
                                      (self.value))
        super().check()


class UPC(StandardNumber):
    """
    12 digit Universal Product Code (UPC-A)
    """
    TYPE = 'upc'
    PATTERN = re.compile(r'\b[0-9]{11,12}\b')
    CHECKSUM = UPCA()
    LENGTH = 12
