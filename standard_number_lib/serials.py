#!/usr/bin/env python3
"""
Serial and catalogue record numbers, all using variants of the descending
weight modulus 11 check:

* ISSN - ISO 3297 International Standard Serial Number
* ZDB - Zeitschriftendatenbank (German Union Catalogue of Serials) ID
* PPN - Pica Production Number, the record ID in Pica library catalogues
"""

import re

from .checksum import EAN13, MOD11
from .standard_number import StandardNumber
from .trade_items import GTIN


class ISSN(StandardNumber):
    TYPE = 'issn'
    PATTERN = re.compile('[0-9]{4}-?[0-9]{3}[0-9xX]?')
    CHECKSUM = MOD11()
    LENGTH = 8

    def clean(self, txt):
        return txt.replace('-', '').upper()

    def _format(self):
        if not self.value:
            return None
        return '%s-%s' % (self.value[:4], self.value[4:])

    def to_gtin(self, variant='00'):
        """
        Return the GTIN-13 for this ISSN: 977, the first seven digits of the
        ISSN (its check digit is dropped), a two digit variant - often used
        for the issue number - and a new check digit
        """
        body = '977' + self.value[:7] + variant
        return GTIN().set(EAN13().encode(body)).normalize().verify()


class ZDB(StandardNumber):
    TYPE = 'zdb'
    PATTERN = re.compile(r'^[0-9]{2,10}-?[0-9xX]\b')
    # Unlike PPN, the check is the remainder itself rather than 11 minus it
    CHECKSUM = MOD11(complement=False)

    def clean(self, txt):
        return txt.replace('-', '').upper()

    def _format(self):
        if not self.value:
            return None
        return '%s-%s' % (self.value[:-1], self.value[-1])


class PPN(StandardNumber):
    TYPE = 'ppn'
    PATTERN = re.compile(r'[0-9]{3,10}-?[0-9xX]\b')
    CHECKSUM = MOD11()

    def clean(self, txt):
        return txt.replace('-', '').upper()

    def _format(self):
        if not self.value:
            return None
        return '%s-%s' % (self.value[:-1], self.value[-1])
