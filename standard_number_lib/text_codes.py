#!/usr/bin/env python3
"""
Codes for textual works and serial contributions:

* ISTC - ISO 21047 International Standard Text Code, 16 hex-ish
  characters, e.g. ISTC 0A9-2009-12B4A105-C
* SICI - ANSI/NISO Z39.56 Serial Item and Contribution Identifier, e.g.
  0095-4403(199502/03)21:3<12:WATIIB>2.0.TX;2-J

Both of these have letters in their check alphabets, so unlike most of the
other numbers their check characters aren't just digits or X.
"""

import logging
import re

from .checksum import MOD163, MOD37
from .custom_exceptions import MalformedInputError, BadChecksumError
from .standard_number import StandardNumber


class ISTC(StandardNumber):
    TYPE = 'istc'
    PATTERN = re.compile(r'^[A-Za-z0-9\s-]{12,24}')
    CHECKSUM = MOD163()
    LENGTH = 16

    def clean(self, txt):
        txt = txt.upper().strip()
        if txt.startswith('ISTC'):
            txt = txt[4:]
        return re.sub(r'[\s-]', '', txt)

    def _format(self):
        """
        Registration agency, year, work and check, e.g. 0A9-2009-12B4A105-C
        """
        if not self.value:
            return None
        v = self.value
        return 'ISTC %s-%s-%s-%s' % (v[:3], v[3:7], v[7:15], v[15:])

    def get_typed_variants(self):
        return [self.format(), 'ISTC %s' % (self.normalized_value())]


class SICI(StandardNumber):
    """
    The check character is calculated over everything before it, including
    the punctuation; anything not in the MOD 37 alphabet counts as #.
    """
    TYPE = 'sici'
    PATTERN = re.compile(r'\S{12,64}')
    CHECKSUM = MOD37()
    PREFIX = 'SICI '

    def normalize(self):
        # The prefix has to go before PATTERN gets a look in, otherwise the
        # search could happily start at "SICI"
        if self.value and self.PREFIX in self.value:
            self.value = self.value[self.value.index(self.PREFIX) + len(self.PREFIX):]
        return super().normalize()

    def clean(self, txt):
        return txt.strip()

    def _checkable(self, txt):
        alphabet = self.CHECKSUM.alphabet
        return ''.join(ch if ch in alphabet else '#' for ch in txt.upper())

    def check(self):
        if len(self.value) < 12:
            raise MalformedInputError('%s is too short for a SICI' % (self.value))
        body = self.value[:-1]
        computed = self.CHECKSUM.check_character(self._checkable(body))
        if self.create_with_checksum:
            repaired = body + computed
            if repaired != self.value:
                logging.debug('Repaired %s %s to %s' % (self.TYPE, self.value, repaired))
                self.value = repaired
                self._clear_derived()
        elif computed != self.value[-1].upper():
            raise BadChecksumError('Bad checksum for %s %s' % (self.TYPE, self.value))

    def _format(self):
        if not self.value:
            return None
        return self.PREFIX + self.value

    def get_typed_variants(self):
        return [self.format(), self.PREFIX + self.normalized_value()]
