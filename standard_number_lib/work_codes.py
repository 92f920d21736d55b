#!/usr/bin/env python3
"""
Codes for musical and audiovisual works:

* ISWC - ISO 15707 International Standard Musical Work Code, a T followed
  by nine digits and a check digit, e.g. ISWC T-034524680-1
* ISAN - ISO 15706 International Standard Audiovisual Number, a 12 hex
  digit root, 4 hex digit episode and a check character, optionally
  followed by an 8 hex digit version and a second check character, e.g.
  ISAN 0000-3BAB-9352-0000-G-0000-0000-Q

The second ISAN check character covers the root, episode and version, but
not the first check character.
"""

import logging
import re

from .checksum import ISWCCheck, MOD3736
from .custom_exceptions import MalformedInputError, BadChecksumError
from .name_identifiers import group_digits
from .standard_number import StandardNumber

HEX_PATTERN = re.compile(r'^[0-9A-F]*$')


class ISWC(StandardNumber):
    TYPE = 'iswc'
    PATTERN = re.compile(r'[tT][\s-]?[0-9][0-9.\s-]{8,13}')
    CHECKSUM = ISWCCheck()
    LENGTH = 11

    def clean(self, txt):
        return re.sub(r'[\s.-]', '', txt.upper())

    def check(self):
        if not self.value.startswith('T'):
            raise MalformedInputError('%s does not start with T' % (self.value))
        digits = self.value[1:]
        if self.create_with_checksum and len(digits) == self.LENGTH - 2:
            body = digits
        else:
            body = digits[:-1]
        if len(body) != self.LENGTH - 2 or not digits.isdigit():
            raise MalformedInputError('%s is not a valid ISWC' % (self.value))
        computed = self.CHECKSUM.check_character(body)
        if self.create_with_checksum:
            repaired = 'T' + body + computed
            if repaired != self.value:
                logging.debug('Repaired %s %s to %s' % (self.TYPE, self.value, repaired))
                self.value = repaired
                self._clear_derived()
        elif computed != self.value[-1]:
            raise BadChecksumError('Bad checksum for %s %s' % (self.TYPE, self.value))

    def _format(self):
        if not self.value:
            return None
        v = self.value
        return 'ISWC T-%s-%s' % (v[1:10], v[10:])

    def get_typed_variants(self):
        return [self.format(), 'ISWC %s' % (self.normalized_value())]


class ISAN(StandardNumber):
    TYPE = 'isan'
    PATTERN = re.compile(r'[0-9A-Za-z][0-9A-Za-z:\s-]{15,44}')
    CHECKSUM = MOD3736()

    def clean(self, txt):
        txt = txt.upper().strip()
        if txt.startswith('ISAN'):
            txt = txt[4:].lstrip(':')
        return re.sub(r'[\s-]', '', txt)

    def is_versioned(self):
        return bool(self.value) and len(self.value) == 26

    def check(self):
        v = self.value
        if len(v) not in (17, 26):
            raise MalformedInputError('%s is the wrong length for ISAN' % (v))
        root = v[:16]
        version = v[17:25]
        if not HEX_PATTERN.match(root + version):
            raise MalformedInputError('%s contains invalid characters for ISAN' % (v))
        expected = self.CHECKSUM.encode(root)
        if version:
            expected += version + self.CHECKSUM.check_character(root + version)
        if self.create_with_checksum:
            if expected != v:
                logging.debug('Repaired %s %s to %s' % (self.TYPE, v, expected))
                self.value = expected
                self._clear_derived()
        elif expected != v:
            raise BadChecksumError('Bad checksum for %s %s' % (self.TYPE, v))

    def _format(self):
        if not self.value:
            return None
        v = self.value
        ret = 'ISAN %s-%s' % (group_digits(v[:16], '-'), v[16:17])
        if self.is_versioned():
            ret += '-%s-%s' % (group_digits(v[17:25], '-'), v[25:])
        return ret

    def get_typed_variants(self):
        return [self.format(), 'ISAN %s' % (self.normalized_value())]
