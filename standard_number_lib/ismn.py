#!/usr/bin/env python3
"""
ISO 10957 International Standard Music Number (ISMN)

Originally an M followed by nine digits, e.g. M-2306-7118-7.  Since 2008 an
ISMN is the 13 digit EAN 979-0-2306-7118-7, the 0 having replaced the M.
The check digit is the same in both forms, as the old-style check digit was
defined as if the M were the digits 9790.

Unlike ISBN, the 13 digit form is the one you get by default; ean(False)
gets you the M form.

See http://www.ismn-international.org/download/Web_ISMN%20Manual_2008-3.pdf
"""

import re

from .custom_exceptions import MalformedInputError
from .dual_format import DualFormatScheme
from .hyphenation import RangeTable, dehyphenate
from .standard_number import StandardNumber
from .trade_items import GTIN

MUSIC_PREFIX = '9790'

ISMN_SCHEME = DualFormatScheme('ismn', (MUSIC_PREFIX,), MUSIC_PREFIX,
                               short_from_long=lambda v: 'M' + v[len(MUSIC_PREFIX):])

# The publisher element length depends on its first few digits, and unlike
# ISBN these are fixed by the standard rather than handed out per country
ISMN_RANGES = RangeTable([
    ('979-0-000', '979-0-099'),
    ('979-0-1000', '979-0-3999'),
    ('979-0-40000', '979-0-69999'),
    ('979-0-700000', '979-0-899999'),
    ('979-0-9000000', '979-0-9999999'),
])


class ISMN(StandardNumber):
    TYPE = 'ismn'
    PATTERN = re.compile('[0-9mM-]{10,17}')
    SCHEME = ISMN_SCHEME

    def __init__(self, ranges=None):
        self.ranges = ranges or ISMN_RANGES
        self.ean_preferred = True
        super().__init__()

    def _clear_derived(self):
        super()._clear_derived()
        self.short_form = None
        self.long_form = None
        self._verified = False

    def clean(self, txt):
        digits = dehyphenate(txt.upper().replace('M', '0'))
        if not digits.startswith('979'):
            digits = '979' + digits
        return digits

    def ean(self, ean_preferred):
        self.ean_preferred = ean_preferred
        self._formatted = None
        if self._verified and self.normalized_value() is None:
            # No M form to fall back on, so it needs checking again
            self._verified = False
        return self

    def check(self):
        self.short_form = self.long_form = None
        self._verified = False
        self._formatted = None
        values = self.SCHEME.check(self.value, self.create_with_checksum,
                                   self.ean_preferred)
        self.short_form, self.long_form, _ = values
        self.value = self.long_form
        if self.short_form is None and not self.ean_preferred:
            raise MalformedInputError('%s has no M form' % (self.value))
        self._verified = True

    def normalized_value(self):
        if not self._verified:
            return self.value
        return self.long_form if self.ean_preferred else self.short_form

    def short_value(self):
        return self.short_form

    def long_value(self):
        return self.long_form

    def _format(self):
        if not self._verified:
            return None
        hyphenated = self.ranges.hyphenate(self.long_form)
        if self.ean_preferred:
            return hyphenated or self.long_form
        if not hyphenated:
            return self.short_form
        # 979-0-2306-7118-7 -> M-2306-7118-7
        return 'M' + hyphenated[len(MUSIC_PREFIX) + 1:]

    def to_gtin(self):
        return GTIN().set(self.long_form or self.value).normalize().verify()

    def reset(self):
        self.ean_preferred = True
        return super().reset()
