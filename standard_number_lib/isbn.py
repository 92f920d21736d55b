#!/usr/bin/env python3
"""
ISO 2108 International Standard Book Number (ISBN)

Accepts both the old 10 character form (which may end in X) and the 13 digit
EAN form, converting between the two where possible.  By default the 10
character form is what normalized_value() and format() give you; call
ean(True) to get the 13 digit one.  Note that 979 ISBNs have no 10 character
equivalent.

Hyphenation uses the ISBN International ranges - see range_message.py.

References:
* https://www.isbn-international.org/content/isbn-users-manual
* https://en.wikipedia.org/wiki/International_Standard_Book_Number#Check_digits
"""

import re

from .checksum import ISBN10
from .custom_exceptions import MalformedInputError
from .dual_format import DualFormatScheme
from .hyphenation import dehyphenate
from .range_message import get_default_ranges
from .standard_number import StandardNumber

ISBN_SCHEME = DualFormatScheme('isbn', ('978', '979'), '978',
                               short_checksum=ISBN10())


class ISBN(StandardNumber):
    TYPE = 'isbn'
    PATTERN = re.compile('[0-9xX-]{10,17}')
    SCHEME = ISBN_SCHEME
    BOOKLAND_PREFIX = '978'

    def __init__(self, ranges=None):
        """
        ranges is a hyphenation.RangeTable; if not supplied, the bundled
        (or STANDARD_NUMBER_RANGE_MESSAGE) one is used
        """
        self.ranges = ranges
        self.ean_preferred = False
        super().__init__()

    def _clear_derived(self):
        super()._clear_derived()
        self.short_form = None
        self.long_form = None
        self._is_ean = False
        self._verified = False

    def _get_ranges(self):
        if self.ranges is None:
            self.ranges = get_default_ranges()
        return self.ranges

    def clean(self, txt):
        return dehyphenate(txt).upper()

    def ean(self, ean_preferred):
        """
        Prefer the 13 digit EAN form (True) or the 10 character one (False)
        """
        self.ean_preferred = ean_preferred
        self._formatted = None
        if self._verified and self.normalized_value() is None:
            # e.g. a 979 ISBN has no 10 character form, so needs checking again
            self._verified = False
        return self

    def is_ean(self):
        """
        Was the (verified) input a 13 digit number?
        """
        return self._is_ean

    def check(self):
        self.short_form = self.long_form = None
        self._verified = False
        self._formatted = None
        values = self.SCHEME.check(self.value, self.create_with_checksum,
                                   self.ean_preferred)
        self.short_form, self.long_form, self._is_ean = values
        self.value = self.long_form if self._is_ean else self.short_form
        preferred = self.long_form if self.ean_preferred else self.short_form
        if preferred is None:
            raise MalformedInputError('%s has no %s character form' %
                                      (self.value, 13 if self.ean_preferred else 10))
        self._verified = True

    def normalized_value(self):
        if not self._verified:
            # Not verified yet, so all we have is the cleaned-up input
            return self.value
        return self.long_form if self.ean_preferred else self.short_form

    def short_value(self):
        return self.short_form

    def long_value(self):
        return self.long_form

    def _format(self):
        if not self._verified:
            return None
        if self.ean_preferred:
            return self._get_ranges().fix(self.long_form)
        if self.short_form is None:
            return None
        # The ranges are keyed on the 13 digit form; the check digit doesn't
        # matter for hyphenation so we don't bother recomputing it
        hyphenated = self._get_ranges().hyphenate(self.BOOKLAND_PREFIX +
                                                  self.short_form)
        if not hyphenated:
            return self.short_form
        return hyphenated[len(self.BOOKLAND_PREFIX) + 1:]

    def get_country_and_publisher_code(self):
        """
        Return the hyphenated prefix up to and including the registrant
        (publisher) segment e.g. '978-3-551', or None if not known
        """
        if self.long_form is None:
            return None
        code = self._get_ranges().hyphenate(self.long_form)
        if not code:
            return None
        bits = code.split('-')
        return '-'.join(bits[:3])

    def reset(self):
        self.ean_preferred = False
        return super().reset()
