#!/usr/bin/env python3
"""
The logic shared by the numbers that come in both a 10 character ("short")
and a 13 character EAN ("long") flavour, i.e. ISBN and ISMN.

Given a cleaned-up value, DualFormatScheme.check() works out which form it
is from its length, verifies - or in repair mode fixes - its check
character, and derives the other form where one exists:

* 10 characters: a short form.  The long form is always derivable.
* 13 digits: a long form, which must start with one of the scheme's
  prefixes.  The short form only exists if it starts with the convertible
  prefix - e.g. there's no such thing as a 10 character 979 ISBN - and its
  absence is not an error.
* 9 characters: a short form minus its check character (repair mode only)
* 12 digits: a long form minus its check digit (repair mode only)

Anything else is malformed.
"""

from collections import namedtuple
import logging
import re

from .checksum import EAN13
from .custom_exceptions import MalformedInputError, BadChecksumError

DualFormatValues = namedtuple('DualFormatValues', 'short, long, is_ean')

DIGITS_ONLY = re.compile('^[0-9]+$')

EAN_CHECKSUM = EAN13()


class DualFormatScheme(object):
    """
    * long_prefixes: tuple of prefixes a 13 digit value must start with
    * convertible_prefix: the long form prefix that has a short form equivalent
    * short_checksum: algorithm for the short form's check character, or None
      if the scheme has no usable 10 character input
    * short_from_long: function deriving the short form from a (valid) long
      form; by default this is the payload between the convertible prefix
      and the check digit, plus a fresh short_checksum check character
    """

    def __init__(self, name, long_prefixes, convertible_prefix,
                 short_checksum=None, short_from_long=None):
        self.name = name
        self.long_prefixes = tuple(long_prefixes)
        self.convertible_prefix = convertible_prefix
        self.short_checksum = short_checksum
        self._short_from_long = short_from_long

    def short_from_long(self, long_value):
        if not long_value.startswith(self.convertible_prefix):
            return None
        if self._short_from_long:
            return self._short_from_long(long_value)
        payload = long_value[len(self.convertible_prefix):12]
        return self.short_checksum.encode(payload)

    def long_from_short(self, short_value):
        return EAN_CHECKSUM.encode(self.convertible_prefix + short_value[:9])

    def check(self, value, create_with_checksum=False, ean_preferred=False):
        """
        Return a DualFormatValues for value, or raise MalformedInputError or
        BadChecksumError
        """
        if not value:
            raise MalformedInputError('%s must not be empty' % (self.name.upper()))
        length = len(value)
        if length in (9, 10) and self.short_checksum:
            short_value = self._check_short(value, create_with_checksum)
            return DualFormatValues(short_value, self.long_from_short(short_value),
                                    False)
        elif length in (12, 13):
            long_value = self._check_long(value, create_with_checksum, ean_preferred)
            return DualFormatValues(self.short_from_long(long_value), long_value,
                                    True)
        raise MalformedInputError('%s is not a valid length for %s' %
                                  (value, self.name.upper()))

    def _check_short(self, value, create_with_checksum):
        payload = value[:9]
        if not DIGITS_ONLY.match(payload):
            raise MalformedInputError('%s: only the check character of a %s '
                                      'may be a non-digit' % (value, self.name.upper()))
        if len(value) == 9:
            # Q: What if the 9th character is a check digit and it's the
            # first one that's missing?  No way of telling, so assume not.
            if not create_with_checksum:
                raise MalformedInputError('%s is missing its check digit' % (value))
            repaired = self.short_checksum.encode(payload)
            logging.debug('Completed %s %s as %s' % (self.name, value, repaired))
            return repaired

        if value[9] not in '0123456789X':
            raise MalformedInputError('%s has an invalid check character' % (value))
        if self.short_checksum.verify(value):
            return value
        if not create_with_checksum:
            raise BadChecksumError('Bad checksum for %s %s' % (self.name, value))
        repaired = self.short_checksum.encode(payload)
        logging.debug('Repaired %s %s to %s' % (self.name, value, repaired))
        return repaired

    def _check_long(self, value, create_with_checksum, ean_preferred):
        if not value.startswith(self.long_prefixes):
            raise MalformedInputError('%s does not start with %s' %
                                      (value, ' or '.join(self.long_prefixes)))
        # A letter is never valid in a 13 digit number, not even as the check
        if not DIGITS_ONLY.match(value):
            raise MalformedInputError('%s contains non-digits' % (value))
        payload = value[:12]
        if len(value) == 12:
            if not create_with_checksum:
                raise MalformedInputError('%s is missing its check digit' % (value))
            repaired = EAN_CHECKSUM.encode(payload)
            logging.debug('Completed %s %s as %s' % (self.name, value, repaired))
            return repaired

        if EAN_CHECKSUM.verify(value):
            return value
        if not (create_with_checksum and ean_preferred):
            raise BadChecksumError('Bad checksum for %s %s' % (self.name, value))
        repaired = EAN_CHECKSUM.encode(payload)
        logging.debug('Repaired %s %s to %s' % (self.name, value, repaired))
        return repaired
