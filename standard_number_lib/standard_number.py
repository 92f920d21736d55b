#!/usr/bin/env python3
"""
Base class for all the standard numbers (ISBN, ISSN, EAN, ...)

A standard number object is a short-lived, single-owner value holder that
you drive like a builder:

    isbn = ISBN().set('ISBN 3-9803350-5-4 kart.').normalize().verify()
    print(isbn.normalized_value(), isbn.format())

* set() stores the raw input
* create_checksum(True) switches on repair mode, where a missing or wrong
  check character is (re)computed rather than being an error
* normalize() pulls the plausible bit out of the input and tidies it up,
  and never raises
* verify() raises MalformedInputError or BadChecksumError if the number is
  no good, otherwise returns the object; is_valid() is the same check but
  returns True/False
* normalized_value() is the canonical/machine form, format() the human one
* reset() clears everything so the object can be reused

Subclasses normally just need to define TYPE, PATTERN, CHECKSUM and maybe
LENGTH, clean() and _format().  ISBN and ISMN are rather more involved.
"""

from functools import total_ordering
import logging

from .custom_exceptions import (StandardNumberError, MalformedInputError,
                                BadChecksumError)


@total_ordering
class StandardNumber(object):
    TYPE = None
    PATTERN = None # compiled regex that finds the number in the raw input
    CHECKSUM = None # one of the checksum.* algorithms
    LENGTH = None # full length including the check character, if fixed

    def __init__(self):
        self.value = None
        self.create_with_checksum = False
        self._clear_derived()

    def type(self):
        return self.TYPE

    def set(self, value):
        self.value = str(value) if value is not None else None
        self._clear_derived()
        return self

    def create_checksum(self, create_with_checksum):
        self.create_with_checksum = create_with_checksum
        return self

    def clean(self, txt):
        return txt.replace('-', '')

    def normalize(self):
        m = self.PATTERN.search(self.value or '')
        value = self.clean(m.group()) if m else None
        # Anything worked out by verify() still holds if nothing changed
        if value != self.value:
            self.value = value
            self._clear_derived()
        return self

    def check(self):
        """
        Raise an error if the number isn't valid, repairing the check
        character first if we're in repair mode
        """
        algorithm = self.CHECKSUM
        if self.LENGTH and self.create_with_checksum and \
           len(self.value) == self.LENGTH - algorithm.check_length:
            # Check character missing rather than wrong
            body = self.value
        else:
            body, _ = algorithm.split(self.value)
        if len(body) + algorithm.check_length < algorithm.min_length or \
           (self.LENGTH and len(body) + algorithm.check_length != self.LENGTH):
            raise MalformedInputError('%s is the wrong length for %s' %
                                      (self.value, self.TYPE.upper()))
        if not algorithm.accepts(body):
            raise MalformedInputError('%s contains invalid characters for %s' %
                                      (self.value, self.TYPE.upper()))
        if self.create_with_checksum:
            repaired = algorithm.encode(body)
            if repaired != self.value:
                logging.debug('Repaired %s %s to %s' % (self.TYPE, self.value, repaired))
                self.value = repaired
                self._clear_derived()
        elif not algorithm.verify(self.value):
            raise BadChecksumError('Bad checksum for %s %s' % (self.TYPE, self.value))

    def verify(self):
        if not self.value:
            raise MalformedInputError('%s must not be empty' % (self.TYPE.upper()))
        self.check()
        return self

    def is_valid(self):
        try:
            self.verify()
            return True
        except StandardNumberError:
            return False

    def normalized_value(self):
        return self.value

    def _format(self):
        return self.value

    def format(self):
        if self._formatted is None:
            self._formatted = self._format()
        return self._formatted

    def _clear_derived(self):
        self._formatted = None

    def reset(self):
        self.value = None
        self.create_with_checksum = False
        self._clear_derived()
        return self

    def get_typed_variants(self):
        """
        Return strings of the form "ISBN 978-..." as used when indexing
        """
        return ['%s %s' % (self.TYPE.upper(), self.format()),
                '%s %s' % (self.TYPE.upper(), self.normalized_value())]

    def __eq__(self, other):
        if not isinstance(other, StandardNumber):
            return NotImplemented
        return self.TYPE == other.TYPE and \
            self.normalized_value() == other.normalized_value()

    def __lt__(self, other):
        if not isinstance(other, StandardNumber):
            return NotImplemented
        return (self.TYPE, self.normalized_value() or '') < \
            (other.TYPE, other.normalized_value() or '')

    def __hash__(self):
        return hash((self.TYPE, self.normalized_value()))

    def __repr__(self):
        return '%s(%s)' % (self.__class__.__name__, self.normalized_value())
