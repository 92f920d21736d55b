#!/usr/bin/env python3
"""
Convenience functions for flipping ISBNs between their 10 and 13 character
forms, for when you don't want to mess around with ISBN objects.

Anything that can't be converted is returned unchanged rather than raising
an exception, so it's safe to throw arbitrary catalogue junk at them.

Run as a standalone script for a basic sanity check.
"""

import re

from .custom_exceptions import StandardNumberError
from .isbn import ISBN


def _verified_isbn(txt):
    isbn = ISBN().set(txt).normalize()
    try:
        return isbn.ean(True).verify()
    except StandardNumberError:
        return None


def to_isbn10(isbn13):
    isbn = _verified_isbn(isbn13)
    if not isbn or not isbn.short_value():
        return isbn13
    return isbn.short_value()


def to_isbn13(isbn10):
    isbn = _verified_isbn(isbn10)
    if not isbn:
        return isbn10
    return isbn.long_value()


def normalized_isbn13(txt):
    clean_txt = re.sub('[^0-9X]', '', txt.upper())
    return to_isbn13(clean_txt)


def isbn10and13(isbn):
    """
    Return a list of whichever of the 10 and 13 character forms exist for
    isbn; for anything that isn't a valid ISBN, that's just isbn itself
    """
    ret = []
    for z in [to_isbn10(isbn), to_isbn13(isbn)]:
        if z and z not in ret:
            ret.append(z)
    return ret


if __name__ == '__main__':
    import sys
    if len(sys.argv) > 1:
        original = sys.argv[1]
    else:
        original = '1933988177'
    there = to_isbn13(original)
    andbackagain = to_isbn10(there)
    print(original, there, andbackagain)
