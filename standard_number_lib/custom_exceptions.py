#!/usr/bin/env python3

class StandardNumberError(ValueError):
    pass

class MalformedInputError(StandardNumberError):
    """
    Missing value, unrecognized length, wrong registration prefix, or a
    character that has no business being in this type of number
    """
    pass

class BadChecksumError(StandardNumberError):
    pass

class NoSuchStandardNumberError(LookupError):
    pass
