#!/usr/bin/env python3
"""
Persistent identifiers for online resources, neither of which has a check
character, so verify() is only a syntax check:

* ARK - Archival Resource Key, e.g. ark:/13030/tf5p30086k
* DOI - ISO 26324 Digital Object Identifier, e.g. 10.1000/182

Both are often found embedded in resolver URLs, which normalize() strips
off.
"""

import re
from urllib.parse import urlparse

from .custom_exceptions import MalformedInputError
from .standard_number import StandardNumber

DOI_RESOLVER = 'http://doi.org/'


class ARK(StandardNumber):
    TYPE = 'ark'
    PATTERN = re.compile(r'ark:/*[-a-zA-Z0-9+&@#/%?=~_|!:,.;]*[-a-zA-Z0-9+&@#/%=~_|]',
                         re.IGNORECASE)

    def clean(self, txt):
        # The label is case insensitive, the rest of it isn't
        return 'ark:' + txt.strip()[4:]

    def check(self):
        parsed = urlparse(self.value)
        if parsed.scheme.lower() != 'ark' or not parsed.path.strip('/'):
            raise MalformedInputError('%s is not an ARK' % (self.value))

    def as_uri(self):
        """
        Return the ARK parsed as a URI, or None if there isn't one
        """
        if not self.value:
            return None
        return urlparse(self.value)


class DOI(StandardNumber):
    """
    Directory indicator 10, a registrant code, a slash, and then pretty much
    anything the registrant fancies.  Case is preserved even though DOIs are
    supposed to be case insensitive.
    """
    TYPE = 'doi'
    PATTERN = re.compile(r'10\.[0-9]{4,9}/\S+')

    def clean(self, txt):
        return txt.strip()

    def check(self):
        if not self.PATTERN.fullmatch(self.value):
            raise MalformedInputError('%s is not a DOI' % (self.value))

    def _format(self):
        if not self.value:
            return None
        return DOI_RESOLVER + self.value
