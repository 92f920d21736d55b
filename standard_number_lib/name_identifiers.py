#!/usr/bin/env python3
"""
Identifiers for people and organisations, both using ISO 7064 MOD 11-2:

* ISNI - ISO 27729 International Standard Name Identifier
* ORCID - Open Researcher and Contributor ID, which is an ISNI from a
  block reserved for ORCID, written in a different way

https://support.orcid.org/hc/en-us/articles/360006897674
"""

import re

from .checksum import MOD112
from .standard_number import StandardNumber

NAME_IDENTIFIER_PATTERN = re.compile(r'[0-9xX\s-]{16,24}')
ORCID_URI_PREFIX = 'https://orcid.org/'


def clean_name_identifier(txt):
    return re.sub(r'[\s-]', '', txt).upper()


def group_digits(value, separator, group_size=4):
    return separator.join(value[i:i+group_size]
                          for i in range(0, len(value), group_size))


class ISNI(StandardNumber):
    TYPE = 'isni'
    PATTERN = NAME_IDENTIFIER_PATTERN
    CHECKSUM = MOD112()
    LENGTH = 16

    def clean(self, txt):
        return clean_name_identifier(txt)

    def _format(self):
        if not self.value:
            return None
        return 'ISNI %s' % (group_digits(self.value, ' '))

    def get_typed_variants(self):
        # format() already has the ISNI prefix
        return [self.format(), 'ISNI %s' % (self.normalized_value())]


class ORCID(StandardNumber):
    TYPE = 'orcid'
    PATTERN = NAME_IDENTIFIER_PATTERN
    CHECKSUM = ISNI.CHECKSUM
    LENGTH = ISNI.LENGTH

    def clean(self, txt):
        return clean_name_identifier(txt)

    def _format(self):
        if not self.value:
            return None
        return group_digits(self.value, '-')

    def to_uri(self):
        return ORCID_URI_PREFIX + self.format()
