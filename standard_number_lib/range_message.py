#!/usr/bin/env python3
"""
Load the ISBN hyphenation ranges from an ISBN International RangeMessage.xml

A trimmed copy of the file is bundled in data/; set the environment variable
STANDARD_NUMBER_RANGE_MESSAGE to the path of a full export to use that
instead.  The latest version can be generated at
https://www.isbn-international.org/range_file_generation - we never fetch it
ourselves.

Only the RegistrationGroups section is of interest; the EAN.UCC prefix rules
that precede it just tell you how long the registration group is, which the
group prefixes already tell us.
"""

from functools import lru_cache
import logging
import os

import untangle # https://github.com/stchris/untangle

from .hyphenation import RangeTable

BUNDLED_RANGE_MESSAGE = os.path.join(os.path.dirname(__file__), 'data',
                                     'RangeMessage.xml')


def range_message_path():
    return os.environ.get('STANDARD_NUMBER_RANGE_MESSAGE') or BUNDLED_RANGE_MESSAGE


def extract_ranges(message):
    """
    Generate (begin, end) pairs from a parsed ISBNRangeMessage element, e.g.
    a rule of 2000000-6999999/length 3 in group 978-3 yields
    ('978-3-200', '978-3-699').  Rules with length 0 are ranges which haven't
    been allocated yet, so are skipped.
    """
    for group in message.RegistrationGroups.get_elements('Group'):
        prefix = group.Prefix.cdata.strip()
        for rules in group.get_elements('Rules'):
            for rule in rules.get_elements('Rule'):
                length = int(rule.Length.cdata.strip() or 0)
                if not length:
                    continue
                begin, sep, end = rule.Range.cdata.strip().partition('-')
                if not sep:
                    logging.warning('Ignoring bad range "%s" in group %s' %
                                    (rule.Range.cdata, prefix))
                    continue
                yield ('%s-%s' % (prefix, begin[:length]),
                       '%s-%s' % (prefix, end[:length]))


def parse_ranges(source):
    """
    source can be anything untangle.parse() accepts: a filename, a file-like
    object or a string of XML
    """
    doc = untangle.parse(source)
    ranges = RangeTable(extract_ranges(doc.ISBNRangeMessage))
    if not ranges:
        logging.warning('No usable ranges found in ISBN range message')
    return ranges


@lru_cache()
def load_ranges(filename):
    ranges = parse_ranges(filename)
    logging.debug('Loaded %d ISBN ranges from %s' % (len(ranges), filename))
    return ranges


def get_default_ranges():
    return load_ranges(range_message_path())


if __name__ == '__main__':
    import sys
    filename = sys.argv[1] if len(sys.argv) > 1 else range_message_path()
    for begin, end in load_ranges(filename):
        print(begin, end)
