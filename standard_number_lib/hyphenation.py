#!/usr/bin/env python3
"""
Work out where the hyphens go in a 13 digit ISBN/ISMN.

The ranges are pairs of hyphenated bounds such as ('978-3-200', '978-3-699'),
meaning that any number starting 9783 whose next three digits are between
200 and 699 has a three digit registrant (publisher) segment.  These are
compared as strings rather than ints, because leading zeroes matter: 978-3-03
and 978-3-030 are different ranges.

How the ranges are obtained is someone else's problem - see range_message.py
for the ISBN ones.
"""

def dehyphenate(txt):
    return txt.replace('-', '')


def is_in_range(candidate, begin, end):
    """
    Return -1 if the candidate sorts before the range, 1 if after, 0 if the
    range matches
    """
    b = dehyphenate(begin)
    if candidate[:len(b)] < b:
        return -1
    e = dehyphenate(end)
    if e < candidate[:len(e)]:
        return 1
    return 0


def hyphenate(prefix, candidate):
    """
    Hyphenate candidate according to the layout of prefix (the start bound of
    the matching range), returning None if candidate is too short to fit it.

    The part of prefix before its first hyphen is the agency prefix (978, 979)
    and is copied literally.  After that every digit in prefix consumes one
    digit of candidate and every hyphen in prefix emits a hyphen.  Whatever
    is left bar the final check digit is the title segment.
    """
    agency, _, layout = prefix.partition('-')
    payload = candidate[len(agency):]
    bits = [agency, '-']
    j = 0
    for ch in layout:
        if ch == '-':
            bits.append('-')
        else:
            if j >= len(payload) - 1:
                return None
            bits.append(payload[j])
            j += 1
    if j >= len(payload) - 1:
        return None
    bits.append('-')
    bits.append(payload[j:-1])
    bits.append('-')
    bits.append(payload[-1])
    return ''.join(bits)


class RangeTable(object):
    """
    An ordered, read-only collection of (begin, end) range bounds.  Safe to
    share between any number of number objects.
    """

    def __init__(self, ranges):
        self._ranges = tuple((begin, end) for begin, end in ranges)

    def __len__(self):
        return len(self._ranges)

    def __iter__(self):
        return iter(self._ranges)

    def __repr__(self):
        return 'RangeTable(%d ranges)' % (len(self._ranges))

    def find(self, candidate):
        """
        Return the first (begin, end) pair that candidate falls within, or None
        """
        for begin, end in self._ranges:
            if is_in_range(candidate, begin, end) == 0:
                return begin, end
        return None

    def hyphenate(self, candidate):
        """
        Return the hyphenated form of candidate, or None if no range covers it
        """
        match = self.find(candidate)
        if not match:
            return None
        return hyphenate(match[0], candidate)

    def fix(self, candidate):
        """
        As hyphenate(), but falling back to the unhyphenated candidate
        """
        if candidate is None:
            return None
        return self.hyphenate(candidate) or candidate
