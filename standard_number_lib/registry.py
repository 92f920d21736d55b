#!/usr/bin/env python3
"""
Look up a standard number handler by name, e.g.

    get_instance('isbn').set('3-9803350-5-4').normalize().is_valid()

The set of supported types is fixed; there's no plugin mechanism.

When run as a script, validates and formats the values given on the command
line:

    python -m standard_number_lib.registry isbn 3-9803350-5-4 361606581 -c
"""

from argparse import ArgumentParser
import logging
import sys

from .colorama_wrapper import (coloured, VALID_COLOUR, INVALID_COLOUR,
                               DETAIL_COLOUR)
from .custom_exceptions import NoSuchStandardNumberError, StandardNumberError
from .isbn import ISBN
from .ismn import ISMN
from .name_identifiers import ISNI, ORCID
from .persistent_identifiers import ARK, DOI
from .serials import ISSN, ZDB, PPN
from .text_codes import ISTC, SICI
from .trade_items import EAN, GTIN, UPC
from .work_codes import ISAN, ISWC

HANDLERS = {
    'ark': ARK,
    'doi': DOI,
    'ean': EAN,
    'gtin': GTIN,
    'isan': ISAN,
    'isbn': ISBN,
    'ismn': ISMN,
    'isni': ISNI,
    'issn': ISSN,
    'istc': ISTC,
    'iswc': ISWC,
    'orcid': ORCID,
    'ppn': PPN,
    'sici': SICI,
    'upc': UPC,
    'zdb': ZDB,
}

TYPES = sorted(HANDLERS.keys())


def get_instance(name):
    """
    Return a new handler for the named type (case insensitive)
    """
    try:
        return HANDLERS[name.strip().lower()]()
    except (KeyError, AttributeError):
        raise NoSuchStandardNumberError('No standard number type %s - must be one of %s' %
                                        (name, ', '.join(TYPES)))


def create_parser():
    parser = ArgumentParser(description='Validate and format standard numbers')
    parser.add_argument('type', help='One of %s' % (', '.join(TYPES)))
    parser.add_argument('values', nargs='+', help='Values to check')
    parser.add_argument('-c', action='store_true', dest='create_checksum',
                        help='Create/repair check characters rather than '
                        'rejecting bad ones')
    parser.add_argument('-e', action='store_true', dest='ean',
                        help='Prefer the 13 digit EAN form (ISBN and ISMN only)')
    parser.add_argument('-v', action='store_true', dest='verbose',
                        help='Log verbosely')
    return parser


def describe(handler, value, create_checksum=False, ean=False):
    """
    Return a one line description of value, for the command line output
    """
    handler.reset()
    handler.set(value).create_checksum(create_checksum)
    if ean and hasattr(handler, 'ean'):
        handler.ean(True)
    handler.normalize()
    try:
        handler.verify()
    except StandardNumberError as err:
        return '%s : %s' % (value, coloured(err, INVALID_COLOUR))
    return '%s : %s %s' % (value,
                           coloured(handler.normalized_value(), VALID_COLOUR),
                           coloured(handler.format(), DETAIL_COLOUR))


if __name__ == '__main__':
    args = create_parser().parse_args(sys.argv[1:])
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    try:
        handler = get_instance(args.type)
    except NoSuchStandardNumberError as err:
        logging.error(err)
        sys.exit(1)
    for val in args.values:
        print(describe(handler, val, args.create_checksum, args.ean))
