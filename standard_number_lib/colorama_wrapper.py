#!/usr/bin/env python3
"""
Colours for the command line sanity checks
"""

from colorama import Fore, Style

COLORAMA_RESET = Fore.RESET + Style.RESET_ALL

VALID_COLOUR = Fore.LIGHTGREEN_EX
INVALID_COLOUR = Fore.LIGHTRED_EX
DETAIL_COLOUR = Fore.LIGHTCYAN_EX


def coloured(txt, colour):
    return '%s%s%s' % (colour, txt, COLORAMA_RESET)
