"""
Helpers for generating keys.  A key is just a string of unique characters - shuffling one of the
character sets below gives a key that is valid for SquishyID
"""

import logging
import random
import string

from .encoder import InvalidKeyLength

__author__ = 'Stephen Brown (Little Fish Solutions LTD)'

log = logging.getLogger(__name__)

# Good for file names on case insensitive file systems
LOWERCASE = string.ascii_lowercase

# Good for SMS messages and URLs
ALPHANUMERIC = string.ascii_lowercase + string.ascii_uppercase + string.digits

# U+1F600 to U+1F637
EMOJI = ''.join(chr(c) for c in range(0x1F600, 0x1F638))


def generate_key(characters=ALPHANUMERIC, rng=None):
    """
    Generates a random key from a set of characters.  Duplicates are removed, keeping the first
    occurrence, before shuffling

    :param characters: The characters to build the key from
    :param rng: Optional random.Random instance (or anything with a shuffle method).  Defaults to
                random.SystemRandom
    :return: A shuffled key
    """
    unique = list(dict.fromkeys(characters))

    if len(unique) < 2:
        raise InvalidKeyLength('Key must contain at least 2 characters.')

    if rng is None:
        rng = random.SystemRandom()

    rng.shuffle(unique)

    log.debug('Generated key with {} characters'.format(len(unique)))

    return ''.join(unique)
