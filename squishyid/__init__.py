"""
Shortens and obfuscates integer IDs at the same time
"""

import logging

from .encoder import (  # noqa
    U64_MAX, SquishyID, SquishyIDError, InvalidKey, InvalidKeyLength, DuplicateKeyCharacters,
    DecodeError, EmptyInput, UnknownCharacter, DecodeOverflow
)
from .keygen import generate_key  # noqa

__author__ = 'Stephen Brown (Little Fish Solutions LTD)'

log = logging.getLogger(__name__)
