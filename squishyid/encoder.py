"""
Shortens and obfuscates integer IDs at the same time.  Maps unsigned 64 bit integers onto short
strings made exclusively out of the characters of a key, and back again - useful for hiding real
database IDs in URLs, or for saving space in SMS messages and file names.

This is NOT encryption.  There are no consistency checks and the key is easy to reverse engineer
from a small number of encoded / decoded samples.  Treat it as really fast obfuscation only.
"""

import logging
import operator

__author__ = 'Stephen Brown (Little Fish Solutions LTD)'

log = logging.getLogger(__name__)

# Largest value that can be encoded or decoded
U64_MAX = 2 ** 64 - 1


class SquishyIDError(ValueError):
    pass


class InvalidKey(SquishyIDError):
    pass


class InvalidKeyLength(InvalidKey):
    pass


class DuplicateKeyCharacters(InvalidKey):
    pass


class DecodeError(SquishyIDError):
    pass


class EmptyInput(DecodeError):
    pass


class UnknownCharacter(DecodeError):
    pass


class DecodeOverflow(DecodeError):
    pass


class SquishyID:
    def __init__(self, key):
        """
        Creates an encoder which maps integers onto characters from the key.  Similar to base64
        encoding but with a custom set of characters, in a custom order.

        Choose your key characters wisely:

        - For SMS messages use a shuffled a-z, A-Z, 0-9 key.  1234567890 becomes something like
          "380FQs"
        - For NTFS file names use a shuffled a-z key to avoid case insensitivity collisions
        - The longer the key, the shorter the encoded values

        :param key: String of at least 2 unique characters, i.e.
                    "2BjLhRduC6Tb8Q5cEk9oxnFaWUDpOlGAgwYzNre7tI4yqPvXm0KSV1fJs3ZiHM".  Each unicode
                    code point is one digit, so "äą" or a string of single code point emoji
                    are valid keys.  Emoji built from several code points (ZWJ sequences, flags)
                    are split into separate digits and usually repeat a code point
        :raises InvalidKeyLength: If there are fewer than 2 characters
        :raises DuplicateKeyCharacters: If any character appears more than once
        """
        if not isinstance(key, str):
            raise TypeError('Key must be a string, {} given'.format(type(key).__name__))

        if len(key) < 2:
            raise InvalidKeyLength('Key must contain at least 2 characters.')

        # Map from char -> value
        mapping = {}
        for position, ch in enumerate(key):
            if ch in mapping:
                raise DuplicateKeyCharacters('Key must contain unique characters.')
            mapping[ch] = position

        self._alphabet = key
        self._radix = len(key)
        self._mapping = mapping

        log.debug('Created encoder with radix {}'.format(self._radix))

    @property
    def alphabet(self):
        return self._alphabet

    @property
    def radix(self):
        return self._radix

    def position_of(self, ch):
        """
        :return: The digit value of ch, or None if it isn't in the key
        """
        return self._mapping.get(ch)

    def encode(self, value):
        """
        Encodes value using the characters from the key, most significant digit first

        :param value: Integer between 0 and U64_MAX
        :return: The encoded string.  Zero is encoded as the first character of the key
        """
        if isinstance(value, bool):
            raise TypeError('Value must be an integer, bool given')

        # Accepts anything usable as an index, i.e. numpy integers
        value = operator.index(value)

        if value < 0 or value > U64_MAX:
            raise ValueError('Value must be between 0 and {}.'.format(U64_MAX))

        if value == 0:
            return self._alphabet[0]

        out = []
        while value > 0:
            value, digit = divmod(value, self._radix)
            out.append(self._alphabet[digit])
        return ''.join(reversed(out))

    def decode(self, encoded):
        """
        Decodes a string made out of characters from the key.  Leading "zero" characters are
        allowed, so for the key "ab" both "b" and "aab" decode to 1

        :param encoded: The encoded string
        :return: The decoded integer
        :raises EmptyInput: If encoded is an empty string
        :raises UnknownCharacter: On the first character that isn't in the key
        :raises DecodeOverflow: If the value would be bigger than U64_MAX
        """
        if not isinstance(encoded, str):
            raise TypeError('Encoded value must be a string, {} given'.format(type(encoded).__name__))

        if not encoded:
            raise EmptyInput('Encoded value must contain at least 1 character.')

        decoded = 0
        for ch in encoded:
            digit = self._mapping.get(ch)
            if digit is None:
                raise UnknownCharacter('Encoded value contains character not present in key.')

            # Check before multiplying so that the result never leaves the 64 bit range
            if decoded > (U64_MAX - digit) // self._radix:
                raise DecodeOverflow('Encoded value too big to decode.')

            decoded = decoded * self._radix + digit

        return decoded

    def is_valid(self, encoded):
        """
        :return: True if encoded can be decoded with this key
        """
        try:
            self.decode(encoded)
        except DecodeError:
            return False

        return True

    def __repr__(self):
        return '<{} radix={}>'.format(type(self).__name__, self._radix)
