"""Random short id generation

This module provides the identifier generator used by the allocator: a
fixed-length string drawn uniformly at random from a URL-safe alphabet.

Uniqueness is NOT a goal here. Two calls may return the same id; the
allocator detects the collision through the data store's conditional create
and asks for a new candidate.

Classes:
    ShortIdGenerator(alphabet=URL_ALPHABET, length=5):
        Callable generator of random short ids.

Example:
    >>> from shortlinker.utils import ShortIdGenerator
    >>> generate = ShortIdGenerator(length=7)
    >>> generate()
    'V1StGXR'
"""

import secrets

from shortlinker.exceptions import BadConfigurationError
from shortlinker.utils.constants import Defaults


# Same 64 characters as nanoid's urlAlphabet: [A-Za-z0-9_-]
URL_ALPHABET = 'useandom-26T198340PX75pxJACKVERYMINDBUSHWOLF_GQZbfghjklqvwyzrict'


class ShortIdGenerator:
    """Generate fixed-length random short ids from a configured alphabet

    Characters are picked with `secrets.choice`, so every character is drawn
    uniformly and independently and ids are not guessable from previous ones.

    Args:
        alphabet (str):
            Characters to draw from. Must be non-empty and free of duplicates
            (a duplicate would make its character twice as likely).
            Defaults to URL_ALPHABET.
        length (int):
            Number of characters per id. Must be a positive integer.
            Defaults to Defaults.ID_LENGTH.

    Raises:
        BadConfigurationError:
            If the alphabet or the length is invalid.
    """

    def __init__(self, alphabet: str = URL_ALPHABET, length: int = Defaults.ID_LENGTH):
        if not isinstance(alphabet, str) or not alphabet:
            raise BadConfigurationError(f'Alphabet must be a non-empty string (given value: {alphabet!r}).')
        if len(set(alphabet)) != len(alphabet):
            raise BadConfigurationError(f'Alphabet must not contain duplicate characters (given value: {alphabet!r}).')
        if isinstance(length, bool) or not isinstance(length, int):
            raise BadConfigurationError(f'Length must be of type integer (given type: {type(length)}).')
        if length <= 0:
            raise BadConfigurationError(f'Length must be a positive integer (given value: {length}).')

        self.alphabet = alphabet
        self.length = length

    def generate(self) -> str:
        return ''.join(secrets.choice(self.alphabet) for _ in range(self.length))

    __call__ = generate

    def __repr__(self) -> str:
        return f'{type(self).__name__}(alphabet={self.alphabet!r}, length={self.length})'
