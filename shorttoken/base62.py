'''
Functions for encoding and decoding unsigned 64-bit ints as short base62
strings, most significant digit first.

Zero encodes to the empty string, which `decode` refuses (it is shorter than
`MIN_TOKEN_LENGTH`). Don't use zero as a real token.
'''
import logging
import string


logger = logging.getLogger(__name__)

# Digits, then lowercase, then uppercase. Changing the order changes every
# encoded token, so it's fixed for good.
ALPHABET = string.digits + string.ascii_lowercase + string.ascii_uppercase
_ALPHABET_REVERSE = dict((c, i) for (i, c) in enumerate(ALPHABET))
BASE = len(ALPHABET)

# 62**10 is the largest power of 62 that still fits in 64 bits.
MAX_TOKEN_LENGTH = 10
MIN_TOKEN_LENGTH = 1
DEFAULT_TOKEN_LENGTH = 9

MAX_UINT64 = 2 ** 64 - 1


class TokenError(ValueError):
    '''
    Base class for errors raised when decoding untrusted token strings.
    '''


class TokenTooBig(TokenError):
    def __init__(self, length):
        self.length = length
        super(TokenTooBig, self).__init__(
            'the base62 token is larger than {} characters (got {})'.format(
                MAX_TOKEN_LENGTH, length))


class TokenTooSmall(TokenError):
    def __init__(self, length):
        self.length = length
        super(TokenTooSmall, self).__init__(
            'the base62 token is smaller than {} character (got {})'.format(
                MIN_TOKEN_LENGTH, length))


class InvalidCharacter(TokenError):
    def __init__(self, character, position):
        self.character = character
        self.position = position
        super(InvalidCharacter, self).__init__(
            'there was a non base62 character in the token: {!r} at '
            'position {}'.format(character, position))


def check_uint64(value):
    '''
    Raises `ValueError` unless `value` fits in an unsigned 64-bit int.
    '''
    if not 0 <= value <= MAX_UINT64:
        raise ValueError(
            'Token values must be between 0 and {}, not {}.'.format(
                MAX_UINT64, value))


def encode(value):
    '''
    Returns the base62 string for `value`.

    Zero gives `''`. Values of `max_value_for_length(MAX_TOKEN_LENGTH)` and up
    give 11 characters, which `decode` won't accept back.
    '''
    check_uint64(value)
    s = []
    while value > 0:
        value, r = divmod(value, BASE)
        s.append(ALPHABET[r])
    return ''.join(reversed(s))


def decode(text):
    '''
    Returns the int encoded by `text`.

    Checks run in order, and the first one to fail raises:

        1. `TokenTooBig` if `text` is longer than `MAX_TOKEN_LENGTH`.
        2. `TokenTooSmall` if it's shorter than `MIN_TOKEN_LENGTH`.
        3. `InvalidCharacter` for the first character outside `ALPHABET`.

    `text` may also be ASCII bytes.
    '''
    if isinstance(text, (bytes, bytearray)):
        # Every byte maps to one character, so lengths and positions hold and
        # non-ASCII bytes fail the alphabet check.
        text = text.decode('latin-1')
    elif not isinstance(text, str):
        raise TypeError(
            'Tokens decode from str or bytes, not {}.'.format(
                type(text).__name__))

    if len(text) > MAX_TOKEN_LENGTH:
        logger.debug('rejecting token of length {}: too long'.format(
            len(text)))
        raise TokenTooBig(len(text))
    elif len(text) < MIN_TOKEN_LENGTH:
        logger.debug('rejecting empty token')
        raise TokenTooSmall(len(text))

    n = 0
    for i, c in enumerate(text):
        try:
            n = n * BASE + _ALPHABET_REVERSE[c]
        except KeyError:
            logger.debug('rejecting token: bad character {!r} at {}'.format(
                c, i))
            raise InvalidCharacter(c, i)
    return n


def max_value_for_length(length):
    '''
    The exclusive upper bound of values that encode to at most `length`
    characters, clamped to the 64-bit range.
    '''
    if length < 0:
        return 0
    return min(MAX_UINT64, BASE ** length)
