'''
The `Token` value type: an unsigned 64-bit int that presents itself to the
outside world as its base62 string.

    >>> t = Token(2751173559858)
    >>> str(t)
    'Mr1NSSu'
    >>> int(Token.decode('Mr1NSSu'))
    2751173559858
'''
import functools

from shorttoken import base62
from shorttoken.generator import generate_random


@functools.total_ordering
class Token(object):
    '''
    Immutable, hashable, and ordered by its integer value (like `uuid.UUID`
    is for UUIDs).

    Keep the int for storage and lookups, and hand out `str(token)`.
    '''
    __slots__ = ('int',)

    def __init__(self, value):
        if isinstance(value, Token):
            value = value.int
        elif isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(
                'Token() takes an int, not {}. Use Token.decode for '
                'strings.'.format(type(value).__name__))
        base62.check_uint64(value)
        object.__setattr__(self, 'int', value)

    @classmethod
    def decode(cls, text):
        '''
        Raises a `base62.TokenError` if `text` isn't a valid token.
        '''
        return cls(base62.decode(text))

    @classmethod
    def new(cls, length=None):
        return cls(generate_random(length))

    def encode(self):
        return base62.encode(self.int)

    def __str__(self):
        return self.encode()

    def __repr__(self):
        return '{}({!r})'.format(self.__class__.__name__, self.encode())

    def __int__(self):
        return self.int

    __index__ = __int__

    def __eq__(self, other):
        if isinstance(other, Token):
            return self.int == other.int
        return NotImplemented

    def __lt__(self, other):
        if isinstance(other, Token):
            return self.int < other.int
        return NotImplemented

    def __hash__(self):
        return hash(self.int)

    def __setattr__(self, name, value):
        raise TypeError('Token objects are immutable')

    def __reduce__(self):
        return (self.__class__, (self.int,))


def new(length=None):
    '''
    Returns a random `Token` of *up to* `length` characters
    (`DEFAULT_TOKEN_LENGTH` by default).

    Raises `ValueError` if `length` is out of range. Check for collisions
    before storing the result.
    '''
    return Token.new(length)


def to_text(value):
    '''
    Encodes a `Token` or int as ASCII bytes.
    '''
    return base62.encode(int(value)).encode('ascii')


def from_text(data):
    '''
    Decodes a str or ASCII bytes into a `Token`.

    Empty input raises `TokenTooSmall`: zero can be encoded but not decoded.
    '''
    return Token.decode(data)
