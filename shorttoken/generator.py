'''
Random token values.

Tokens are short, so collisions happen. Always back them with a uniqueness
constraint wherever they're stored.
'''
import logging
import random
import threading

from shorttoken.base62 import (DEFAULT_TOKEN_LENGTH, MAX_TOKEN_LENGTH,
                               MIN_TOKEN_LENGTH, max_value_for_length)


logger = logging.getLogger(__name__)


def check_length(length):
    '''
    Raises `ValueError` for a token length outside
    [MIN_TOKEN_LENGTH, MAX_TOKEN_LENGTH].

    Lengths come from code, not users, so this is not a `TokenError`.
    '''
    if not MIN_TOKEN_LENGTH <= length <= MAX_TOKEN_LENGTH:
        raise ValueError(
            'Token length must be between {} and {}, not {}.'.format(
                MIN_TOKEN_LENGTH, MAX_TOKEN_LENGTH, length))


class TokenGenerator(object):
    '''
    Draws token values from a random source.

    By default the source is `random.SystemRandom`, which reads from the OS
    and needs no seeding. Pass a seeded `random.Random` to get repeatable
    values, e.g. in tests. Calls are serialized with a lock, so one generator
    can be shared between threads whatever the source.
    '''
    def __init__(self, random_source=None):
        if random_source is None:
            random_source = random.SystemRandom()
        self._random = random_source
        self._lock = threading.Lock()

    def generate(self, length=None):
        '''
        Returns a value that encodes to *at most* `length` characters
        (`DEFAULT_TOKEN_LENGTH` if not given).
        '''
        if length is None:
            length = DEFAULT_TOKEN_LENGTH
        check_length(length)

        ceiling = max_value_for_length(length)
        with self._lock:
            value = self._random.randrange(ceiling)
        logger.debug('generated token value below {}'.format(ceiling))
        return value


default_generator = TokenGenerator()


def generate_random(length=None):
    '''
    `TokenGenerator.generate` on the process-wide default generator.
    '''
    return default_generator.generate(length)
