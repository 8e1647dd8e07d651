import copy
import operator
import pickle

from django.test import SimpleTestCase

from shorttoken.base62 import (DEFAULT_TOKEN_LENGTH, MAX_TOKEN_LENGTH,
                               MAX_UINT64, InvalidCharacter, TokenTooBig,
                               TokenTooSmall)
from shorttoken.token import Token, from_text, new, to_text


class TokenTest(SimpleTestCase):
    def test_encode(self):
        token = Token(2751173559858)
        self.assertEqual(token.encode(), 'Mr1NSSu')
        self.assertEqual(str(token), 'Mr1NSSu')
        self.assertEqual(int(token), 2751173559858)
        self.assertEqual(token.int, 2751173559858)
        self.assertEqual(operator.index(token), 2751173559858)
        self.assertEqual(repr(token), "Token('Mr1NSSu')")

    def test_decode(self):
        self.assertEqual(Token.decode('Mr1NSSu'), Token(2751173559858))
        self.assertRaises(InvalidCharacter, Token.decode, 's p a c e')
        self.assertRaises(TokenTooSmall, Token.decode, '')
        self.assertRaises(TokenTooBig, Token.decode, 'a' * 11)

    def test_constructor(self):
        self.assertEqual(Token(Token(5)), Token(5))
        self.assertEqual(Token(MAX_UINT64).int, MAX_UINT64)
        self.assertRaises(ValueError, Token, -1)
        self.assertRaises(ValueError, Token, MAX_UINT64 + 1)
        self.assertRaises(TypeError, Token, 'Mr1NSSu')
        self.assertRaises(TypeError, Token, 1.0)
        self.assertRaises(TypeError, Token, True)

    def test_comparison(self):
        a, b, c = Token(1), Token(62), Token(2751173559858)
        self.assertEqual(sorted([c, a, b]), [a, b, c])
        self.assertTrue(a < b <= b < c)
        self.assertNotEqual(a, b)
        self.assertNotEqual(Token(5), 5)
        self.assertEqual(len({Token(5), Token(5), Token(6)}), 2)

    def test_immutable(self):
        token = Token(5)
        with self.assertRaises(TypeError):
            token.int = 6
        self.assertEqual(token.int, 5)

    def test_copy_and_pickle(self):
        token = Token(2751173559858)
        self.assertEqual(copy.copy(token), token)
        self.assertEqual(copy.deepcopy(token), token)
        self.assertEqual(pickle.loads(pickle.dumps(token)), token)

    def test_zero(self):
        self.assertEqual(str(Token(0)), '')


class NewTest(SimpleTestCase):
    def test_new(self):
        for _ in range(50):
            token = new()
            self.assertTrue(isinstance(token, Token))
            self.assertTrue(len(str(token)) <= DEFAULT_TOKEN_LENGTH)
        self.assertTrue(len(str(Token.new(3))) <= 3)

    def test_decodes_back(self):
        token = new(MAX_TOKEN_LENGTH)
        if token.int:
            self.assertEqual(Token.decode(str(token)), token)

    def test_out_of_range_length(self):
        self.assertRaises(ValueError, new, 0)
        self.assertRaises(ValueError, new, MAX_TOKEN_LENGTH + 1)


class TextTest(SimpleTestCase):
    def test_to_text(self):
        self.assertEqual(to_text(Token(2751173559858)), b'Mr1NSSu')
        self.assertEqual(to_text(62), b'10')
        self.assertEqual(to_text(0), b'')

    def test_from_text(self):
        self.assertEqual(from_text(b'Mr1NSSu'), Token(2751173559858))
        self.assertEqual(from_text('Mr1NSSu'), Token(2751173559858))

    def test_from_text_errors(self):
        self.assertRaises(TokenTooSmall, from_text, b'')
        self.assertRaises(TokenTooBig, from_text, b'a' * 11)
        self.assertRaises(InvalidCharacter, from_text, b's p a c e')
        self.assertRaises(InvalidCharacter, from_text, b'\xff')
