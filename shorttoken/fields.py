import logging

from django.conf import settings
from django.core import checks, exceptions, validators
from django.db import models
from django.utils.translation import gettext_lazy as _

from shorttoken.base62 import (DEFAULT_TOKEN_LENGTH, MAX_TOKEN_LENGTH,
                               TokenError, encode, max_value_for_length)
from shorttoken.forms import TokenFormField
from shorttoken.generator import check_length
from shorttoken.token import Token


logger = logging.getLogger(__name__)


class TokenField(models.PositiveBigIntegerField):
    '''
    Stores a `Token` in an ordinary integer column, so lookups stay fast,
    while serializers (JSON, XML, ...) and forms see the base62 string.

    With `auto=True`, new rows get a random token of up to `length`
    characters. `length` defaults to the `SHORTTOKEN_DEFAULT_LENGTH` setting,
    or `DEFAULT_TOKEN_LENGTH` if that isn't set. Auto fields are unique and
    not editable unless you say otherwise, but random tokens can still
    collide, so be ready to retry on `IntegrityError`.

    Lookups accept `Token`s, ints, or encoded strings::

        Link.objects.get(token='Mr1NSSu')
    '''
    description = _('Base62 token')
    default_error_messages = {
        'invalid_token': _('“%(value)s” is not a valid token: %(reason)s'),
    }
    # Anything bigger encodes to a string that won't decode.
    default_validators = [
        validators.MaxValueValidator(
            max_value_for_length(MAX_TOKEN_LENGTH) - 1),
    ]

    def __init__(self, *args, auto=False, length=None, **kwargs):
        self.auto = auto
        self.length = length
        if auto:
            kwargs.setdefault('editable', False)
            kwargs.setdefault('unique', True)
            kwargs['default'] = self.generate_token
        super(TokenField, self).__init__(*args, **kwargs)

    @property
    def token_length(self):
        if self.length is not None:
            return self.length
        return getattr(settings, 'SHORTTOKEN_DEFAULT_LENGTH',
                       DEFAULT_TOKEN_LENGTH)

    def generate_token(self):
        return Token.new(self.token_length)

    def check(self, **kwargs):
        return super(TokenField, self).check(**kwargs) + self._check_length()

    def _check_length(self):
        if not self.auto and self.length is None:
            return []
        try:
            check_length(self.token_length)
        except ValueError as e:
            return [checks.Error(str(e), obj=self, id='shorttoken.E001')]
        return []

    def deconstruct(self):
        name, path, args, kwargs = super(TokenField, self).deconstruct()
        # The default is a bound method; `auto` recreates it.
        if self.auto:
            kwargs.pop('default', None)
            kwargs['auto'] = True
        if self.length is not None:
            kwargs['length'] = self.length
        return name, path, args, kwargs

    def _invalid(self, value, reason):
        logger.debug('invalid token for {}: {!r}'.format(self.name, value))
        return exceptions.ValidationError(
            self.error_messages['invalid_token'],
            code='invalid_token',
            params={'value': value, 'reason': reason},
        )

    def to_python(self, value):
        if value is None or isinstance(value, Token):
            return value
        if isinstance(value, str):
            if value == '':
                return None
            try:
                return Token.decode(value)
            except TokenError as e:
                raise self._invalid(value, e)
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return Token(value)
            except ValueError as e:
                raise self._invalid(value, e)
        raise self._invalid(value, _('expected a string or an integer'))

    def from_db_value(self, value, expression, connection):
        if value is None:
            return value
        return Token(value)

    def get_prep_value(self, value):
        value = self.to_python(value)
        if value is None:
            return None
        return super(TokenField, self).get_prep_value(int(value))

    def run_validators(self, value):
        # The range validators compare against ints.
        if value is not None:
            value = int(value)
        super(TokenField, self).run_validators(value)

    def value_to_string(self, obj):
        value = self.value_from_object(obj)
        if value is None:
            return ''
        return encode(int(value))

    def formfield(self, **kwargs):
        # Skip IntegerField.formfield, which adds numeric bounds a CharField
        # doesn't take.
        return models.Field.formfield(self, **{
            'form_class': TokenFormField,
            **kwargs,
        })
