from django import forms
from django.core.exceptions import ValidationError
from django.utils.translation import gettext_lazy as _

from shorttoken.base62 import MAX_TOKEN_LENGTH, MAX_UINT64, TokenError, encode
from shorttoken.token import Token


class TokenFormField(forms.CharField):
    '''
    Cleans a submitted base62 string into a `Token`, or None when empty.
    '''
    default_error_messages = {
        'invalid_token': _('“%(value)s” is not a valid token: %(reason)s'),
    }

    def prepare_value(self, value):
        if isinstance(value, Token):
            return value.encode()
        if (isinstance(value, int) and not isinstance(value, bool)
                and 0 <= value <= MAX_UINT64):
            return encode(value)
        return value

    def to_python(self, value):
        value = super(TokenFormField, self).to_python(value)
        if value in self.empty_values:
            return None
        try:
            return Token.decode(value)
        except TokenError as e:
            raise ValidationError(
                self.error_messages['invalid_token'],
                code='invalid_token',
                params={'value': value, 'reason': e},
            )

    def widget_attrs(self, widget):
        attrs = super(TokenFormField, self).widget_attrs(widget)
        if not widget.is_hidden:
            attrs.setdefault('maxlength', str(MAX_TOKEN_LENGTH))
        return attrs
