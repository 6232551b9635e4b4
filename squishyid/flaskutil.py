"""
Flask integration - obfuscated IDs in URLs and templates
"""

import logging

from werkzeug.routing import BaseConverter, ValidationError

from .encoder import SquishyID, InvalidKey, DecodeError

__author__ = 'Stephen Brown (Little Fish Solutions LTD)'

log = logging.getLogger(__name__)

encoder = None

DEFAULT_URL_CONVERTER = 'squishyid'
DEFAULT_TEMPLATE_FILTER = 'squishyid'


class SquishyIDConverter(BaseConverter):
    """
    URL converter which decodes the path segment into an integer, i.e.

        @app.route('/order/<squishyid:order_id>')
        def view_order(order_id):
            ...

    Values that can't be decoded don't match the route, so the user gets a 404
    """
    def to_python(self, value):
        try:
            return get_encoder().decode(value)
        except DecodeError as e:
            log.debug('Rejecting URL value "{}": {}'.format(value, e))
            raise ValidationError()

    def to_url(self, value):
        # Percent-escapes reserved characters in the key, i.e. "?" and "#"
        return super().to_url(get_encoder().encode(value))


def init(app):
    """
    Initialise this library.  The following config variables need to be in your Flask config:

    SQUISHYID_KEY: The key used to encode the IDs.  Use keygen.generate_key() to create one and
                   don't change it once it's in use or all existing links will break!
                   It must not contain "/" as that can never be part of a single path segment

    The following are optional:

    SQUISHYID_URL_CONVERTER: Name of the URL converter.  Defaults to "squishyid"
    SQUISHYID_TEMPLATE_FILTER: Name of the Jinja2 filter to encode IDs.  Defaults to "squishyid"
    """
    global encoder

    key = app.config['SQUISHYID_KEY']
    converter_name = app.config.get('SQUISHYID_URL_CONVERTER', DEFAULT_URL_CONVERTER)
    filter_name = app.config.get('SQUISHYID_TEMPLATE_FILTER', DEFAULT_TEMPLATE_FILTER)

    if '/' in key:
        raise InvalidKey('Key must not contain "/" when used in URLs.')

    encoder = SquishyID(key)

    app.url_map.converters[converter_name] = SquishyIDConverter
    app.add_template_filter(encode_id, filter_name)

    log.info('SquishyID initialised with radix {}'.format(encoder.radix))


def get_encoder():
    if encoder is None:
        raise RuntimeError('squishyid.flaskutil has not been initialised. Call init(app) first')

    return encoder


def encode_id(value):
    return get_encoder().encode(value)


def decode_id(encoded):
    return get_encoder().decode(encoded)
