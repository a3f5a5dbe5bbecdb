from collections.abc import Iterable
from urllib.parse import quote, quote_plus, unquote_plus

DEFAULT_SEPARATOR = '&'
DEFAULT_ENCODING = 'utf-8'
DEFAULT_ERRORS = 'replace'
DEFAULT_ARRAY_SUFFIX = '[]'


def quote_component(value, opts=None):
    """Percent-encodes a key or value.

    Characters the codec cannot represent (lone surrogates, or non-Latin-1
    text with `encoding='latin-1'`) are emitted unescaped, so the parser
    reads them back unchanged.

    :param value: text to encode
    :type value: str or bytes

    :param opts: encoding options (`encoding`, `rfc3986`)
    :type opts: dict

    :rtype: str
    """
    opts = opts or {}
    encoding = opts.get('encoding') or DEFAULT_ENCODING
    rfc3986 = opts.get('rfc3986')

    # bytes are quoted as-is
    if isinstance(value, bytes):
        return _quote(value, None, rfc3986)

    try:
        return _quote(value, encoding, rfc3986)
    except UnicodeEncodeError:
        pass

    quoted = []

    for char in value:
        try:
            quoted.append(_quote(char, encoding, rfc3986))
        except UnicodeEncodeError:
            quoted.append(char)

    return ''.join(quoted)


def _quote(value, encoding, rfc3986):
    if rfc3986:
        return quote(value, safe='~', encoding=encoding)

    return quote_plus(value, safe='', encoding=encoding)


def unquote_component(value, opts=None):
    """Decodes a form-urlencoded key or value, never raises."""
    opts = opts or {}

    return unquote_plus(
        value,
        encoding=opts.get('encoding') or DEFAULT_ENCODING,
        errors=opts.get('errors') or DEFAULT_ERRORS
    )


def split_key(name):
    """Splits a decoded key into its base name and bracket flag.

    `tags[]`, `tags[0]` and `a[b][c]` all map to their base name with the
    flag set. A `[` with no matching `]` is part of a plain key.

    :type name: str
    :rtype: tuple
    """
    start = name.find('[')

    if start < 0 or name.find(']', start) < 0:
        return name, False

    return name[:start], True


def to_text(value):
    """Coerces a scalar to the text that gets encoded, `None` means skip."""
    if value is None:
        return None

    if isinstance(value, bool):
        return '1' if value else '0'

    if isinstance(value, (str, bytes)):
        return value

    if isinstance(value, bytearray):
        return bytes(value)

    return str(value)


def is_sequence(value):
    """Returns `True` for values that are emitted as `key[]=...` pairs."""
    if isinstance(value, (str, bytes, bytearray)):
        return False

    return isinstance(value, Iterable)
