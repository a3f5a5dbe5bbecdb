from pyquerystring.exceptions import QueryStringError
from pyquerystring.util import DEFAULT_ARRAY_SUFFIX, DEFAULT_SEPARATOR, is_sequence, quote_component, to_text

from collections.abc import Mapping, Set
import logging

log = logging.getLogger(__name__)


def build_query_string(params, opts=None):
    """Encodes a mapping into a query string.

    Scalars are emitted as `key=value`, lists, tuples and other ordered
    iterables as one `key[]=element` pair per element. `None` values are
    skipped. Nested mappings and sets raise `QueryStringError`.

    :param params: query mapping
    :type params: dict

    :param opts: options (`separator`, `encoding`, `rfc3986`, `array_suffix`)
    :type opts: dict

    :rtype: str
    """
    if not params:
        return ''

    opts = opts or {}

    separator = opts.get('separator') or DEFAULT_SEPARATOR
    array_suffix = opts.get('array_suffix', DEFAULT_ARRAY_SUFFIX)

    pairs = []

    for key, value in params.items():
        name = quote_component(to_text(key), opts)

        if isinstance(value, Mapping):
            raise QueryStringError('nested mapping for key "%s" is not supported' % key, key)

        if isinstance(value, Set):
            raise QueryStringError('unordered set for key "%s" is not supported' % key, key)

        if is_sequence(value):
            name += array_suffix
            values = value
        else:
            values = [value]

        for item in values:
            if isinstance(item, Mapping) or is_sequence(item):
                raise QueryStringError('nested sequence for key "%s" is not supported' % key, key)

            text = to_text(item)

            if text is None:
                log.debug('skipping None value for key "%s"', key)
                continue

            pairs.append(name + '=' + quote_component(text, opts))

    return separator.join(pairs)


def qs_encode(params, opts=None):
    return build_query_string(params, opts)
