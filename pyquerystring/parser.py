from pyquerystring.url import extract_query
from pyquerystring.util import DEFAULT_SEPARATOR, split_key, unquote_component

import logging

log = logging.getLogger(__name__)


def parse_query_string(url, opts=None):
    """Decodes the query component of a url into a mapping.

    :param url: url
    :type url: str

    :param opts: options (`separator`, `encoding`, `errors`)
    :type opts: dict

    :rtype: dict
    """
    query = extract_query(url)

    if not query:
        return {}

    return qs_parse(query, opts)


def qs_parse(qs, opts=None):
    """Decodes a bare query string into a mapping.

    Plain keys are last-wins, bracketed keys (`tags[]`, `tags[0]`) collect
    into a list under their base name in input order.

    :param qs: query string, without the leading `?`
    :type qs: str

    :param opts: options (`separator`, `encoding`, `errors`)
    :type opts: dict

    :rtype: dict
    """
    opts = opts or {}
    separator = opts.get('separator') or DEFAULT_SEPARATOR

    qry = {}

    for pair in qs.split(separator):
        if not pair:
            continue

        name, _, value = pair.partition('=')

        key, is_array = split_key(unquote_component(name, opts))
        value = unquote_component(value, opts)

        if not key:
            log.debug('dropping pair with empty key: %r', pair)
            continue

        if not is_array:
            if key in qry:
                log.debug('key "%s" repeated, keeping last value', key)

            qry[key] = value
            continue

        if not isinstance(qry.get(key), list):
            qry[key] = []

        qry[key].append(value)

    return qry
