from pyquerystring.builder import build_query_string
from pyquerystring.util import DEFAULT_SEPARATOR


def extract_query(url):
    """Returns the query component of `url`, or `None` if there is none.

    The query is everything between the first `?` and the first `#`. A `#`
    ahead of the first `?` starts the fragment, so no query is present.

    :param url: url
    :type url: str

    :rtype: str
    """
    if not url:
        return None

    url = url.split('#', 1)[0]

    if '?' not in url:
        return None

    return url.split('?', 1)[1]


def append_query(url, params, opts=None):
    """Encodes `params` and attaches them to `url`, ahead of any fragment.

    :param url: url
    :type url: str

    :param params: query mapping
    :type params: dict

    :param opts: builder options
    :type opts: dict

    :rtype: str
    """
    url = url or ''
    query = build_query_string(params, opts)

    if not query:
        return url

    url, hash_mark, fragment = url.partition('#')
    separator = (opts or {}).get('separator') or DEFAULT_SEPARATOR

    if '?' not in url:
        url += '?'
    elif not url.endswith('?') and not url.endswith(separator):
        url += separator

    return url + query + hash_mark + fragment
