from pyquerystring.builder import build_query_string, qs_encode
from pyquerystring.exceptions import QueryStringError
from pyquerystring.parser import parse_query_string, qs_parse
from pyquerystring.url import append_query, extract_query

__all__ = [
    'append_query',
    'build_query_string',
    'extract_query',
    'parse_query_string',
    'qs_encode',
    'qs_parse',
    'QueryStringError'
]
