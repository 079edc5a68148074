#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
JSON encoding that can carry raw JavaScript.

Client side widgets are configured with JSON, but some of their
settings are callbacks. A :class:`JsonExpr` marks a value as a
JavaScript expression that must reach the page as code, not as a
string literal.
"""

__docformat__ = "restructuredtext en"

import simplejson

__all__ = [
    'JsonExpr',
    'encode',
]

logger = __import__('logging').getLogger(__name__)


class JsonExpr(simplejson.RawJSON):
    """
    A JavaScript expression embedded in a JSON document.

    The expression text is written out verbatim by :func:`encode`.
    """

    @property
    def code(self):
        return self.encoded_json

    def __eq__(self, other):
        return isinstance(other, JsonExpr) and other.code == self.code

    def __hash__(self):
        return hash(self.code)

    def __repr__(self):
        return '<%s %r>' % (type(self).__name__, self.code)


def _quote_expressions(value):
    # Used when raw code is not permitted: expressions become plain strings.
    if isinstance(value, JsonExpr):
        return value.code
    if isinstance(value, dict):
        return {k: _quote_expressions(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_quote_expressions(v) for v in value]
    return value


def encode(value, pretty=False, allow_expressions=True):
    """
    Serialize *value* to a JSON string.

    :keyword bool pretty: Indent nested structures by four spaces.
    :keyword bool allow_expressions: If true (the default), :class:`JsonExpr`
       values are written as raw code. Otherwise they are written as
       ordinary JSON strings.
    """
    if not allow_expressions:
        value = _quote_expressions(value)
    if pretty:
        return simplejson.dumps(value, indent=4 * ' ')
    return simplejson.dumps(value, separators=(',', ':'))
