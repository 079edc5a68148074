#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Routes with a leading language segment.

Register routes with the ``add_language_route`` directive (installed
by ``config.include('nti.app.pyramid_extras')``)::

    config.add_language_route('home', '/')
    config.add_language_route('news.show', '/@news/{article}')

Each pattern gets a ``/{language}`` prefix, and URLs generated for the
route with :meth:`pyramid.request.Request.route_url` carry the
language of the current request unless one is given explicitly.

A segment written as ``@msgid`` is translated: it matches, and is
generated as, the translation of ``msgid`` in the language of the URL
(``/fr/actualites/1``, ``/en/news/1``). Translations come from the
request's :attr:`.ILanguageState.translator`.

The application root route (``'/'``) also answers the bare language
(``/fr``) with a redirect to ``/fr/``.
"""

__docformat__ = "restructuredtext en"

import re

from pyramid.httpexceptions import HTTPMovedPermanently

from pyramid.settings import aslist

from .state import get_language_state

__all__ = [
    'TranslatedSegmentsPredicate',
    'add_language_route',
    'global_params_pregenerator',
    'language_pattern',
    'translated_segments',
]

logger = __import__('logging').getLogger(__name__)

#: Setting listing the language codes routes accept.
LANGUAGES_SETTING = 'nti.app.pyramid_extras.languages'

#: Any two or three letter language code.
DEFAULT_LANGUAGE_REGEX = '[a-z]{2,3}'

#: The route predicate matching translated segments.
TRANSLATED_SEGMENTS_PREDICATE = 'translated_segments'

SEGMENT_PLACEHOLDER = '_segment%d'


def global_params_pregenerator(request, elements, kw):
    """
    A route pregenerator adding the global route parameters of the
    request's :class:`.ILanguageState` to *kw*. Explicit arguments win.
    """
    for name, value in get_language_state(request).global_params.items():
        kw.setdefault(name, value)
    return elements, kw


def translated_segments_pregenerator(segments, pregenerator=global_params_pregenerator):
    """
    Wrap *pregenerator* so that the placeholders in *segments* (a
    mapping of placeholder to message id) are filled with their
    translation into the language of the generated URL.
    """
    def pregenerate(request, elements, kw):
        elements, kw = pregenerator(request, elements, kw)
        state = get_language_state(request)
        for placeholder, msgid in segments.items():
            if placeholder not in kw:
                kw[placeholder] = state.translateSegment(msgid, kw.get('language'))
        return elements, kw
    return pregenerate


class TranslatedSegmentsPredicate:
    """
    Route predicate: every translated segment in the URL must be the
    translation of its message id into the matched ``language``.
    """

    def __init__(self, val, config):
        self.segments = dict(val)

    def text(self):
        return '%s = %s' % (TRANSLATED_SEGMENTS_PREDICATE,
                            sorted(self.segments.items()))

    phash = text

    def __call__(self, info, request):
        match = info['match']
        language = match.get('language')
        state = get_language_state(request)
        for placeholder, msgid in self.segments.items():
            if match.get(placeholder) != state.translateSegment(msgid, language):
                return False
        return True


def _language_regex(languages):
    if languages:
        return '|'.join(re.escape(language) for language in languages)
    return DEFAULT_LANGUAGE_REGEX


def language_pattern(pattern, languages=()):
    """
    Prefix the route *pattern* with a ``language`` placeholder that
    matches only *languages*, or any language code if that is empty.
    """
    return '/{language:%s}/%s' % (_language_regex(languages), pattern.lstrip('/'))


def translated_segments(pattern):
    """
    Replace each ``@msgid`` segment of *pattern* by a placeholder.

    Returns the new pattern and a mapping of placeholder to message id.
    """
    segments = {}
    parts = pattern.split('/')
    for i, part in enumerate(parts):
        if len(part) > 1 and part.startswith('@') and '{' not in part:
            placeholder = SEGMENT_PLACEHOLDER % len(segments)
            segments[placeholder] = part[1:]
            parts[i] = '{%s}' % placeholder
    return '/'.join(parts), segments


def _language_root_redirect(route_name):
    def redirect(request):
        location = request.route_url(route_name,
                                     language=request.matchdict['language'],
                                     _query=request.GET)
        return HTTPMovedPermanently(location=location)
    return redirect


def add_language_route(config, name, pattern, **kwargs):
    """
    A configurator directive: like ``config.add_route``, with the
    pattern prefixed by :func:`language_pattern` and
    :func:`global_params_pregenerator` as the default pregenerator.

    ``@msgid`` segments are translated (see :func:`translated_segments`).
    For the root pattern a second route, ``<name>.bare``, redirects the
    language without a trailing slash to the root.
    """
    settings = config.get_settings() or {}
    languages = aslist(settings.get(LANGUAGES_SETTING, ''))
    pattern, segments = translated_segments(pattern)
    kwargs.setdefault('pregenerator', global_params_pregenerator)
    if segments:
        kwargs['pregenerator'] = translated_segments_pregenerator(segments,
                                                                  kwargs['pregenerator'])
        kwargs[TRANSLATED_SEGMENTS_PREDICATE] = segments
    logger.debug("Adding language route %s: %s", name, pattern)
    config.add_route(name, language_pattern(pattern, languages), **kwargs)

    if not pattern.strip('/'):
        bare_name = name + '.bare'
        config.add_route(bare_name, '/{language:%s}' % _language_regex(languages))
        config.add_view(_language_root_redirect(name), route_name=bare_name)
