#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Pyramid helpers: jqGrid tables and language prefixed URLs.

Include this package in your configuration::

    config.include('nti.app.pyramid_extras')

Settings:

``default_locale_name``
    Pyramid's own setting; the language used when the preferred one
    has no translations. Defaults to ``en``.
``nti.app.pyramid_extras.translation_domain``
    The name of the :class:`zope.i18n.interfaces.ITranslationDomain`
    utility holding the application messages. Defaults to ``messages``.
``nti.app.pyramid_extras.languages``
    Whitespace separated language codes accepted in URLs. By default
    any two or three letter code matches (and is then checked against
    the translation domain).
``nti.app.pyramid_extras.negotiate_accept_language``
    Install :func:`.accept_language_locale_negotiator`. Defaults to true.
"""

__docformat__ = "restructuredtext en"

from pyramid.interfaces import IContextFound
from pyramid.interfaces import INewRequest

from pyramid.settings import asbool

from nti.app.pyramid_extras.i18n.adapters import accept_language_locale_negotiator

from nti.app.pyramid_extras.i18n.routing import TRANSLATED_SEGMENTS_PREDICATE
from nti.app.pyramid_extras.i18n.routing import TranslatedSegmentsPredicate
from nti.app.pyramid_extras.i18n.routing import add_language_route

from nti.app.pyramid_extras.i18n.state import get_language_state

from nti.app.pyramid_extras.i18n.subscribers import commit_language_on_context_found
from nti.app.pyramid_extras.i18n.subscribers import negotiate_language_on_new_request

logger = __import__('logging').getLogger(__name__)

NEGOTIATE_ACCEPT_LANGUAGE_SETTING = 'nti.app.pyramid_extras.negotiate_accept_language'


def includeme(config):
    settings = config.get_settings() or {}
    config.add_subscriber(negotiate_language_on_new_request, INewRequest)
    config.add_subscriber(commit_language_on_context_found, IContextFound)
    config.add_route_predicate(TRANSLATED_SEGMENTS_PREDICATE, TranslatedSegmentsPredicate)
    config.add_directive('add_language_route', add_language_route)
    config.add_request_method(get_language_state, 'language_state', reify=True)
    if asbool(settings.get(NEGOTIATE_ACCEPT_LANGUAGE_SETTING, True)):
        logger.debug("Negotiating locales with the Accept-Language header")
        config.set_locale_negotiator(accept_language_locale_negotiator)
