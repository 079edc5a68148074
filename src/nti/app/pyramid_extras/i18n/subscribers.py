# -*- coding: utf-8 -*-
"""
I18N related subscribers.

"""

from pyramid.i18n import negotiate_locale_name

from pyramid.interfaces import IContextFound
from pyramid.interfaces import INewRequest

from zope import component
from zope import interface

from .adapters import language_from_locale

from .interfaces import ILanguagePrefixedRequest
from .interfaces import UnsupportedLanguageError

from .state import get_language_state

__docformat__ = "restructuredtext en"

__all__ = [
    'commit_language_on_context_found',
    'negotiate_language_on_new_request',
]

logger = __import__('logging').getLogger(__name__)


@component.adapter(INewRequest)
def negotiate_language_on_new_request(event):
    """
    Before routing: if the request is for the bare application root,
    put the preferred language in front of the path.

    The preferred language comes from pyramid's locale negotiation.
    If the catalog has no translations for it we use the default
    locale instead. The request is marked with
    :class:`.ILanguagePrefixedRequest`.
    """
    request = event.request
    if request.path_info not in ('', '/'):
        return

    state = get_language_state(request)
    catalog = state.catalog

    locale_name = negotiate_locale_name(request)
    language = language_from_locale(locale_name)
    if catalog.isAvailable(language):
        state.setLocale(locale_name)
    else:
        logger.debug("Preferred language %r is not available, using %s",
                     language, state.default_locale_name)
        state.resetToDefault()
        language = state.default_language

    request.path_info = '/%s/' % (language,)
    state.requested_language = language
    # For the benefit of pyramid's localizer
    request._LOCALE_ = language
    # Route segments are translated from here on
    state.translator = catalog
    interface.alsoProvides(request, ILanguagePrefixedRequest)


@component.adapter(IContextFound)
def commit_language_on_context_found(event):
    """
    After routing: make the ``language`` route parameter the language
    of the request.

    Without one, the language chosen by
    :func:`negotiate_language_on_new_request` or else the default is
    used. The active locale, the catalog and the ``language`` global
    route parameter are all set to it.

    :raises UnsupportedLanguageError: If the language has no
       translations and is not the default language.
    """
    request = event.request
    state = get_language_state(request)

    matchdict = getattr(request, 'matchdict', None) or {}
    language = matchdict.get('language') or state.requested_language
    default_language = state.default_language
    if not language:
        language = default_language

    if not state.catalog.isAvailable(language) and language != default_language:
        logger.info("Unsupported language %r requested at %s", language, request.path)
        raise UnsupportedLanguageError(language)

    state.setLocale(language)
    state.language = language
    request._LOCALE_ = language
    state.global_params['language'] = language
