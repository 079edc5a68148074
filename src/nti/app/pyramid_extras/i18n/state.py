#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
The per-request language state.

Nothing here is global: each request gets its own
:class:`LanguageState`, kept in the WSGI environment, and with it its
own :class:`.ITranslationCatalog`.
"""

__docformat__ = "restructuredtext en"

from zope import component
from zope import interface

from zope.i18n.interfaces import ITranslationDomain

from zope.i18n.locales import LoadLocaleError
from zope.i18n.locales import locales

from .adapters import TranslationDomainCatalog
from .adapters import language_from_locale

from .interfaces import ILanguageState
from .interfaces import ITranslationCatalog

__all__ = [
    'LanguageState',
    'get_language_state',
    'language_state_from_request',
]

logger = __import__('logging').getLogger(__name__)

#: The environ key holding the state of the current request.
LANGUAGE_STATE_KEY = 'nti.app.pyramid_extras.language_state'

#: Setting naming the zope.i18n translation domain utility.
TRANSLATION_DOMAIN_SETTING = 'nti.app.pyramid_extras.translation_domain'
DEFAULT_TRANSLATION_DOMAIN = 'messages'


def _get_locale(*parts):
    parts = (list(parts) + [None, None, None])[:3]
    return locales.getLocale(*parts)


@interface.implementer(ILanguageState)
class LanguageState:

    language = None
    requested_language = None
    translator = None

    def __init__(self, catalog, default_locale_name='en', locale_name=None):
        self.catalog = catalog
        self.default_locale_name = default_locale_name
        self.locale_name = locale_name or default_locale_name
        self.global_params = {}

    @property
    def default_language(self):
        return language_from_locale(self.default_locale_name)

    @property
    def current_language(self):
        return language_from_locale(self.locale_name)

    def setLocale(self, locale_name):
        self.locale_name = locale_name
        self.catalog.setLocale(locale_name)

    def resetToDefault(self):
        self.setLocale(self.default_locale_name)

    def _translator(self):
        return self.translator if self.translator is not None else self.catalog

    def translate(self, msgid, mapping=None, default=None):
        return self._translator().translate(msgid, mapping=mapping, default=default)

    def translateSegment(self, msgid, language=None):
        return self._translator().translate(msgid, default=msgid, language=language)

    @property
    def locale(self):
        """
        The :mod:`zope.i18n` locale object for :attr:`locale_name`,
        falling back to the language alone, then to the root locale.
        """
        parts = self.locale_name.replace('-', '_').split('_')
        try:
            return _get_locale(*parts)
        except LoadLocaleError:
            logger.debug("No locale data for %s", self.locale_name)
        try:
            return _get_locale(parts[0])
        except LoadLocaleError:
            return _get_locale()

    def __repr__(self):  # pragma: no cover
        return '<%s %s (default %s)>' % (type(self).__name__,
                                         self.locale_name,
                                         self.default_locale_name)


def _registry(request):
    registry = getattr(request, 'registry', None)
    if registry is None:
        registry = component.getSiteManager()
    return registry


def language_state_from_request(request):
    """
    Create a new :class:`LanguageState` configured from the settings
    of the request's registry.
    """
    registry = _registry(request)
    settings = getattr(registry, 'settings', None) or {}
    default_locale_name = settings.get('default_locale_name') \
        or settings.get('pyramid.default_locale_name') \
        or 'en'
    domain_name = settings.get(TRANSLATION_DOMAIN_SETTING, DEFAULT_TRANSLATION_DOMAIN)

    domain = registry.queryUtility(ITranslationDomain, name=domain_name)
    catalog = None
    if domain is None:
        logger.warning("No translation domain %r registered; only %s is available",
                       domain_name, default_locale_name)
    else:
        catalog = registry.queryAdapter(domain, ITranslationCatalog)
    if catalog is None:
        catalog = TranslationDomainCatalog(domain)
    return LanguageState(catalog, default_locale_name)


def get_language_state(request):
    """
    The :class:`.ILanguageState` of *request*, created on first use.
    """
    environ = request.environ
    state = environ.get(LANGUAGE_STATE_KEY)
    if state is None:
        state = environ[LANGUAGE_STATE_KEY] = language_state_from_request(request)
    return state
