# -*- coding: utf-8 -*-
"""
I18N related adapters.


"""

from pyramid.i18n import default_locale_negotiator
from pyramid.interfaces import ILocaleNegotiator

from zope import component
from zope import interface

from zope.i18n import interpolate

from zope.i18n.interfaces import ITranslationDomain

from .interfaces import ITranslationCatalog

__all__ = [
    'TranslationDomainCatalog',
    'accept_language_locale_negotiator',
    'language_from_locale',
]

logger = __import__('logging').getLogger(__name__)


def language_from_locale(locale_name):
    """
    The language part of a locale name: ``fr_FR`` and ``fr-FR``
    are both ``fr``.
    """
    if not locale_name:
        return None
    return locale_name.replace('-', '_').split('_')[0].lower()


@component.adapter(ITranslationDomain)
@interface.implementer(ITranslationCatalog)
class TranslationDomainCatalog:
    """
    A catalog over a :mod:`zope.i18n` translation domain.

    A language is available if the domain has at least one message
    catalog for it. Each instance keeps its own locale, so create
    one per request; the domain itself is shared.
    """

    def __init__(self, domain):
        self.domain = domain
        self._locale_name = None

    def getLanguages(self):
        domain = self.domain
        if domain is None:
            return ()
        catalogs_info = getattr(domain, 'getCatalogsInfo', None)
        if catalogs_info is not None:
            # language -> [catalog names]
            return tuple(lang for lang, names in catalogs_info().items() if names)
        # SimpleTranslationDomain keeps {(language, msgid): text}
        messages = getattr(domain, 'messages', None) or {}
        return tuple(sorted({lang for lang, _ in messages}))

    def isAvailable(self, language):
        return bool(language) and language in self.getLanguages()

    def setLocale(self, locale_name):
        self._locale_name = locale_name

    def getLocale(self):
        return self._locale_name

    def translate(self, msgid, mapping=None, default=None, language=None):
        if self.domain is None:
            text = msgid if default is None else default
            return interpolate(text, mapping)
        target_language = language_from_locale(language or self._locale_name)
        return self.domain.translate(msgid,
                                     mapping=mapping,
                                     default=default,
                                     target_language=target_language)

    def __repr__(self):  # pragma: no cover
        return '<%s %r %s>' % (type(self).__name__,
                               getattr(self.domain, 'domain', None),
                               self._locale_name)


@interface.provider(ILocaleNegotiator)
def accept_language_locale_negotiator(request):
    """
    A pyramid locale negotiator that honors the explicit choices
    pyramid's default negotiator knows about (the ``_LOCALE_``
    request attribute, parameter and cookie) and otherwise picks
    the best range of the ``Accept-Language`` header.

    Returns None if neither has an answer, letting pyramid use the
    ``default_locale_name`` setting.
    """
    locale_name = default_locale_negotiator(request)
    if locale_name:
        return locale_name

    parsed = getattr(request.accept_language, 'parsed', None) or ()
    # Highest quality first; equal qualities keep header order
    ranges = sorted(((q, -i, language_range)
                     for i, (language_range, q) in enumerate(parsed)
                     if q > 0 and language_range != '*'),
                    reverse=True)
    if not ranges:
        return None
    return ranges[0][2]
