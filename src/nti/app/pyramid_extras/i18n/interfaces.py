#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
I18N related interfaces.

.. $Id$
"""

from pyramid.httpexceptions import HTTPNotFound

from pyramid.interfaces import IRequest

from zope import interface

__docformat__ = "restructuredtext en"

logger = __import__('logging').getLogger(__name__)


class UnsupportedLanguageError(HTTPNotFound):
    """
    The language in the URL has no translations and is not the
    default language. Rendered by Pyramid as a 404.
    """

    def __init__(self, language, **kwargs):
        self.language = language
        super().__init__('Translation language is not available: %s' % (language,),
                         **kwargs)


class ILanguagePrefixedRequest(IRequest):
    """
    A marker for requests for the bare application root whose path
    was rewritten to start with the negotiated language.
    """


class ITranslationCatalog(interface.Interface):
    """
    The messages of the application, per language.
    """

    def isAvailable(language):
        """
        Are there translations for *language* (a language code such
        as ``fr``)?
        """

    def getLanguages():
        "The language codes with translations."

    def setLocale(locale_name):
        "Translate into the language of *locale_name* from now on."

    def getLocale():
        "The locale name set with :meth:`setLocale`, or None."

    def translate(msgid, mapping=None, default=None, language=None):
        """
        Translate *msgid* into *language*, or the language of the
        current locale if that is not given.
        """


class ILanguageState(interface.Interface):
    """
    The language of a single request.

    Created when a request first needs it and discarded with the
    request. The negotiation subscribers are the only writers.
    """

    catalog = interface.Attribute("The :class:`ITranslationCatalog`.")

    default_locale_name = interface.Attribute(
        "The locale used when nothing better is available.")

    locale_name = interface.Attribute("The active locale name.")

    language = interface.Attribute(
        "The committed language code, or None before routing finishes.")

    requested_language = interface.Attribute(
        "The language put into a rewritten path, if any.")

    translator = interface.Attribute(
        "The catalog used to translate @ segments of language routes. "
        "Until one is installed the catalog itself is used.")

    global_params = interface.Attribute(
        "A mapping of route parameters added to every generated URL.")

    def setLocale(locale_name):
        "Make *locale_name* active here and in the catalog."

    def translateSegment(msgid, language=None):
        """
        Translate the route segment *msgid* with the installed
        :attr:`translator` (or the catalog) into *language*. Segments
        without a translation are returned unchanged.
        """
