#!/usr/bin/env python
# -*- coding: utf-8 -*-

from zope.i18n.translationdomain import TranslationDomain


class FakeMessageCatalog:
    """
    Just enough of a :class:`zope.i18n.interfaces.IMessageCatalog` to
    register a language with a translation domain.
    """

    def __init__(self, language, domain='messages', messages=None):
        self.language = language
        self.domain = domain
        self.messages = messages or {}

    def getIdentifier(self):
        return '%s-%s' % (self.domain, self.language)

    def queryMessage(self, msgid, default=None):
        return self.messages.get(msgid, default)

    def getMessage(self, msgid):
        return self.messages[msgid]


def make_domain(*languages, **kwargs):
    """
    A :class:`TranslationDomain` with a catalog for each of *languages*.

    :keyword messages: A mapping of language to ``{msgid: text}``.
       Catalogs are empty by default.
    """
    name = kwargs.pop('name', 'messages')
    messages = kwargs.pop('messages', None) or {}
    domain = TranslationDomain(name)
    for language in languages:
        domain.addCatalog(FakeMessageCatalog(language, name, messages.get(language)))
    return domain
