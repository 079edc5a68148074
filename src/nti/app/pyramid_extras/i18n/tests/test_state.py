#!/usr/bin/env python
# -*- coding: utf-8 -*-

import unittest

from hamcrest import assert_that
from hamcrest import has_entry
from hamcrest import instance_of
from hamcrest import is_
from hamcrest import none
from hamcrest import same_instance

from nti.testing.matchers import verifiably_provides

from pyramid import testing

from pyramid.request import Request

from zope import component
from zope import interface

from zope.i18n.interfaces import ITranslationDomain

from ..adapters import TranslationDomainCatalog
from ..interfaces import ILanguageState
from ..interfaces import ITranslationCatalog
from ..state import LANGUAGE_STATE_KEY
from ..state import TRANSLATION_DOMAIN_SETTING
from ..state import LanguageState
from ..state import get_language_state

from ...tests import make_domain


class TestLanguageState(unittest.TestCase):

    def setUp(self):
        self.catalog = TranslationDomainCatalog(make_domain('fr'))
        self.state = LanguageState(self.catalog, 'en_US')

    def test_provides(self):
        assert_that(self.state, verifiably_provides(ILanguageState))

    def test_defaults(self):
        assert_that(self.state.locale_name, is_('en_US'))
        assert_that(self.state.default_language, is_('en'))
        assert_that(self.state.current_language, is_('en'))
        assert_that(self.state.language, is_(none()))
        assert_that(self.state.translator, is_(none()))
        assert_that(self.state.global_params, is_({}))

    def test_set_locale_propagates(self):
        self.state.setLocale('fr_CA')
        assert_that(self.state.locale_name, is_('fr_CA'))
        assert_that(self.state.current_language, is_('fr'))
        assert_that(self.catalog.getLocale(), is_('fr_CA'))

        self.state.resetToDefault()
        assert_that(self.catalog.getLocale(), is_('en_US'))

    def test_locale_object(self):
        locale = LanguageState(self.catalog, 'en').locale
        assert_that(locale.id.language, is_('en'))

        self.state.setLocale('fr-FR')
        locale = self.state.locale
        assert_that(locale.id.language, is_('fr'))
        assert_that(locale.id.territory, is_('FR'))

    def test_locale_object_fallback(self):
        self.state.setLocale('xx_YY')
        assert_that(self.state.locale.id.language, is_(none()))

    def test_translate_segment(self):
        domain = make_domain('fr', messages={'fr': {'news': 'actualites'}})
        state = LanguageState(TranslationDomainCatalog(domain))
        assert_that(state.translateSegment('news', 'fr'), is_('actualites'))
        assert_that(state.translateSegment('news', 'de'), is_('news'))
        assert_that(state.translateSegment('news'), is_('news'))
        state.setLocale('fr_BE')
        assert_that(state.translateSegment('news'), is_('actualites'))

    def test_installed_translator_used_for_segments(self):
        state = LanguageState(TranslationDomainCatalog(None))
        assert_that(state.translateSegment('news'), is_('news'))
        domain = make_domain('fr', messages={'fr': {'news': 'actualites'}})
        state.translator = TranslationDomainCatalog(domain)
        assert_that(state.translateSegment('news', 'fr'), is_('actualites'))

    def test_global_params_per_instance(self):
        other = LanguageState(self.catalog)
        self.state.global_params['language'] = 'fr'
        assert_that(other.global_params, is_({}))


class TestGetLanguageState(unittest.TestCase):

    def setUp(self):
        self.config = testing.setUp(settings={'default_locale_name': 'nl'})
        self.domain = make_domain('fr', 'nl')
        self.config.registry.registerUtility(self.domain, ITranslationDomain,
                                             name='messages')
        self.request = Request.blank('/')
        self.request.registry = self.config.registry

    def tearDown(self):
        testing.tearDown()

    def test_created_once(self):
        state = get_language_state(self.request)
        assert_that(state, instance_of(LanguageState))
        assert_that(get_language_state(self.request), is_(same_instance(state)))
        assert_that(self.request.environ, has_entry(LANGUAGE_STATE_KEY, state))

    def test_configured_from_settings(self):
        state = get_language_state(self.request)
        assert_that(state.default_locale_name, is_('nl'))
        assert_that(state.locale_name, is_('nl'))
        assert_that(state.catalog, instance_of(TranslationDomainCatalog))
        assert_that(state.catalog.domain, is_(same_instance(self.domain)))

    def test_per_request(self):
        other = Request.blank('/')
        other.registry = self.config.registry
        state = get_language_state(self.request)
        assert_that(get_language_state(other), instance_of(LanguageState))
        assert_that(get_language_state(other) is state, is_(False))
        assert_that(get_language_state(other).catalog is state.catalog, is_(False))

    def test_named_domain(self):
        self.config.registry.settings[TRANSLATION_DOMAIN_SETTING] = 'site'
        domain = make_domain('de', name='site')
        self.config.registry.registerUtility(domain, ITranslationDomain, name='site')
        state = get_language_state(self.request)
        assert_that(state.catalog.getLanguages(), is_(('de',)))

    def test_missing_domain(self):
        self.config.registry.settings[TRANSLATION_DOMAIN_SETTING] = 'missing'
        state = get_language_state(self.request)
        assert_that(state.catalog.domain, is_(none()))
        assert_that(state.catalog.getLanguages(), is_(()))

    def test_registered_catalog_adapter(self):
        @component.adapter(ITranslationDomain)
        @interface.implementer(ITranslationCatalog)
        class Catalog(TranslationDomainCatalog):
            pass
        self.config.registry.registerAdapter(Catalog, (ITranslationDomain,),
                                             ITranslationCatalog)
        state = get_language_state(self.request)
        assert_that(state.catalog, instance_of(Catalog))

    def test_pyramid_setting_name(self):
        self.config.registry.settings.pop('default_locale_name')
        self.config.registry.settings['pyramid.default_locale_name'] = 'fr'
        assert_that(get_language_state(self.request).default_locale_name, is_('fr'))


class TestGetLanguageStateWithoutRegistry(unittest.TestCase):

    def test_global_site_manager(self):
        request = Request.blank('/')
        state = get_language_state(request)
        assert_that(state.default_locale_name, is_('en'))
        assert_that(state.catalog.getLanguages(), is_(()))
