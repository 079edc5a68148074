#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Languages in URLs.

Every page of a multilingual application lives under a language
prefix: ``/en/news/1``, ``/fr/news/1``. Two subscribers keep the
request's language consistent with that prefix.

Negotiation
===========

When :class:`pyramid.interfaces.INewRequest` fires, before routing,
a request for the bare application root (``/``) is given a prefix. The
language is the one pyramid's locale negotiation prefers (see
:func:`.accept_language_locale_negotiator`, which adds the
``Accept-Language`` header to pyramid's explicit ``_LOCALE_``
parameter and cookie). If the translation catalog has no messages in
that language, the ``default_locale_name`` is used. The path becomes
``/<language>/`` and routing proceeds as if the client had asked for
it.

Commit
======

When :class:`pyramid.interfaces.IContextFound` fires, after routing,
the ``language`` in the matched route becomes the language of the
request: the locale, the catalog and the pyramid localizer (through
``request._LOCALE_``) are switched to it, and it becomes a global route
parameter so URLs generated during the request keep it (see
:mod:`.routing`). A language that has no translations and is not the
default is a 404 (:class:`.UnsupportedLanguageError`).

State
=====

Everything the subscribers know and decide is kept in a
:class:`.ILanguageState` stored with the request
(:func:`.get_language_state`), never in module globals.

.. important::

   Use ``config.include('nti.app.pyramid_extras')``, or include
   this package's ``configure.zcml`` if your registry is the global
   site manager, to register the subscribers.
"""
