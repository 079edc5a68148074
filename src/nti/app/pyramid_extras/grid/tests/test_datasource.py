#!/usr/bin/env python
# -*- coding: utf-8 -*-

# pylint: disable=W0212,R0904

import unittest

import simplejson

from hamcrest import assert_that
from hamcrest import contains_exactly
from hamcrest import has_entries
from hamcrest import has_length
from hamcrest import is_
from hamcrest import none

from nti.testing.matchers import verifiably_provides

from nti.app.pyramid_extras.grid.datasource import ArrayDataSource

from nti.app.pyramid_extras.grid.grid import Grid

from nti.app.pyramid_extras.grid.interfaces import IGridDataSource

ROWS = [
    {'id': 10, 'name': 'Ann', 'age': 31},
    {'id': 11, 'name': 'Bob', 'age': 25},
    {'id': 12, 'name': 'Cid', 'age': None},
    {'id': 13, 'name': 'Dee', 'age': 47},
    {'id': 14, 'name': 'Eve', 'age': 19},
]


class TestArrayDataSource(unittest.TestCase):

    def setUp(self):
        self.source = ArrayDataSource(ROWS)

    def test_provides(self):
        assert_that(self.source, verifiably_provides(IGridDataSource))

    def test_columns_from_first_row(self):
        columns = list(self.source.columns)
        assert_that([c['name'] for c in columns], is_(['id', 'name', 'age']))
        assert_that(columns[1], has_entries(index='name', sortable=True))

    def test_empty(self):
        source = ArrayDataSource()
        assert_that(source.columns, has_length(0))
        assert_that(source.getResult({}),
                    has_entries(page=1, total=0, records=0, rows=[]))

    def test_first_page(self):
        self.source.setResultsPerPage(2)
        result = self.source.getResult({})
        assert_that(result, has_entries(page=1, total=3, records=5))
        assert_that(result['rows'],
                    contains_exactly({'id': 1, 'cell': [10, 'Ann', 31]},
                                     {'id': 2, 'cell': [11, 'Bob', 25]}))

    def test_request_params(self):
        result = self.source.getResult({'page': '2', 'rows': '2',
                                        'sidx': 'age', 'sord': 'DESC'})
        assert_that(result, has_entries(page=2, total=3, records=5))
        # 47, 31 | 25, 19 | None
        assert_that([r['cell'][1] for r in result['rows']], is_(['Bob', 'Eve']))

    def test_none_sorts_last(self):
        result = self.source.getResult({'rows': '10', 'sidx': 'age'})
        assert_that([r['cell'][2] for r in result['rows']],
                    is_([19, 25, 31, 47, None]))

    def test_page_past_end(self):
        result = self.source.getResult({'page': '9', 'rows': '2'})
        assert_that(result['page'], is_(3))
        assert_that(result['rows'], has_length(1))

    def test_bad_params(self):
        result = self.source.getResult({'page': 'x', 'rows': ''})
        assert_that(result, has_entries(page=1, total=1))
        assert_that(result['rows'], has_length(5))

    def test_default_sorting(self):
        assert_that(self.source.getDefaultSorting(), is_(none()))
        self.source.setDefaultSorting('name', 'desc')
        result = self.source.getResult({})
        assert_that(result['rows'][0]['cell'][1], is_('Eve'))

    def test_identifier_column(self):
        self.source.setIdentifierColumn('id')
        result = self.source.getResult({'rows': '1', 'page': '2'})
        assert_that(result['rows'][0]['id'], is_(11))

    def test_column_data(self):
        grid = Grid(self.source)
        grid.addColumn('name', lambda row: row['name'].upper(), 'Name', 'name')
        grid.addColumn('years', 'age', 'Years', 'age')
        grid.addColumn('email', None, 'E-mail')
        result = self.source.getResult({'rows': '1'})
        assert_that(result['rows'][0]['cell'], is_([10, 'ANN', 31, 31, None]))

    def test_json(self):
        result = simplejson.loads(self.source.getJson({'rows': '1'}))
        assert_that(result, has_entries(page=1, total=5, records=5))
