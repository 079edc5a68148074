#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
A grid data source over an in-memory sequence of rows.

The client grid posts ``page``, ``rows``, ``sidx`` and ``sord``
parameters to the grid URL; a view answers with
:meth:`ArrayDataSource.getJson`::

    @view_config(route_name='users.grid', request_method='POST',
                 renderer='string')
    def users_grid(request):
        return make_source(request).getJson(request.POST)
"""

__docformat__ = "restructuredtext en"

import math

from zope import interface

from nti.app.pyramid_extras.grid.columns import GridColumns

from nti.app.pyramid_extras.grid.interfaces import IGridDataSource

from nti.app.pyramid_extras.jsonexpr import encode

__all__ = [
    'ArrayDataSource',
]

logger = __import__('logging').getLogger(__name__)


def _as_int(value, default):
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


@interface.implementer(IGridDataSource)
class ArrayDataSource:
    """
    Serves a list of mappings.

    The keys of the first row become sortable columns; the grid can
    relabel or extend them with :meth:`.Grid.addColumn`.
    """

    def __init__(self, rows=(), identifier_column=None):
        self.rows = list(rows)
        self.columns = GridColumns()
        self._identifier_column = identifier_column
        self._default_sorting = None
        self._results_per_page = 50
        if self.rows:
            for key in self.rows[0]:
                self.columns.add(key, index=key)

    def setIdentifierColumn(self, name):
        """
        Use the value of the row key *name* as the row id. Without one,
        rows are numbered from 1.
        """
        self._identifier_column = name
        return self

    def setDefaultSorting(self, index, direction='asc'):
        self._default_sorting = {'index': index, 'direction': direction}
        return self

    def getDefaultSorting(self):
        return self._default_sorting

    def setResultsPerPage(self, amount):
        self._results_per_page = amount
        return self

    def getResultsPerPage(self):
        return self._results_per_page

    def _cell(self, column, row):
        data = column.get('data')
        if callable(data):
            return data(row)
        if isinstance(data, str):
            return row.get(data)
        return row.get(column['name'])

    def getResult(self, params):
        """
        Return the page of rows described by the jqGrid request
        *params*, as a mapping in jqGrid's default JSON reader format.
        """
        default = self._default_sorting or {}
        page = max(_as_int(params.get('page'), 1), 1)
        per_page = _as_int(params.get('rows'), self._results_per_page)
        sidx = params.get('sidx') or default.get('index')
        sord = (params.get('sord') or default.get('direction') or 'asc').lower()

        rows = list(self.rows)
        if sidx:
            # Rows without a value sort last in either direction
            missing = [row for row in rows if row.get(sidx) is None]
            rows = [row for row in rows if row.get(sidx) is not None]
            rows.sort(key=lambda row: row.get(sidx), reverse=sord == 'desc')
            rows.extend(missing)

        records = len(rows)
        total = int(math.ceil(records / float(per_page))) if per_page > 0 else 1
        page = min(page, total) if total else 1
        start = (page - 1) * per_page if per_page > 0 else 0
        window = rows[start:start + per_page] if per_page > 0 else rows
        logger.debug("Grid data page %s of %s (%s records, sorted by %s %s)",
                     page, total, records, sidx, sord)

        columns = list(self.columns)
        result_rows = []
        for offset, row in enumerate(window):
            if self._identifier_column:
                row_id = row.get(self._identifier_column)
            else:
                row_id = start + offset + 1
            result_rows.append({
                'id': row_id,
                'cell': [self._cell(column, row) for column in columns],
            })

        return {
            'page': page,
            'total': total,
            'records': records,
            'rows': result_rows,
        }

    def getJson(self, params):
        return encode(self.getResult(params))
