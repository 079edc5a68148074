#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
The column registry of a grid data source.
"""

__docformat__ = "restructuredtext en"

from zope import interface

from nti.app.pyramid_extras.grid.interfaces import IGridColumns

__all__ = [
    'GridColumns',
]

logger = __import__('logging').getLogger(__name__)


@interface.implementer(IGridColumns)
class GridColumns:
    """
    Columns kept in insertion order, displayed in this order:

    1. columns named in :attr:`showColumns`, in the order of that list;
    2. every other column, in insertion order, except that a column
       with an explicit ``position`` is placed at that index (clamped
       to the end of the list). Lower positions are placed first.
    """

    def __init__(self):
        self._columns = {}
        self.showColumns = []

    def add(self, name, label=None, index=None, position=None, data=None):
        column = {
            'name': name,
            'label': name if label is None else label,
        }
        if index is not None:
            column['index'] = index
        column['sortable'] = index is not None
        if position is not None:
            column['position'] = position
        column['data'] = data
        # A duplicate name replaces the earlier column
        self._columns[name] = column
        return column

    def setColumnAttribute(self, name, key, value):
        self._columns[name][key] = value

    def isVisible(self, name):
        return not self.showColumns or name in self.showColumns

    def _positioned(self):
        columns = list(self._columns.values())
        ordered = [c for c in columns if c.get('position') is None]
        slotted = sorted((c for c in columns if c.get('position') is not None),
                         key=lambda c: c['position'])
        # Equal positions keep their insertion order
        taken = {}
        for column in slotted:
            position = max(int(column['position']), 0)
            slot = min(position + taken.get(position, 0), len(ordered))
            taken[position] = taken.get(position, 0) + 1
            ordered.insert(slot, column)
        return ordered

    def __contains__(self, name):
        return name in self._columns

    def __getitem__(self, name):
        return self._columns[name]

    def __iter__(self):
        ordered = self._positioned()
        show = list(self.showColumns or ())
        if show:
            shown = sorted((c for c in ordered if c['name'] in show),
                           key=lambda c: show.index(c['name']))
            ordered = shown + [c for c in ordered if c['name'] not in show]
        return iter(ordered)

    def __len__(self):
        return len(self._columns)

    def __repr__(self):  # pragma: no cover
        return '<%s %r>' % (type(self).__name__, [c['name'] for c in self])
