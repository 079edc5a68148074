#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Server side builder for jqGrid.

A :class:`Grid` collects the columns, paging and client side event
configuration of a grid and renders two fragments for a page: the
HTML elements the grid attaches to (:meth:`Grid.getHtml`) and the
script that constructs it (:meth:`Grid.getJavascript`). The rows
themselves are fetched by the client with an AJAX POST to the grid
URL; see :mod:`nti.app.pyramid_extras.grid.datasource`.

In a template::

    <div tal:replace="structure grid/getHtml" />
    <script tal:content="structure grid/getJavascript"></script>
"""

__docformat__ = "restructuredtext en"

import random

from collections import namedtuple

from html import escape

from pyramid.threadlocal import get_current_request

from zope import interface

from nti.app.pyramid_extras.grid.interfaces import IGrid
from nti.app.pyramid_extras.grid.interfaces import MissingDataSourceError

from nti.app.pyramid_extras.jsonexpr import encode

__all__ = [
    'Grid',
    'GridMethod',
    'UNLIMITED_ROWS',
]

logger = __import__('logging').getLogger(__name__)

#: jqGrid needs a numeric page size; this stands in for "all rows".
UNLIMITED_ROWS = 9999999

#: A grid method replayed on the client after construction.
GridMethod = namedtuple('GridMethod', ('name', 'options'))

_ROW_CLICK_TEMPLATE = """\
$('#%(id)s').jqGrid('setGridParam', {
    'onCellSelect' : function(rowId, iCol, cellContent, e) {
        // Only when the cell itself was clicked, not an element
        // inside it such as a checkbox.
        if ('gridcell' == $(e.target).attr('role')) {
            %(script)s
        }
    }
}).trigger('reloadGrid');"""

# jqGrid keeps the ui-jqgrid-sortable class (and its pointer cursor) on
# columns with sortable: false.
# See http://stackoverflow.com/questions/5639761/change-cursor-style-depending-on-sort-or-not
_FIX_CURSOR_TEMPLATE = """\
if ($("#%(id)s").length) {
    var cm = $("#%(id)s")[0].p.colModel;
    $.each($("#%(id)s")[0].grid.headers, function(index, value) {
        var cmi = cm[index], colName = cmi.name;
        if (!cmi.sortable && colName !== 'rn' && colName !== 'cb' && colName !== 'subgrid') {
            $('div.ui-jqgrid-sortable', value.el).css({ cursor: "default" });
        }
    });
}"""


def _default_url(request):
    request = request if request is not None else get_current_request()
    if request is None:
        return '/'
    return getattr(request, 'path_qs', None) or '/'


@interface.implementer(IGrid)
class Grid:
    """
    Builds a jqGrid for a data source.

    All setters return the grid so calls can be chained::

        grid = Grid(source, request)
        grid.addColumn('name', None, 'Name', 'name') \\
            .addColumn('email', None, 'E-mail') \\
            .setRowsPerPage(25)
    """

    _classes = None
    _rows_per_page = 50
    _width = 'auto'
    _height = '100%'
    _row_click_script = None

    def __init__(self, data_source=None, request=None, id=None):  # pylint: disable=redefined-builtin
        self._data_source = None
        self._attributes = {}
        self._methods = []
        self.setId(id or 'pgrid%d' % random.randint(0, 3000))
        if data_source is not None:
            self.setDataSource(data_source)
        self._url = _default_url(request)
        self.setDefaults()

    def setDefaults(self):
        return self.setAttribute('hidegrid', False) \
                   .setAttribute('autowidth', True)

    def setDataSource(self, data_source):
        self._data_source = data_source
        return self

    def getDataSource(self):
        return self._data_source

    def _require_data_source(self):
        if self._data_source is None:
            raise MissingDataSourceError()
        return self._data_source

    def setId(self, grid_id):
        """
        Set the DOM id of the grid. It must be unique on the page.
        The pager id follows as ``<id>-pager``.
        """
        self._id = grid_id
        self._pager_id = grid_id + '-pager'
        return self

    def getId(self):
        return self._id

    def setPagerId(self, pager_id):
        self._pager_id = pager_id
        return self

    def getPagerId(self):
        return self._pager_id

    def setClasses(self, classes):
        "Whitespace separated CSS classes of the table element."
        self._classes = classes
        return self

    def setUrl(self, url):
        "The URL the grid posts to for its rows."
        self._url = url
        return self

    def getUrl(self):
        return self._url

    def setWidth(self, width):
        self._width = width
        return self

    def setHeight(self, height):
        self._height = height
        return self

    def getAttribute(self, name):
        return self._attributes.get(name)

    def setAttribute(self, name, value):
        """
        Set a jqGrid option. Attributes are applied last and so
        override anything the grid computes.
        """
        self._attributes[name] = value
        return self

    def setCaption(self, caption):
        return self.setAttribute('caption', caption)

    def setRowsPerPage(self, amount):
        """
        Set the number of rows per page on the grid and its data
        source. Use ``-1`` for unlimited rows.

        :raises MissingDataSourceError: If there is no data source yet.
        """
        amount = int(amount)
        if amount == -1:
            amount = UNLIMITED_ROWS
        self._require_data_source().setResultsPerPage(amount)
        self._rows_per_page = amount
        return self

    def getRowsPerPage(self):
        return self._rows_per_page

    def addColumn(self, name, data, label=None, index=None, attributes=None):
        """
        Add a column to the data source, or update it if the data source
        already has a column called *name*.

        :param data: How the data source computes the cell value.
        :param index: The sort index. Without one the column is not
           sortable, whatever *attributes* say.
        :param attributes: A mapping of jqGrid ``colModel`` options. An
           integer is accepted as the column position for backwards
           compatibility; prefer ``{'position': n}``.
        """
        columns = self._require_data_source().columns

        if isinstance(attributes, int) and not isinstance(attributes, bool):
            position = attributes
            attributes = {'position': position}
        else:
            attributes = dict(attributes or {})
            position = attributes.get('position')

        # Without an explicit position, follow the show-list
        if position is None and name in (columns.showColumns or ()):
            position = list(columns.showColumns).index(name)

        if name in columns:
            merged = {'data': data}
            if label is not None:
                merged['label'] = label
            if index is not None:
                merged['index'] = index
            merged.update(attributes)
            attributes = merged
        else:
            columns.add(name, label, index, position, data)

        if attributes:
            self.setColumnAttributes(name, attributes)

        if index is None:
            columns.setColumnAttribute(name, 'sortable', False)
        return self

    def setColumnAttribute(self, name, key, value):
        self._require_data_source().columns.setColumnAttribute(name, key, value)
        return self

    def setColumnAttributes(self, name, attributes):
        for key, value in attributes.items():
            self.setColumnAttribute(name, key, value)
        return self

    def showColumns(self, names):
        """
        Show only the columns in *names*, in that order. Every other
        column is rendered hidden.
        """
        self._require_data_source().columns.showColumns = list(names)
        return self

    def setMethod(self, name, options=None):
        """
        Call the jqGrid method *name* with *options* once the grid is
        constructed. Methods run in the order they were first set;
        setting a method again replaces its options.
        """
        options = {} if options is None else options
        for i, method in enumerate(self._methods):
            if method.name == name:
                self._methods[i] = GridMethod(name, options)
                break
        else:
            self._methods.append(GridMethod(name, options))
        return self

    def getMethods(self):
        return list(self._methods)

    def setRowClickEvent(self, script):
        """
        Run *script* when a cell is clicked. The script sees the
        variables ``rowId``, ``iCol``, ``cellContent`` and ``e``; ``rowId``
        is the value of the data source identifier column if it has one,
        the row number otherwise.
        """
        self._row_click_script = script
        return self

    def getHtml(self):
        return '<table id="%s" class="%s"></table><div id="%s"></div>' % (
            escape(self._id),
            escape(self._classes or ''),
            escape(self._pager_id))

    __str__ = getHtml

    def __html__(self):
        return self.getHtml()

    def getSettings(self):
        """
        The jqGrid options, in the order the client receives them.

        :raises MissingDataSourceError: If there is no data source.
        """
        source = self._require_data_source()
        settings = {
            'url': self._url,
            'datatype': 'json',
            'mtype': 'post',
            'rowNum': self._rows_per_page,
            'autowidth': True,
            'pager': self._pager_id,
            'height': self._height,
            'viewrecords': True,
        }
        if self._width not in (None, '', 'auto'):
            settings['width'] = self._width

        columns = source.columns
        col_model = settings['colModel'] = []
        col_names = settings['colNames'] = []
        for column in columns:
            column = dict(column)
            column.pop('data', None)
            if not columns.isVisible(column['name']):
                column['hidden'] = True
            col_model.append(column)
            col_names.append(column.get('label'))

        sorting = source.getDefaultSorting()
        if sorting is not None:
            settings['sortname'] = sorting['index']
            settings['sortorder'] = str(sorting['direction']).lower()

        settings.update(self._attributes)

        # An explicit width and autowidth cannot be combined
        if settings.get('width') not in (None, ''):
            settings['autowidth'] = False
        return settings

    def _renderMethods(self):
        output = ''
        for method in self._methods:
            output += '$("#%s").jqGrid("%s", %s);\n' % (
                self._id, method.name, encode(method.options, pretty=True))
        return output

    def _renderRowClickEvent(self):
        return _ROW_CLICK_TEMPLATE % {'id': self._id,
                                      'script': self._row_click_script}

    def getJavascript(self, pretty=False):
        """
        The script that constructs the grid on ``#<id>``, binds the row
        click event and runs the methods set with :meth:`setMethod`.
        """
        json = encode(self.getSettings(), pretty=pretty)
        logger.debug("Rendering grid %s", self._id)

        output = 'var lastsel;\n'
        output += '$("#%s").jqGrid(%s);\n' % (self._id, json)
        if self._row_click_script is not None:
            output += '\n' + self._renderRowClickEvent() + '\n'
        output += '\n' + self._renderMethods()
        output += '\n' + _FIX_CURSOR_TEMPLATE % {'id': self._id} + '\n'
        return output
