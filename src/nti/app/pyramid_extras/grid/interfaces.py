#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Grid related interfaces.

.. $Id$
"""

from zope import interface

__docformat__ = "restructuredtext en"

logger = __import__('logging').getLogger(__name__)


class MissingDataSourceError(LookupError):
    """
    Raised when a grid operation needs a data source and none
    has been set.
    """

    def __init__(self, message='No data source defined'):
        super().__init__(message)


class IGridColumns(interface.Interface):
    """
    An ordered collection of column metadata, keyed by column name.

    Each column is a mutable mapping. The keys ``name``, ``label``,
    ``index``, ``sortable``, ``position`` and ``data`` have meaning to
    the grid; any other key is passed through to the client widget
    unchanged.
    """

    showColumns = interface.Attribute(
        "A list of column names. When non-empty, columns not named "
        "here are hidden and the order of this list takes precedence.")

    def add(name, label=None, index=None, position=None, data=None):
        """
        Create the column *name* and return its mapping.

        A column without a sort *index* is not sortable.
        """

    def setColumnAttribute(name, key, value):
        """
        Set the attribute *key* of the column *name*.

        :raises KeyError: If there is no such column.
        """

    def isVisible(name):
        """
        Is the column *name* shown, considering :attr:`showColumns`?
        """

    def __contains__(name):
        "Is there a column called *name*?"

    def __getitem__(name):
        "The mapping of the column *name*."

    def __iter__():
        """
        Iterate the column mappings in display order.
        """

    def __len__():
        "The number of columns."


class IGridDataSource(interface.Interface):
    """
    Supplies the columns of a grid and answers its data requests.
    """

    columns = interface.Attribute("The :class:`IGridColumns` of this source.")

    def getDefaultSorting():
        """
        Return a mapping with the keys ``index`` and ``direction``
        describing the initial sort, or None.
        """

    def setResultsPerPage(amount):
        """
        Set how many rows a single data request returns.
        """

    def getJson(params):
        """
        Answer a data request from the client widget. *params* is
        a mapping of the request parameters (``page``, ``rows``,
        ``sidx``, ``sord``). Returns a JSON string.
        """


class IGrid(interface.Interface):
    """
    Builds the HTML scaffold and the JavaScript configuration of a
    client side jqGrid.
    """

    def setDataSource(data_source):
        "Associate an :class:`IGridDataSource`."

    def addColumn(name, data, label=None, index=None, attributes=None):
        """
        Add a column, or update the column *name* if it already exists.

        If *attributes* is an integer it is taken to be the column
        position. Without an *index* the column is not sortable.
        """

    def showColumns(names):
        "Show only the columns in *names*, in that order."

    def setRowsPerPage(amount):
        "Set the page size. ``-1`` means unlimited."

    def setMethod(name, options=None):
        "Call the grid method *name* after construction."

    def getHtml():
        "The table and pager elements."

    def getJavascript(pretty=False):
        "The script that constructs the grid."
