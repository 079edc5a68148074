#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
Server side support for jqGrid tables.

.. $Id$
"""

__docformat__ = "restructuredtext en"

from nti.app.pyramid_extras.grid.columns import GridColumns

from nti.app.pyramid_extras.grid.datasource import ArrayDataSource

from nti.app.pyramid_extras.grid.grid import Grid
from nti.app.pyramid_extras.grid.grid import GridMethod
from nti.app.pyramid_extras.grid.grid import UNLIMITED_ROWS

from nti.app.pyramid_extras.grid.interfaces import MissingDataSourceError
