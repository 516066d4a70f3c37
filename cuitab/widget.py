# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

from cuitab.logger import Logger
from cuitab.util import deep_get, deep_put


class Coordinates(object):
    """
    Area of the terminal a widget renders to. Dimensions are given
    as ``(rows, columns, row, column)``, with the position 1-based.
    """
    def __init__(self, dimensions):
        self.dimensions = tuple(dimensions)

    @property
    def ysize(self):
        return self.dimensions[0]

    @property
    def xsize(self):
        return self.dimensions[1]

    @property
    def ypos(self):
        return self.dimensions[2]

    @property
    def xpos(self):
        return self.dimensions[3]

    def resize(self, dimensions):
        self.dimensions = tuple(dimensions)
        return self

    def __repr__(self):
        return '#<coordinates dimensions=%s>' % (self.dimensions,)


class WidgetCore(object):
    """
    State shared by a widget and the widgets it contains: geometry,
    the error log and configuration variables.
    """
    def __init__(self, dimensions, logger=None):
        self.coordinates = Coordinates(dimensions)
        self.logger = logger if logger is not None else Logger()
        self._init_state()

    def _init_state(self):
        self._state = {}
        self.def_variable(['tabs', 'max-name-width'], 24)
        self.def_variable(['colors', 'header', 'foreground'], 'black')
        self.def_variable(['colors', 'header', 'background'], 'white')

    def get_variable(self, path):
        return deep_get(self._state, path, return_none=False)

    def def_variable(self, path, value=None):
        deep_put(self._state, path, value, create_path=True)

    def set_variable(self, path, value=None):
        deep_put(self._state, path, value, create_path=False)


class Widget(object):
    """
    Base class for everything that can be displayed in a tab, including
    the tab container itself.

    Subclasses must implement the rendering methods. Each of them
    returns a string ready to be drawn, possibly containing escape
    sequences from cuitab.term.
    """
    def __init__(self, core):
        self._core = core

    def get_core(self):
        return self._core

    def get_coordinates(self):
        return self._core.coordinates

    def render_header(self):
        raise NotImplementedError()

    def render_footer(self):
        raise NotImplementedError()

    def get_drawlist(self):
        raise NotImplementedError()

    def refresh(self):
        """
        Recompute cached display state from the current geometry and
        content. Must be safe to call repeatedly.
        """
        raise NotImplementedError()

    def on_key(self, key):
        raise NotImplementedError()
