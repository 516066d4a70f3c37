# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import pytest

from cuitab import term
from cuitab.colors import ColorException


def test_goto_xy_is_column_row():
    assert term.goto_xy(3, 1) == '\x1b[1;3H'


def test_printable_length_ignores_escapes():
    s = ' ' + term.invert() + '1:b' + term.reset() + term.goto_xy(10, 2)
    assert term.printable_length(s) == 4


def test_header_color(core):
    assert term.header_color(core) == '\x1b[30;47m'


def test_unknown_header_color(core):
    core.set_variable(['colors', 'header', 'background'], 'purple')
    with pytest.raises(ColorException):
        term.header_color(core)
