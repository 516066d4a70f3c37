# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
Escape sequences used when composing strings to be drawn to a
terminal. Nothing in here writes to the terminal itself.
"""

import re

from cuitab import colors

CSI = '\x1b['

ESCAPE_RE = re.compile(r'\x1b\[[0-9;?]*[A-Za-z]')


def invert():
    return CSI + '7m'


def reset():
    return CSI + '0m'


def header_color(core):
    fg = core.get_variable(['colors', 'header', 'foreground'])
    bg = core.get_variable(['colors', 'header', 'background'])
    return '%s%d;%dm' % (CSI, colors.foreground_code(fg), colors.background_code(bg))


def goto_xy(x, y):
    """
    Move the cursor to column ``x`` and row ``y``, both 1-based.
    """
    return '%s%d;%dH' % (CSI, y, x)


def strip_escapes(string):
    return ESCAPE_RE.sub('', string)


def printable_length(string):
    return len(strip_escapes(string))
