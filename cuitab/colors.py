# Copyright (c) 2017-2018 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
Named terminal colors and their ANSI SGR codes.

Colors are referred to by name, e.g. ``black`` or ``white``. The
header of a widget is drawn using the foreground and background
colors configured in the variables ``['colors', 'header', 'foreground']``
and ``['colors', 'header', 'background']`` of its WidgetCore.
"""

COLOR_INDEX_MAP = {
    'black':   0,
    'red':     1,
    'green':   2,
    'yellow':  3,
    'blue':    4,
    'magenta': 5,
    'cyan':    6,
    'white':   7
}

FOREGROUND_OFFSET = 30
BACKGROUND_OFFSET = 40


class ColorException(Exception):
    pass


def color_index(name):
    if name not in COLOR_INDEX_MAP:
        raise ColorException('No color named %s' % name)
    return COLOR_INDEX_MAP[name]


def foreground_code(name):
    return FOREGROUND_OFFSET + color_index(name)


def background_code(name):
    return BACKGROUND_OFFSET + color_index(name)
