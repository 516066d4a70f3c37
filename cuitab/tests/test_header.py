# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import pytest

from cuitab import NoTabsError, TabNamesError, WidgetCore
from cuitab.term import strip_escapes

from conftest import Browser, Pane

HEADER_COLOR = '\x1b[30;47m'
INVERT = '\x1b[7m'
RESET = '\x1b[0m'


def test_header_overlays_tab_strip(browser):
    b = browser('a', 'b', 'c')
    b.active = 1
    assert b.render_header() == ''.join([
        'header:b',
        HEADER_COLOR,
        '\x1b[1;29H',
        ' 0:a',
        ' ' + INVERT + '1:b' + RESET + HEADER_COLOR,
        ' 2:c',
    ])


def test_strip_ends_at_last_column(browser):
    b = browser('first', 'second')
    header = b.render_header()
    strip = strip_escapes(header.split('H', 2)[-1])
    assert strip == ' 0:first 1:second'
    column = int(header.split('\x1b[1;')[1].split('H')[0])
    assert column + len(strip) - 1 == 40


def test_strip_uses_widget_position():
    core = WidgetCore((10, 20, 3, 5))
    b = Browser(core)
    b.push_widget(Pane(core, 'a'))
    assert '\x1b[3;%dH' % (5 + 20 - 4) in b.render_header()


def test_missing_name_shows_index(browser):
    b = browser('a', 'b')
    b.get_tab_names = lambda: ['a', None]
    assert strip_escapes(b.render_header()).endswith(' 0:a 1')


def test_name_count_must_match(browser):
    b = browser('a', 'b')
    b.get_tab_names = lambda: ['a']
    with pytest.raises(TabNamesError):
        b.render_header()


def test_long_names_are_truncated(browser, core):
    core.set_variable(['tabs', 'max-name-width'], 8)
    b = browser('verylongname')
    assert strip_escapes(b.render_header()).endswith(' 0:...gname')


def test_overflow_keeps_active_tab_visible(core):
    core.coordinates.resize((24, 10, 1, 1))
    b = Browser(core)
    for name in ['alpha', 'beta', 'gamma']:
        b.push_widget(Pane(core, name))

    b.active = 2
    header = b.render_header()
    assert strip_escapes(header).endswith(' 2:gamma')
    assert 'alpha' not in header
    assert '\x1b[1;3H' in header

    b.active = 0
    header = b.render_header()
    assert strip_escapes(header).endswith(' 0:alpha')
    assert 'gamma' not in header


def test_offset_never_negative(core):
    core.coordinates.resize((24, 5, 1, 1))
    b = Browser(core)
    b.push_widget(Pane(core, 'gamma'))
    assert '\x1b[1;1H' in b.render_header()


def test_header_color_is_configurable(browser, core):
    core.set_variable(['colors', 'header', 'foreground'], 'white')
    core.set_variable(['colors', 'header', 'background'], 'blue')
    b = browser('a')
    assert b.render_header().startswith('header:a\x1b[37;44m')


def test_empty_header(browser):
    with pytest.raises(NoTabsError):
        browser().render_header()
