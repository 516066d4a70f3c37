# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import pytest

from cuitab import TabView, Widget, WidgetCore


class Pane(Widget):
    def __init__(self, core, name):
        super(Pane, self).__init__(core)
        self.name = name
        self.refreshed = 0
        self.keys = []

    def render_header(self):
        return 'header:%s' % self.name

    def render_footer(self):
        return 'footer:%s' % self.name

    def get_drawlist(self):
        return 'drawlist:%s' % self.name

    def refresh(self):
        self.refreshed += 1

    def on_key(self, key):
        self.keys.append(key)


class BrokenPane(Pane):
    def refresh(self):
        raise RuntimeError('refresh failed')


class Browser(TabView):
    def __init__(self, core):
        super(Browser, self).__init__(core)
        self.hook_calls = 0
        self.hook_error = None

    def new_tab(self):
        self.push_widget(Pane(self.get_core(), 'tab%s' % len(self.widgets)))
        self.select_tab_(len(self.widgets) - 1)

    def get_tab_names(self):
        return (pane.name for pane in self.widgets)

    def on_key_sub(self, key):
        self.active_tab_().on_key(key)

    def on_next_tab(self):
        self.hook_calls += 1
        if self.hook_error:
            raise self.hook_error


@pytest.fixture
def core():
    return WidgetCore((24, 40, 1, 1))


@pytest.fixture
def browser(core):
    def _browser(*names):
        b = Browser(core)
        for name in names:
            b.push_widget(Pane(core, name))
        return b
    return _browser
