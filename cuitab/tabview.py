# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
This module provides TabView, a widget hosting several panes of which
only the active one is displayed and receives input, and Tabbable,
which defines the tab-level commands and the keys bound to them.

An application derives from TabView and implements at least
``new_tab``, ``get_tab_names`` and ``on_key_sub``:

    class Browser(TabView):
        def new_tab(self):
            self.push_widget(Page(self.get_core()))
            self.select_tab_(len(self.widgets) - 1)

        def get_tab_names(self):
            return (page.title for page in self.widgets)

        def on_key_sub(self, key):
            self.active_tab_().on_key(key)

Keys are dispatched in two stages. Keys bound in ``__keymap__`` are
handled by the tab commands, everything else is passed on to
``on_key_sub``. Subclasses may extend ``__keymap__`` with bindings of
their own.
"""

from cuitab import term
from cuitab.keymap import WithKeymap
from cuitab.util import forward, minmax, truncate_left
from cuitab.widget import Widget


class TabError(Exception):
    pass


class NoTabsError(TabError):
    pass


class LastTabError(TabError):
    pass


class TabNamesError(TabError):
    pass


class TabIndexError(TabError, IndexError):
    pass


class Tabbable(WithKeymap):
    __keymap__ = {
        'C-t':     'new_tab',
        'C-w':     'close_tab',
        '<tab>':   'next_tab',
        'S-<tab>': 'previous_tab',
    }

    def __init__(self):
        self._pending_keys = []

    @classmethod
    def reserved_chords(cls):
        return cls.__keymap__.flattened()

    # --------------- Override these ------------

    def new_tab(self):
        raise NotImplementedError()

    def close_tab(self):
        raise NotImplementedError()

    def next_tab(self):
        raise NotImplementedError()

    def previous_tab(self):
        raise NotImplementedError()

    def on_next_tab(self):
        """
        Called after the active tab has changed. Exceptions raised
        here are logged and do not undo the switch.
        """
        pass

    def get_tab_names(self):
        """
        Return an iterable with one name per tab, in tab order.
        A name may be None.
        """
        raise NotImplementedError()

    def active_tab(self):
        raise NotImplementedError()

    def active_tab_mut(self):
        raise NotImplementedError()

    def on_key_sub(self, key):
        """
        Receives every key that is not bound in ``__keymap__``.
        """
        raise NotImplementedError()

    # -------------------------------------------

    def on_key(self, key):
        keys = self._pending_keys + [key]
        self._pending_keys = []
        handled = self.handle_input(keys)
        if handled is False:
            self._pending_keys = keys
        elif handled is None:
            if len(keys) == 1:
                self.on_key_sub(key)
            else:
                # Abandoned sequence, the last key may start a new one
                for pending_key in keys[:-1]:
                    self.on_key_sub(pending_key)
                self.on_key(key)


@forward(lambda self: self.active_tab_(),
         ['render_footer', 'get_drawlist'],
         Widget)
class TabView(Widget, Tabbable):
    def __init__(self, core):
        Widget.__init__(self, core)
        Tabbable.__init__(self)
        self.widgets = []
        self.active = 0

    def push_widget(self, widget):
        """
        Append ``widget`` as the last tab. The active tab does not change,
        unless ``widget`` is the first tab.
        """
        previous_active = self.active
        if not self.widgets:
            self.active = 0
        self.widgets.append(widget)
        try:
            self.refresh()
        except Exception:
            self.widgets.pop()
            self.active = previous_active
            raise

    def pop_widget(self):
        """
        Remove and return the last tab. The active index is left as is.
        """
        if not self.widgets:
            raise NoTabsError('No tab to remove.')
        return self.widgets.pop()

    def active_tab_(self):
        if not self.widgets:
            raise NoTabsError('No tab is open.')
        if not 0 <= self.active < len(self.widgets):
            raise TabIndexError('Active tab %s was removed.' % self.active)
        return self.widgets[self.active]

    def active_tab(self):
        return self.active_tab_()

    def active_tab_mut(self):
        return self.active_tab_()

    def close_tab_(self):
        """
        Remove and return the active tab. The tab to its right becomes
        active, or the tab to its left if it was the last one.
        The last remaining tab can not be closed.
        """
        if not self.widgets:
            raise NoTabsError('No tab to close.')
        if len(self.widgets) == 1:
            raise LastTabError('Can not close the last tab.')

        widget = self.widgets.pop(self.active)
        if self.active == len(self.widgets):
            self.active -= 1
        self.refresh()
        return widget

    def close_tab(self):
        self.close_tab_()

    def _switch_tab(self, index):
        self.active = index
        self.refresh()
        try:
            self.on_next_tab()
        except Exception:
            self._core.logger.exception('on_next_tab failed for tab %s' % index)

    def next_tab_(self):
        if not self.widgets:
            raise NoTabsError('No tab to switch to.')
        self._switch_tab((self.active + 1) % len(self.widgets))

    def next_tab(self):
        self.next_tab_()

    def previous_tab_(self):
        if not self.widgets:
            raise NoTabsError('No tab to switch to.')
        self._switch_tab((self.active - 1) % len(self.widgets))

    def previous_tab(self):
        self.previous_tab_()

    def select_tab_(self, index):
        if not 0 <= index < len(self.widgets):
            raise TabIndexError('No tab with index %s.' % index)
        self._switch_tab(index)

    def _tab_labels(self):
        names = list(self.get_tab_names())
        if len(names) != len(self.widgets):
            raise TabNamesError('Got %s names for %s tabs.'
                                % (len(names), len(self.widgets)))

        max_width = self._core.get_variable(['tabs', 'max-name-width'])
        labels = []
        for num, name in enumerate(names):
            if name is None:
                labels.append('%s' % num)
            else:
                labels.append('%s:%s' % (num, truncate_left(max_width, name)))
        return labels

    def _visible_range(self, labels, width):
        first, last = 0, len(labels)

        def run_length():
            return sum(len(label) + 1 for label in labels[first:last])

        while run_length() > width and first < self.active:
            first += 1
        while run_length() > width and last > self.active + 1:
            last -= 1
        return first, last

    def render_header(self):
        coordinates = self.get_coordinates()
        header = self.active_tab_().render_header()
        header_color = term.header_color(self._core)
        labels = self._tab_labels()

        first, last = self._visible_range(labels, coordinates.xsize)
        tabnums = ''.join(
            (' %s%s%s%s' % (term.invert(), labels[num], term.reset(), header_color))
            if num == self.active else
            (' %s' % labels[num])
            for num in range(first, last))

        nums_pos = minmax(0,
                          coordinates.xsize - term.printable_length(tabnums),
                          coordinates.xsize)
        return '%s%s%s%s' % (header,
                             header_color,
                             term.goto_xy(coordinates.xpos + nums_pos, coordinates.ypos),
                             tabnums)

    def refresh(self):
        self.active_tab_().refresh()

    def on_key(self, key):
        Tabbable.on_key(self, key)
        self.refresh()
