# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

from cuitab.widget import Coordinates, WidgetCore, Widget
from cuitab.tabview import \
    Tabbable, TabView, \
    TabError, NoTabsError, LastTabError, TabNamesError, TabIndexError
from cuitab.logger import Logger

__all__ = [
    'Coordinates',
    'WidgetCore',
    'Widget',

    'Tabbable',
    'TabView',

    'TabError',
    'NoTabsError',
    'LastTabError',
    'TabNamesError',
    'TabIndexError',

    'Logger'
]
