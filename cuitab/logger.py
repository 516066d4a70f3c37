# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

import traceback

MAX_MESSAGES = 1000


class Logger(object):
    """
    Sink for errors that are reported but not propagated.
    Keeps the last ``MAX_MESSAGES`` messages.
    """
    def __init__(self):
        self.messages = []

    def log(self, msg):
        if (len(self.messages) >= MAX_MESSAGES):
            self.messages.pop(0)
        self.messages.append(msg)

    def exception(self, msg):
        """
        Log ``msg`` along with the traceback of the exception
        currently being handled.
        """
        self.log('%s\n%s' % (msg, traceback.format_exc()))

    def clear(self):
        self.messages = []
