# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

from functools import wraps


def truncate_left(width, string):
    if len(string) <= width:
        return string
    if width <= 3:
        return string[len(string) - max(width, 0):]
    return '%s%s' % ('...', string[len(string) - (width - 3):])


def forward(to, methods, cls=None):
    """
    Class Decorator that forwards method calls to another object.

    Parameter ``to`` is a function that receives the object on which
    the function is invoked and must return the object to which it
    should be forwarded. If ``cls`` is given, the forwarders take over
    the name and docstring of the method defined there.
    """
    def _create_forwarder(method):
        def _forward_fn(self, *args, **kwargs):
            return getattr(to(self), method)(*args, **kwargs)
        return wraps(getattr(cls, method))(_forward_fn) if cls else _forward_fn

    def _forward(cls):
        for method in methods:
            setattr(cls, method, _create_forwarder(method))
        return cls
    return _forward


def minmax(minimum, value, maximum):
    return max(minimum, min(value, maximum))


def _deep_error(path):
    raise KeyError('Path %s does not exist.' % path)


def deep_put(dict_, key_path, value, create_path=True):
    if len(key_path) == 0:
        raise KeyError('Can not deep_put using empty path.')

    dict_anchor = dict_
    for key in key_path[:-1]:
        if key not in dict_anchor:
            if create_path:
                dict_anchor[key] = {}
            else:
                _deep_error(key_path)
        dict_anchor = dict_anchor[key]
    if not create_path and key_path[-1] not in dict_anchor:
        _deep_error(key_path)
    dict_anchor[key_path[-1]] = value


def deep_get(dict_, key_path, return_none=True):
    if len(key_path) == 0:
        raise KeyError('Can not deep_get using empty path.')

    dict_anchor = dict_
    for key in key_path:
        if not hasattr(dict_anchor, 'get'):
            if return_none:
                return None
            else:
                _deep_error(key_path)
        dict_anchor = dict_anchor.get(key)
        if dict_anchor is None:
            if return_none:
                return None
            else:
                _deep_error(key_path)
    return dict_anchor
