# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
Keychords are written as strings of modifiers and a key, separated by
dashes, e.g. ``C-t`` or ``C-M-<up>``. Sequences of keychords are
separated by spaces, e.g. ``C-x k``.

Classes deriving from WithKeymap may declare a ``__keymap__``
dictionary mapping keychord sequences to the names of the methods
that handle them. Keymaps of base classes are consulted for any
sequence a class does not bind itself.
"""

from cuitab.util import deep_put, deep_get

skey_map = set(['<f1>', '<f2>', '<f3>', '<f4>', '<f5>', '<f6>', '<f7>', '<f8>',
                '<f9>', '<f10>', '<f11>', '<f12>',
                '<tab>', '<del>', '<enter>', '<esc>', '<backspace>',
                '<down>', '<up>', '<left>', '<right>',
                '<pgup>', '<pgdown>', '<home>', '<end>'])
modifiers = ['C', 'M', 'S']
modifier_set = set(modifiers)


def parse_key(k):
    if len(k) > 1 and k not in skey_map:
        raise KeyError('Unknown special key: %s' % k)
    return k


def parse_keychord(chord):
    """
    Normalize a single keychord, e.g. ``M-C-x`` becomes ``C-M-x``.
    """
    parts = chord.split('-')
    unknown_modifiers = [m for m in parts[:-1] if m not in modifier_set]
    if unknown_modifiers:
        raise KeyError('Encountered unknown modifiers: %s' % unknown_modifiers)
    return '-'.join(sorted(parts[:-1], key=modifiers.index) + [parse_key(parts[-1])])


def parse_keychord_string(s):
    return [parse_keychord(chord) for chord in s.split(' ') if chord]


def _flatten(bindings, prefix):
    for chord, binding in bindings.items():
        sequence = prefix + [chord]
        if isinstance(binding, dict):
            yield from _flatten(binding, sequence)
        else:
            yield ' '.join(sequence), binding


class Keymap(object):
    """
    Binds keychord sequences to method names. Sequences that are not
    bound here are looked up in the keymaps of ``supers``.
    """
    def __init__(self, bindings, supers=()):
        self.supers = list(supers)
        self._bindings = {}
        for sequence, method_name in bindings.items():
            if not isinstance(method_name, str):
                raise TypeError('Binding for %s must be a method name, got %r'
                                % (sequence, method_name))
            self[parse_keychord_string(sequence)] = method_name

    def method_names(self):
        return set(dict(_flatten(self._bindings, [])).values())

    def flattened(self):
        flat = {}
        for super_ in self.supers:
            flat.update(super_.__keymap__.flattened())
        flat.update(_flatten(self._bindings, []))
        return flat

    def __getitem__(self, keychords):
        binding = deep_get(self._bindings, keychords)
        if binding is None:
            for super_ in self.supers:
                binding = super_.__keymap__[keychords]
                if binding:
                    break
        return binding

    def __setitem__(self, keychords, method_name):
        deep_put(self._bindings, keychords, method_name)


class WithKeymapMeta(type):
    """Metaclass for handling keyboard input.
    This class should not be used directly, you should rather subclass WithKeymap.
    """
    def __init__(cls, name, bases, dct):
        """Convert a keymap specified as a dictionary to a Keymap object
        and check that every bound method exists.
        """
        keymap_bases = [base for base in bases if isinstance(base, WithKeymapMeta)]
        cls.__keymap__ = Keymap(dct.get('__keymap__', {}), keymap_bases)
        super(WithKeymapMeta, cls).__init__(name, bases, dct)
        missing = sorted(m for m in cls.__keymap__.method_names() if not hasattr(cls, m))
        if missing:
            raise AttributeError('%s binds keys to undefined methods: %s'
                                 % (name, ', '.join(missing)))


class WithKeymap(object, metaclass=WithKeymapMeta):
    """Superclass for objects handling keyboard input.
    """
    def handle_input(self, keychords):
        """
        Look up the list ``keychords`` in the keymap of this class.

        A return value of None means the received keychord prefix has no match,
        and should be directed to the next handler.
        If this method returns False, a prefix match is found, but the keychord is
        not yet complete.
        If this method returns True, the bound method has been executed.
        """
        key_fn = self.__class__.__keymap__[keychords]
        if key_fn is None:
            return None
        elif isinstance(key_fn, dict):
            return False
        else:
            getattr(self, key_fn)()
            return True
