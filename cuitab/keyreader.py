# Copyright (c) 2017 Christoph Landgraf. All rights reserved.
# Use of this source code is governed by a BSD-style license that can be
# found in the LICENSE file.

"""
Translate terminal input into keychord strings as understood by
cuitab.keymap.
"""

import re

KEYCHORD_MAP = {
    'C-m':        '<enter>',
    'C-j':        '<enter>',
    'C-i':        '<tab>',
    'C-[':        '<esc>',
    'C-?':        '<backspace>',
}

KEYNAME_MAP = {
    'KEY_HOME':      '<home>',
    'KEY_END':       '<end>',
    'KEY_SHOME':     'S-<home>',
    'KEY_SEND':      'S-<end>',

    'KEY_NPAGE':     '<pgdown>',
    'KEY_SNEXT':     'S-<pgdown>',
    'KEY_PPAGE':     '<pgup>',
    'KEY_SPREVIOUS': 'S-<pgup>',

    'KEY_DC':        '<del>',
    'KEY_BACKSPACE': '<backspace>',
    'KEY_ENTER':     '<enter>',
    'KEY_BTAB':      'S-<tab>',

    'KEY_UP':        '<up>',
    'KEY_SR':        'S-<up>',
    'KEY_DOWN':      '<down>',
    'KEY_SF':        'S-<down>',
    'KEY_LEFT':      '<left>',
    'KEY_SLEFT':     'S-<left>',
    'KEY_RIGHT':     '<right>',
    'KEY_SRIGHT':    'S-<right>',
}

KEY_FN_PATTERN = re.compile(r'KEY_F\((\d+)\)')


def translate_keyname(keyname, meta=False):
    if len(keyname) > 1 and keyname.startswith('^'):
        return 'C-' + translate_keyname(keyname[1:], meta=meta)
    elif meta:
        return 'M-' + translate_keyname(keyname)

    fn_match = KEY_FN_PATTERN.match(keyname)
    if fn_match:
        fn_idx = int(fn_match.group(1))
        return \
            ('<f%s>'     % (fn_idx))      if fn_idx < 13 else \
            ('S-<f%s>'   % (fn_idx - 12)) if fn_idx < 25 else \
            ('C-<f%s>'   % (fn_idx - 24)) if fn_idx < 37 else \
            ('C-S-<f%s>' % (fn_idx - 36))

    return KEYNAME_MAP.get(keyname, keyname.lower())


def translate_keychord(keyname, meta=False):
    mkeys = translate_keyname(keyname, meta)
    return KEYCHORD_MAP.get(mkeys, mkeys)


def char_keyname(ch):
    """
    Return the caret notation for control characters, like curses.keyname.
    """
    code = ord(ch)
    if code < 32:
        return '^' + chr(code + 64)
    elif code == 127:
        return '^?'
    return ch


def translate_char(ch, meta=False):
    """
    Translate a single character read from the terminal into a keychord.
    Printable characters keep their case.
    """
    if len(ch) != 1:
        raise ValueError('Expected a single character, got %r' % ch)
    keyname = char_keyname(ch)
    if len(keyname) == 1:
        return 'M-' + keyname if meta else keyname
    return translate_keychord(keyname, meta=meta)
