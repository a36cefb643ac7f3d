# -*- coding: utf-8 -*-

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

from collections import namedtuple
import pprint
import sys

import colorama

from .diff_format import Missing, Removed
from .document import is_document


# Indentation offset in pretty-print
IND = "  "


ColoredConstants = namedtuple('ColoredConstants', (
    'KEEP',
    'REMOVE',
    'ADD',
    'INFO',
    'RESET',
))


col_const = {
    True: ColoredConstants(
        KEEP   = '{color}   '.format(color=''),
        REMOVE = '{color}-  '.format(color=colorama.Fore.RED),
        ADD    = '{color}+  '.format(color=colorama.Fore.GREEN),
        INFO   = '{color}## '.format(color=colorama.Fore.BLUE + colorama.Style.BRIGHT),
        RESET  = colorama.Style.RESET_ALL,
    ),

    False: ColoredConstants(
        KEEP   = '   ',
        REMOVE = '-  ',
        ADD    = '+  ',
        INFO   = '## ',
        RESET  = '',
    )
}


class PrettyPrintConfig:
    def __init__(
            self,
            out=sys.stdout,
            use_color=True,
            show_pending=True,
            ):
        self.out = out
        self.use_color = use_color
        self.show_pending = show_pending

    @property
    def KEEP(self):
        return col_const[self.use_color].KEEP

    @property
    def REMOVE(self):
        return col_const[self.use_color].REMOVE

    @property
    def ADD(self):
        return col_const[self.use_color].ADD

    @property
    def INFO(self):
        return col_const[self.use_color].INFO

    @property
    def RESET(self):
        return col_const[self.use_color].RESET


DefaultConfig = PrettyPrintConfig()


def dump(doc):
    """Render current values and pending changes of one level as text.

    Meant for debugging only, the format is not stable.
    """
    stage = " ".join("%s:%s" % (k, v) for k, v in doc.items())
    changed = " ".join("%s:%s" % (k, old) for k, old, _ in doc.changes())
    return "content [%s]\nchanges [%s]" % (stage, changed)


def format_value(v):
    "Format simple value for printing."
    if v is Removed or v is Missing:
        return repr(v)
    if is_document(v):
        v = v.to_builtin()
    return pprint.pformat(v)


def _sorted_keys(keys):
    return sorted(keys, key=lambda k: (isinstance(k, str), str(k) if isinstance(k, str) else k))


def pretty_print_key(k, prefix, config):
    config.out.write("%s%s:\n" % (prefix, k))


def pretty_print_key_value(k, v, prefix, config):
    config.out.write("%s%s: %s\n" % (prefix, k, v))


def pretty_print_item(k, v, prefix="", config=DefaultConfig):
    if is_document(v):
        flags = [name for name, on in (("opaque", v.opaque), ("ignored", v.ignored)) if on]
        label = "%s (%s)" % (k, ", ".join(flags)) if flags else k
        pretty_print_key(label, prefix, config)
        pretty_print_document(v, prefix+IND, config)
    elif isinstance(v, dict):
        pretty_print_key(k, prefix, config)
        pretty_print_dict(v, prefix+IND, config)
    else:
        vstr = format_value(v)
        if "\n" in vstr:
            # Multiline strings
            pretty_print_key(k, prefix, config)
            for line in vstr.splitlines(False):
                config.out.write("%s%s\n" % (prefix+IND, line))
        else:
            # Singleline strings
            pretty_print_key_value(k, vstr, prefix, config)


def pretty_print_dict(d, prefix="", config=DefaultConfig):
    """Pretty-print a dict without wrapper keys

    Instead of {'key': 'value'}, do

        key: value
        key:
          long
          value

    """
    for k in _sorted_keys(d):
        pretty_print_item(k, d[k], prefix, config)


def pretty_print_document(doc, prefix="", config=DefaultConfig):
    """Pretty-print a document, flagging pending changes.

    Keys changed since the last commit are prefixed with the
    add marker, keys pending removal with the remove marker.
    """
    pending = dict((k, old) for k, old, _ in doc.changes()) if config.show_pending else {}
    for k in _sorted_keys(doc):
        if k in pending:
            config.out.write(config.ADD)
            pretty_print_item(k, doc[k], prefix, config)
            config.out.write(config.RESET)
        else:
            config.out.write(config.KEEP)
            pretty_print_item(k, doc[k], prefix, config)
    for k in _sorted_keys(k for k in pending if k not in doc):
        config.out.write("%s%s%s: %s%s\n" % (
            config.REMOVE, prefix, k, format_value(pending[k]), config.RESET))


def pretty_print_diff(diff, config=DefaultConfig):
    """Pretty-print a diff, one dotted path per line.

    Entries for opaque subtrees are printed with their content,
    markers for ancestors of changed values only by path.
    """
    for path in sorted(diff):
        v = diff[path]
        if v is Removed:
            config.out.write("%sremoved %s%s\n" % (config.REMOVE, path, config.RESET))
        elif is_document(v) and not v.opaque:
            config.out.write("%smodified %s%s\n" % (config.INFO, path, config.RESET))
        else:
            vstr = format_value(v)
            if "\n" in vstr:
                config.out.write("%s%s:\n" % (config.ADD, path))
                for line in vstr.splitlines(False):
                    config.out.write("%s%s\n" % (IND, line))
                config.out.write(config.RESET)
            else:
                config.out.write("%s%s: %s%s\n" % (config.ADD, path, vstr, config.RESET))
