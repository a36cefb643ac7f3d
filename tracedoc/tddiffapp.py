# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import json
import os
import sys

from .args import (
    add_generic_args, add_tracking_args, add_dispatch_args,
    add_prettyprint_args, ConfigBackedParser, prettyprint_config_from_args,
)
from .changeset import changeset
from .committing import commit
from .diff_format import diff_to_json
from .dispatch import mapchange
from .document import Document, is_document
from .log import warning
from .paths import compile_path
from .prettyprint import format_value, pretty_print_diff
from .utils import EXPLICIT_MISSING_FILE, read_json, setup_std_streams


_description = """Compute the changes between successive states of a json document.
The base file is loaded and committed, then every update file is
assigned as the new whole state and committed, printing its diff.
"""


def apply_flags(doc, opaque=(), ignore=()):
    """Mark the subtrees at the given paths opaque or ignored."""
    for paths, setter in ((opaque, 'set_opaque'), (ignore, 'set_ignore')):
        for path in paths or ():
            target = compile_path(path)(doc)
            if is_document(target):
                getattr(target, setter)(True)
            else:
                warning("Path %r is not a subtree, cannot %s it", path, setter[4:])


def watch_changeset(paths, out):
    """Build a changeset writing every change of the watched paths to out."""
    def watcher(path):
        def report(doc, value):
            out.write("watch %s: %s\n" % (path, format_value(value)))
        return report
    return changeset([(watcher(p), p) for p in paths])


def main_diff(args):
    """Main handler of diff CLI"""
    files = [args.base] + list(args.updates)
    for fn in files:
        if not os.path.exists(fn) and fn != EXPLICIT_MISSING_FILE:
            print("Missing file {}".format(fn))
            return 1

    # This printer is to keep the unit tests passing,
    # some tests capture output with capsys which doesn't
    # pick up on sys.stdout.write()
    class Printer:
        def write(self, text):
            print(text, end="")
    printer = Printer()

    doc = Document(read_json(args.base))
    apply_flags(doc, args.opaque, args.ignore)
    commit(doc)

    watched = changeset([])
    if args.watch:
        watched = watch_changeset(args.watch, printer)

    results = []
    for fn in args.updates:
        doc.assign(read_json(fn))
        # Subtrees may have been created by the update
        apply_flags(doc, args.opaque, args.ignore)
        d = commit(doc, True)
        if args.out:
            results.append(dict(diff_to_json(d), file=fn))
        else:
            config = prettyprint_config_from_args(args, out=printer)
            printer.write("%s%s%s\n" % (config.INFO, fn, config.RESET))
            pretty_print_diff(d, config)
        mapchange(doc, watched, d, strategy=args.strategy)

    if args.out:
        with open(args.out, "w") as df:
            json.dump(results, df, indent=2, separators=(",", ": "))
    return 0


def _build_arg_parser(prog=None):
    """Creates an argument parser for the tddiff command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        )
    add_generic_args(parser)
    add_tracking_args(parser)
    add_dispatch_args(parser)
    add_prettyprint_args(parser)

    parser.add_argument(
        "base", help="the base json filename.",
    )
    parser.add_argument(
        "updates", help="json filenames of the following states.",
        nargs='*', default=[],
    )
    parser.add_argument(
        '--out',
        default=None,
        help="if supplied, the diffs are written to this file as json. "
             "Otherwise they are printed to the terminal.")

    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser('tddiff').parse_args(args)
    return main_diff(arguments)


if __name__ == "__main__":
    sys.exit(main())
