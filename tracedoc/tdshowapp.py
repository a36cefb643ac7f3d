# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os
import sys

from .args import (
    add_generic_args, add_prettyprint_args, ConfigBackedParser,
    prettyprint_config_from_args,
)
from .committing import commit
from .document import Document
from .prettyprint import pretty_print_document
from .utils import EXPLICIT_MISSING_FILE, read_json, setup_std_streams


_description = """Show a json document in terminal.
With more than one file, the first is loaded and committed and the
others are assigned in turn, values changed since the commit are marked.
"""


def main_show(args):

    for fn in args.files:
        if not os.path.exists(fn) and fn != EXPLICIT_MISSING_FILE:
            print("Missing file {}".format(fn))
            return 1
    if not args.files:
        print("Missing filenames.")
        return 1

    doc = Document(read_json(args.files[0]))
    commit(doc)
    for fn in args.files[1:]:
        doc.assign(read_json(fn))

    # This printer is to keep the unit tests passing,
    # some tests capture output with capsys which doesn't
    # pick up on sys.stdout.write()
    class Printer:
        def write(self, text):
            print(text, end="")

    config = prettyprint_config_from_args(args, out=Printer())
    pretty_print_document(doc, config=config)
    return 0


def _build_arg_parser(prog=None):
    """Creates an argument parser for the tdshow command."""
    parser = ConfigBackedParser(
        description=_description,
        prog=prog,
        add_help=True,
        )
    add_generic_args(parser)
    add_prettyprint_args(parser)
    parser.add_argument(
        '--no-pending',
        dest='show_pending',
        action="store_false",
        default=True,
        help="do not mark values changed since the first file.")
    parser.add_argument("files", nargs="*", help="json filename(s)")
    return parser


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    setup_std_streams()
    arguments = _build_arg_parser('tdshow').parse_args(args)
    return main_show(arguments)


if __name__ == "__main__":
    sys.exit(main())
