# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import argparse
import json
import logging
import sys

from ._version import __version__
from .config import (
    get_defaults_for_argparse, build_config, entrypoint_configurables,
)
from .dispatch import dispatch_strategies
from .log import init_logging, set_tracedoc_log_level


class ConfigBackedParser(argparse.ArgumentParser):

    def parse_known_args(self, args=None, namespace=None):
        entrypoint = self.prog.split(' ')[0]
        try:
            defs = get_defaults_for_argparse(entrypoint)
            self.set_defaults(**defs)
        except ValueError:
            pass
        return super(ConfigBackedParser, self).parse_known_args(args=args, namespace=namespace)


class LogLevelAction(argparse.Action):
    def __init__(self, option_strings, dest, default=None, **kwargs):
        # __call__ is not called if option not given:
        level = getattr(logging, default or 'INFO')
        init_logging(level=level)
        set_tracedoc_log_level(level)
        super(LogLevelAction, self).__init__(option_strings, dest, default=default, **kwargs)

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, values)
        level = getattr(logging, values)
        set_tracedoc_log_level(level, True)


def modify_config_for_print(config):
    output = {}
    for k, v in config.items():
        if isinstance(v, dict):
            output[k] = modify_config_for_print(v)
            if not output[k]:
                output[k] = '{}'
        else:
            output[k] = json.dumps(v)
    return output


class ConfigHelpAction(argparse.Action):
    def __init__(self, option_strings, dest, help=None):
        super(ConfigHelpAction, self).__init__(
            option_strings, dest, nargs=0, help=help)

    def __call__(self, parser, namespace, values, option_string=None):
        from .prettyprint import pretty_print_dict, PrettyPrintConfig

        header = entrypoint_configurables[parser.prog].__name__
        config = build_config(parser.prog, True)
        pretty_print_dict(
            {
                header: modify_config_for_print(config),
            },
            config=PrettyPrintConfig(out=sys.stderr)
        )
        sys.exit(1)


def add_generic_args(parser):
    """Adds a set of arguments common to all tracedoc commands.
    """
    parser.add_argument(
        '--version',
        action="version",
        version="%(prog)s " + __version__)
    parser.add_argument(
        '--config',
        help="list the valid config keys and their current effective values",
        action=ConfigHelpAction,
    )
    parser.add_argument(
        '--log-level',
        default='INFO',
        choices=('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        help="set the log level by name.",
        action=LogLevelAction,
    )


def add_tracking_args(parser):
    """Adds arguments flagging subtrees of the tracked document.
    """
    parser.add_argument(
        '--opaque',
        action='append',
        metavar='PATH',
        help="report the subtree at PATH as one value (repeatable).")
    parser.add_argument(
        '--ignore',
        action='append',
        metavar='PATH',
        help="leave the subtree at PATH out of the diff (repeatable).")


def add_dispatch_args(parser):
    """Adds arguments for commands that dispatch diffs to watchers.
    """
    parser.add_argument(
        '-w', '--watch',
        action='append',
        metavar='PATH',
        help="report changes of PATH through a changeset (repeatable).")
    parser.add_argument(
        '--strategy',
        default='auto',
        choices=dispatch_strategies,
        help="which side of the single path lookup to iterate when dispatching.")


def add_prettyprint_args(parser):
    """Adds optional arguments for controlling pretty print behavior.
    """
    parser.add_argument(
        '--no-color',
        dest='use_color',
        action="store_false",
        default=True,
        help=("prevent use of ANSI color code escapes for text output")
    )


def prettyprint_config_from_args(args, **kwargs):
    from .prettyprint import PrettyPrintConfig
    return PrettyPrintConfig(
        use_color=getattr(args, 'use_color', True),
        show_pending=getattr(args, 'show_pending', True),
        **kwargs
    )
