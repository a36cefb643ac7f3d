# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os

from traitlets import Unicode, Enum, Bool, HasTraits, List
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound

from .dispatch import dispatch_strategies


class TracedocConfigurable(HasTraits):

    def configured_traits(self, cls):
        traits = cls.class_own_traits(config=True)
        c = {}
        for name, _ in traits.items():
            c[name] = getattr(self, name)
        return c


_config_cache = {}
def config_instance(cls):
    if cls in _config_cache:
        return _config_cache[cls]
    instance = _config_cache[cls] = cls()
    return instance


def config_path():
    """Directories searched for tracedoc_config.json, highest priority first."""
    return [os.getcwd(), os.path.join(os.path.expanduser('~'), '.tracedoc')]


def _load_config_files(basefilename, path=None):
    """Load config files (json) by filename and path.

    yield each config object in turn.
    """

    if not isinstance(path, list):
        path = [path]
    for path in path[::-1]:
        # path list is in descending priority order, so load files backwards:
        loader = JSONFileConfigLoader(basefilename+'.json', path=path)
        config = None
        try:
            config = loader.load_config()
        except ConfigFileNotFound:
            pass
        if config:
            yield config


def recursive_update(target, new, include_none):
    """Recursively update one dictionary using another.

    None values will delete their keys.
    """
    for k, v in new.items():
        if isinstance(v, dict):
            if k not in target:
                target[k] = {}
            recursive_update(target[k], v, include_none)
            if not include_none and not target[k]:
                # Prune empty subdicts
                del target[k]

        elif not include_none and v is None:
            target.pop(k, None)

        else:
            target[k] = v


def build_config(entrypoint, include_none=False):
    if entrypoint not in entrypoint_configurables:
        raise ValueError('Config for entrypoint name %r is not defined! Accepted values are %r.' % (
            entrypoint, list(entrypoint_configurables.keys())
        ))

    # Get config from disk:
    disk_config = {}
    for c in _load_config_files('tracedoc_config', path=config_path()):
        recursive_update(disk_config, c, include_none)

    config = {}
    configurable = entrypoint_configurables[entrypoint]
    for c in reversed(configurable.mro()):
        if issubclass(c, TracedocConfigurable):
            recursive_update(config, config_instance(c).configured_traits(c), include_none)
            if (c.__name__ in disk_config):
                recursive_update(config, disk_config[c.__name__], include_none)

    return config


def get_defaults_for_argparse(entrypoint):
    return build_config(entrypoint)


class Global(TracedocConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class _Printing(Global):

    use_color = Bool(
        True,
        help="use ANSI color code escapes for text output.",
    ).tag(config=True)


class ShowApp(_Printing):

    show_pending = Bool(
        True,
        help="mark values changed since the last commit.",
    ).tag(config=True)


class DiffApp(_Printing):

    opaque = List(
        Unicode(),
        default_value=[],
        help="paths of subtrees reported as one value.",
    ).tag(config=True)

    ignore = List(
        Unicode(),
        default_value=[],
        help="paths of subtrees left out of the diff.",
    ).tag(config=True)

    watch = List(
        Unicode(),
        default_value=[],
        help="paths to report through a changeset dispatch.",
    ).tag(config=True)

    strategy = Enum(
        dispatch_strategies,
        'auto',
        help="which side of the single path lookup dispatch iterates.",
    ).tag(config=True)


class TdShow(ShowApp):
    pass


class TdDiff(DiffApp):
    pass


entrypoint_configurables = {
    'tdshow': TdShow,
    'tddiff': TdDiff,
}
