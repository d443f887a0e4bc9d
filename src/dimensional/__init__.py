import collections.abc
import configparser
import json
import logging
import os
import pathlib

from dimensional.core import iotools


# read version from installed package
from importlib.metadata import version
__version__ = version("dimensional")


_log = logging.getLogger(__name__)


class Environment(collections.abc.Mapping):
    """A collection of environmental settings."""

    def __init__(self, name: str=None) -> None:
        self.name = name or __package__
        """The name of the configuration section to select."""
        home = pathlib.Path('~').expanduser()
        paths = [
            pathlib.Path.cwd(), # The current working directory
            home, # The user's home directory
            home / '.config', # Linux standard (local)
            '/etc/dimensional', # Linux standard (global)
            os.environ.get('DIMENSIONAL_INI'), # A known environment variable
            pathlib.Path(__file__).parent, # The package top
        ]
        config = configparser.ConfigParser()
        path = iotools.search(paths, 'dimensional.ini')
        if path is not None:
            config.read(path)
            _log.debug("Read settings from %s", path)
        self._config = config[self.name] if config.has_section(self.name) else {}
        self.path = path

    def __len__(self) -> int:
        """The number of available parameter values."""
        return len(self._config)

    def __iter__(self):
        """Iterate over available parameter values."""
        yield from self._config

    def __getitem__(self, key: str):
        """Access parameter values by mapping key."""
        if key in self._config:
            return self._config[key]
        raise KeyError(
            f"[{self.name}] in {self.path} has no value for {key!r}"
        ) from None

    def __str__(self) -> str:
        return json.dumps(
            dict(self._config),
            indent=4,
            sort_keys=True,
        )

    def __repr__(self) -> str:
        return f"{self.name}({self.path}):\n{self}"
