import argparse
import logging
import os
from enum import Enum
from typing import Any, Dict, List, Optional

import yaml

from .messages import get_help_message, get_version_message
from ..utils.helpers import load_config, merge_configs
from ..utils.logger import parse_log_level

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    'root_dir': '.',
    'max_depth': 2,
    'max_dir_length': None,
    'max_total_length': None,
}

# Smallest value accepted for each integer setting
MINIMUMS = {
    'max_depth': 1,
    'max_dir_length': 0,
    'max_total_length': 0,
}


class ConfigError(Exception):
    """Raised for arguments or config files that cannot be turned into a Config"""


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of printing usage and exiting"""

    def error(self, message):
        raise ConfigError(message)


class Mode(Enum):
    RENDER = 'render'
    MESSAGE = 'message'
    ERROR = 'error'


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog='mtree', add_help=False)
    parser.add_argument('root_dir', nargs='?', default=None)
    parser.add_argument('-D', dest='max_depth', type=int, default=None)
    parser.add_argument('-L', dest='max_dir_length', type=int, default=None)
    parser.add_argument('-T', dest='max_total_length', type=int, default=None)
    parser.add_argument('--config', dest='config_file', default=None)
    parser.add_argument('--log-level', dest='log_level', default='warning')
    parser.add_argument('--log-file', dest='log_file', default=None)
    parser.add_argument('--help', action='store_true')
    parser.add_argument('--version', action='store_true')
    return parser


def validate_settings(settings: Dict[str, Any]) -> Dict[str, Any]:
    """
    Check render settings loaded from a file or the command line

    Raises:
        ConfigError: on unknown keys, non-integer limits or out-of-range values
    """
    unknown = sorted(set(settings) - set(DEFAULT_CONFIG))
    if unknown:
        raise ConfigError(f"unknown setting(s): {', '.join(unknown)}")

    for key in ('root_dir', 'max_depth'):
        if key in settings and settings[key] is None:
            raise ConfigError(f"{key} cannot be empty")

    for key, minimum in MINIMUMS.items():
        value = settings.get(key)
        if value is None:
            continue
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"{key} must be an integer, got {value!r}")
        if value < minimum:
            raise ConfigError(f"{key} must be at least {minimum}, got {value}")

    root_dir = settings.get('root_dir')
    if root_dir is not None and not isinstance(root_dir, str):
        raise ConfigError(f"root_dir must be a string, got {root_dir!r}")

    return settings


class Config:
    """
    Normalized command-line configuration

    A Config is in exactly one mode: RENDER carries the root directory and
    the three limits, MESSAGE carries text to print verbatim (help, version)
    and ERROR carries a message to print as an error.
    """

    def __init__(
            self,
            mode: Mode = Mode.RENDER,
            root_dir: str = DEFAULT_CONFIG['root_dir'],
            max_depth: int = DEFAULT_CONFIG['max_depth'],
            max_dir_length: Optional[int] = None,
            max_total_length: Optional[int] = None,
            message: Optional[str] = None,
            error: Optional[str] = None,
            log_level: int = logging.WARNING,
            log_file: Optional[str] = None
    ):
        self.mode = mode
        self.root_dir = root_dir
        self.max_depth = max_depth
        self.max_dir_length = max_dir_length
        self.max_total_length = max_total_length
        self.message = message
        self.error = error
        self.log_level = log_level
        self.log_file = log_file

    @classmethod
    def new_message(cls, message: str) -> 'Config':
        return cls(mode=Mode.MESSAGE, message=message)

    @classmethod
    def new_error(cls, error: str) -> 'Config':
        return cls(mode=Mode.ERROR, error=error)

    @property
    def is_render(self) -> bool:
        return self.mode == Mode.RENDER

    @classmethod
    def from_args(cls, argv: List[str], defaults: Optional[Dict[str, Any]] = None) -> 'Config':
        """
        Build a Config from command-line arguments (without the program name)

        Settings are layered: built-in defaults, then `defaults`, then the
        file named by --config, then flags given on the command line.
        Problems never raise; they produce an ERROR config instead.

        Args:
            argv: Arguments such as ['-D', '3', 'src']
            defaults: Extra defaults applied before the config file

        Returns:
            Config in RENDER, MESSAGE or ERROR mode
        """
        if argv:
            if argv[0] == '--help':
                return cls.new_message(get_help_message())
            if argv[0] == '--version':
                return cls.new_message(get_version_message())

        try:
            return cls._parse(argv, defaults or {})
        except ConfigError as e:
            logger.debug(f"Rejected arguments {argv}: {e}")
            return cls.new_error(str(e))

    @classmethod
    def _parse(cls, argv: List[str], defaults: Dict[str, Any]) -> 'Config':
        args = build_parser().parse_args(argv)

        if args.help:
            return cls.new_message(get_help_message())
        if args.version:
            return cls.new_message(get_version_message())

        try:
            log_level = parse_log_level(args.log_level)
        except ValueError as e:
            raise ConfigError(str(e))

        settings = merge_configs(DEFAULT_CONFIG, validate_settings(dict(defaults)))

        if args.config_file:
            try:
                file_settings = load_config(args.config_file)
            except (OSError, ValueError, yaml.YAMLError) as e:
                raise ConfigError(f"cannot read config file {args.config_file}: {e}")
            settings = merge_configs(settings, validate_settings(file_settings))

        overrides = {
            key: getattr(args, key)
            for key in DEFAULT_CONFIG
            if getattr(args, key) is not None
        }
        settings = merge_configs(settings, validate_settings(overrides))

        root_dir = settings['root_dir']
        if not os.path.exists(root_dir):
            raise ConfigError(f"root path not found: {root_dir}")
        if not os.path.isdir(root_dir):
            raise ConfigError(f"root path is not a directory: {root_dir}")

        return cls(
            mode=Mode.RENDER,
            root_dir=root_dir,
            max_depth=settings['max_depth'],
            max_dir_length=settings['max_dir_length'],
            max_total_length=settings['max_total_length'],
            log_level=log_level,
            log_file=args.log_file
        )

    def __repr__(self):
        if self.mode == Mode.MESSAGE:
            return f"Config(mode={self.mode.value})"
        if self.mode == Mode.ERROR:
            return f"Config(mode={self.mode.value}, error={self.error!r})"
        return (
            f"Config(mode={self.mode.value}, root_dir={self.root_dir!r}, "
            f"max_depth={self.max_depth}, max_dir_length={self.max_dir_length}, "
            f"max_total_length={self.max_total_length})"
        )
