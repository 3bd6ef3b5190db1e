#!/usr/bin/env python3
"""
Tests for command-line configuration (mtree.config)
Run from project root: python scripts/test/test_config.py
"""

import json
import logging
import sys
import tempfile
from pathlib import Path

from runner import TestRunner

from mtree import __version__
from mtree.config import Config, Mode


def assert_error(config: Config, fragment: str):
    assert config.mode == Mode.ERROR, f"Expected an error config, got {config!r}"
    assert fragment in config.error, f"{fragment!r} not in {config.error!r}"


def test_defaults():
    config = Config.from_args([])
    assert config.is_render
    assert config.root_dir == '.'
    assert config.max_depth == 2
    assert config.max_dir_length is None
    assert config.max_total_length is None
    assert config.log_level == logging.WARNING
    assert config.log_file is None


def test_help_and_version_messages():
    config = Config.from_args(['--help'])
    assert config.mode == Mode.MESSAGE
    assert config.message.startswith('Usage: mtree')
    for flag in ['-D N', '-L N', '-T N', '--config', '--version']:
        assert flag in config.message, f"Help text does not mention {flag}"

    config = Config.from_args(['--version'])
    assert config.mode == Mode.MESSAGE
    assert config.message.startswith(f'mtree (mini tree) {__version__}')

    # Recognized after other arguments too
    config = Config.from_args(['-D', '3', '--version'])
    assert config.mode == Mode.MESSAGE


def test_all_flags():
    with tempfile.TemporaryDirectory() as tmp:
        config = Config.from_args(['-D', '3', '-L', '5', '-T', '100', tmp])

    assert config.is_render
    assert config.root_dir == tmp
    assert config.max_depth == 3
    assert config.max_dir_length == 5
    assert config.max_total_length == 100


def test_zero_length_limits_allowed():
    config = Config.from_args(['-L', '0', '-T', '0'])
    assert config.is_render
    assert config.max_dir_length == 0
    assert config.max_total_length == 0


def test_invalid_numbers():
    assert_error(Config.from_args(['-D', '0']), 'max_depth must be at least 1')
    assert_error(Config.from_args(['-L', '-1']), 'max_dir_length must be at least 0')
    assert_error(Config.from_args(['-T', 'many']), 'invalid int value')
    assert_error(Config.from_args(['-D']), 'expected one argument')


def test_unexpected_arguments():
    with tempfile.TemporaryDirectory() as tmp:
        assert_error(Config.from_args([tmp, tmp]), 'unrecognized arguments')
    assert_error(Config.from_args(['--bogus']), 'unrecognized arguments')


def test_root_validation():
    with tempfile.TemporaryDirectory() as tmp:
        missing = str(Path(tmp) / 'missing')
        assert_error(Config.from_args([missing]), 'root path not found')

        file_path = Path(tmp) / 'file.txt'
        file_path.write_text('')
        assert_error(Config.from_args([str(file_path)]), 'root path is not a directory')


def test_yaml_config_file_with_overrides():
    with tempfile.TemporaryDirectory() as tmp:
        config_path = Path(tmp) / 'mtree.yaml'
        config_path.write_text(
            f"root_dir: {tmp}\n"
            "max_depth: 4\n"
            "max_total_length: 10\n"
        )

        config = Config.from_args(['--config', str(config_path)])
        assert config.is_render
        assert config.root_dir == tmp
        assert config.max_depth == 4
        assert config.max_total_length == 10
        assert config.max_dir_length is None

        config = Config.from_args(['--config', str(config_path), '-D', '2', '.'])
        assert config.max_depth == 2
        assert config.root_dir == '.'
        assert config.max_total_length == 10


def test_json_config_file():
    with tempfile.TemporaryDirectory() as tmp:
        config_path = Path(tmp) / 'mtree.json'
        config_path.write_text(json.dumps({'max_dir_length': 7}))

        config = Config.from_args(['--config', str(config_path)])
        assert config.is_render
        assert config.max_dir_length == 7


def test_bad_config_files():
    with tempfile.TemporaryDirectory() as tmp:
        unknown_key = Path(tmp) / 'unknown.yaml'
        unknown_key.write_text("max_width: 3\n")
        assert_error(Config.from_args(['--config', str(unknown_key)]), 'unknown setting(s): max_width')

        wrong_type = Path(tmp) / 'wrong.yaml'
        wrong_type.write_text("max_depth: deep\n")
        assert_error(Config.from_args(['--config', str(wrong_type)]), 'max_depth must be an integer')

        empty_depth = Path(tmp) / 'empty_depth.yaml'
        empty_depth.write_text("max_depth:\n")
        assert_error(Config.from_args(['--config', str(empty_depth)]), 'max_depth cannot be empty')

        unsupported = Path(tmp) / 'mtree.toml'
        unsupported.write_text("max_depth = 3\n")
        assert_error(Config.from_args(['--config', str(unsupported)]), 'cannot read config file')

        broken = Path(tmp) / 'broken.yaml'
        broken.write_text("max_depth: [3\n")
        assert_error(Config.from_args(['--config', str(broken)]), 'cannot read config file')

        missing = Path(tmp) / 'missing.yaml'
        assert_error(Config.from_args(['--config', str(missing)]), 'cannot read config file')


def test_defaults_argument():
    config = Config.from_args([], defaults={'max_depth': 5})
    assert config.max_depth == 5

    config = Config.from_args(['-D', '1'], defaults={'max_depth': 5})
    assert config.max_depth == 1


def test_log_options():
    config = Config.from_args(['--log-level', 'debug', '--log-file', 'mtree.log'])
    assert config.is_render
    assert config.log_level == logging.DEBUG
    assert config.log_file == 'mtree.log'

    assert_error(Config.from_args(['--log-level', 'chatty']), 'Unknown log level')


def main():
    runner = TestRunner()
    tests = [
        ("Defaults", test_defaults),
        ("Help And Version", test_help_and_version_messages),
        ("All Flags", test_all_flags),
        ("Zero Length Limits", test_zero_length_limits_allowed),
        ("Invalid Numbers", test_invalid_numbers),
        ("Unexpected Arguments", test_unexpected_arguments),
        ("Root Validation", test_root_validation),
        ("YAML Config File", test_yaml_config_file_with_overrides),
        ("JSON Config File", test_json_config_file),
        ("Bad Config Files", test_bad_config_files),
        ("Defaults Argument", test_defaults_argument),
        ("Log Options", test_log_options),
    ]
    return runner.run_all(tests)


if __name__ == "__main__":
    exit_code = main()
    sys.exit(exit_code)
