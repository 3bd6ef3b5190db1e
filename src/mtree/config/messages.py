# Help and version text printed verbatim by run()

from .. import __version__

HELP_MESSAGE = """Usage: mtree [OPTION]... [DIRECTORY]
List the contents of DIRECTORY (the current directory by default) as a tree.

  -D N               descend at most N directory levels (default: 2, minimum: 1)
  -L N               render at most N entries from any single directory
  -T N               render at most N entries in total
  --config FILE      read default settings from a YAML or JSON file
  --log-level LEVEL  log at LEVEL (debug, info, warning, error; default: warning)
  --log-file FILE    also write log records to FILE
  --help             display this help and exit
  --version          output version information and exit

Directories below the depth limit are marked with [...]. A directory holding
more entries than -L allows ends with '... N more'. When -T stops the listing
early, a final '...' line marks where it stopped."""

VERSION_TEMPLATE = """mtree (mini tree) {version}

This is free software: you are free to change and redistribute it.
There is NO WARRANTY, to the extent permitted by law."""


def get_help_message() -> str:
    return HELP_MESSAGE


def get_version_message() -> str:
    return VERSION_TEMPLATE.format(version=__version__)
