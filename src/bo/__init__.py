"""bo CLI entry point.

This package provides a Click-based launcher that opens named bookmarks
from a TOML config file. See `bo --help` for details.
"""

from bo.cli.cli import main as main
