"""Exceptions raised by bo operations.

The CLI layer converts these into user-facing errors; core code never
prints them itself.
"""


class BoError(Exception):
    """Base class for all bo failures."""


class ConfigError(BoError):
    """The bookmark config file is missing, unparseable, or invalid."""


class LaunchError(BoError):
    """An external program (browser, editor, picker) could not be run."""
