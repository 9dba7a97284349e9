"""
Exception types raised by the transition tools.
"""


class ResolutionError(ValueError):
    """A block coordinate, location code or fixup target could not be resolved."""


class LocationLookupError(KeyError):
    """A location name does not match any regular or sub-location."""

    def __str__(self):
        # KeyError quotes its argument; keep the message readable
        return str(self.args[0]) if self.args else ""


class ConfigError(ValueError):
    """A configuration file holds a value that cannot be interpreted."""
