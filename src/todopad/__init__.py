"""todopad - a single-user task tracker."""

__version__ = "0.1.0"
