"""svcgen: service scaffolding generator."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("svcgen")
except PackageNotFoundError:
    __version__ = "0.0.0"
