"""Generate markdown documentation from annotated bash helper scripts."""

__version__ = "0.1.0"
