"""Adapters package: command-line and user interface entry points."""
