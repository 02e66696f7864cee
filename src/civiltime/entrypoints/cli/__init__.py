"""The ``civiltime`` command-line interface."""
