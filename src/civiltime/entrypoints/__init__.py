"""Entrypoints (inbound adapters) for civiltime.

Expose the library to the outside world through the command line. Parse and
validate inputs, call into `civiltime.domain` and `civiltime.text`, and present
results.
"""
