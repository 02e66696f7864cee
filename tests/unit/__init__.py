"""Unit tests.

Purpose
- Check one module of the library (calendar, time of day, instants,
  durations, text codec, config) or one CLI helper on its own.

Guidelines
- Build values directly; only go through the parser when the parser is the
  subject of the test.
- Pin exact results (fields, offsets, error kinds) rather than shapes.
- Property-based checks sit next to the example-based ones for the same layer.
"""
