"""Domain layer for civiltime.

Contains the calendar, time-of-day, instant and duration engines. Everything
here is an immutable value or a pure function; nothing performs I/O.

Dependency rule: do not import from `civiltime.text` or `civiltime.entrypoints`.
"""
