"""Functional tests.

Purpose
- Drive the `civiltime` commands the way a user would and check what they
  print and how they exit.

Guidelines
- Assert on stdout for results and on stderr for errors and warnings.
- Keep logging out of the way (`--no-flight-recorder`); the e2e suite covers it.
"""
