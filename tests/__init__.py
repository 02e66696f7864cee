"""civiltime test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- functional/   : User-visible flows and features tested at the CLI boundary.
- e2e/          : Full CLI runs exercising logging and the flight recorder.
- helpers/      : Shared utilities and Hypothesis strategies (no tests here).

General guidance
- Keep unit fast and deterministic (no real I/O).
- Functional asserts user-observable results, not internals.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Folder marks (unit, functional, e2e) are applied in conftest.py.
"""
