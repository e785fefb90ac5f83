"""quotekit test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- functional/   : User-visible CLI flows tested at the boundary.
- e2e/          : Whole-process CLI runs covering logging and the flight recorder.

General guidance
- Keep unit fast and deterministic; no real I/O.
- Functional asserts user-observable results, not internals.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
