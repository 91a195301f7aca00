"""subinstall test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Wiring of real adapters through the bootstrap and configuration.
- functional/   : User-visible flows and features tested end-to-end at the boundary.
- contract/     : Shared behavior/invariants enforced across multiple implementations.
- fixtures/     : Shared pytest fixtures (no tests here).

General guidance
- Keep unit fast and deterministic (no real I/O); prefer fakes over mocks at boundaries.
- Integration builds the real container from environment configuration.
- Functional asserts user-observable results, not internals.
- Contract parametrizes implementations to ensure consistent behavior.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, integration, functional, contract (added per folder), property
"""
