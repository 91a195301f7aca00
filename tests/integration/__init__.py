"""Integration tests.

Purpose
- Exercise the real wiring: bootstrap, environment configuration and the
  Python namespace resolver working together.

Guidelines
- Use realistic configuration and setup/teardown per test (monkeypatch the env).
- Minimize mocking; build the real container.
- Marked 'integration' by the root conftest.
"""
