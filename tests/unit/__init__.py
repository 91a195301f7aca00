"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- No real modules or environment; use in-memory namespaces and fakes.
- Prefer behavior-centric assertions over implementation details.
- Keep tests small, fast, and deterministic.
"""
