"""Adapters (infrastructure) for subinstall.

Provide concrete implementations of the interface ports: namespaces backed by
real Python objects or by plain dictionaries, and diagnostic sinks writing to
`logging`, to `warnings`, or to an in-memory list.

Dependency rule: may import `subinstall.interfaces`; the interfaces must not
import this package.
"""
