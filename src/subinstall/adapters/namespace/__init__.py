"""Namespace adapters.

- `memory`: dict-backed namespaces for tests and sandboxes.
- `python`: modules, classes, arbitrary objects and mappings of the running
  interpreter, plus lookup of the calling module.
"""

from .memory import InMemoryNamespace, InMemoryNamespaceResolver
from .python import (
    MappingNamespace,
    ObjectNamespace,
    PythonNamespaceResolver,
    caller_namespace,
)

__all__ = [
    "InMemoryNamespace",
    "InMemoryNamespaceResolver",
    "MappingNamespace",
    "ObjectNamespace",
    "PythonNamespaceResolver",
    "caller_namespace",
]
