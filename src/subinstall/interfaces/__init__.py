"""Interfaces (application boundary) for subinstall.

Defines framework-free contracts: the `Namespace` and `NamespaceResolver`
ports, diagnostic value objects and sinks, and the error hierarchy shared by
the service layer and adapters. No installation rules live here.

Dependency rule: this package is independent; do not import from any other
`subinstall.*` modules. It may be imported by `subinstall.service_layer`,
`subinstall.adapters`, and `subinstall.bootstrap`.
"""
