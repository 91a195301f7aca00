"""Bootstrap (composition root) for subinstall.

Assembles the installer at runtime: wires a concrete namespace resolver and
diagnostic sink into the service-layer `Installer`, reading configuration for
whatever the caller does not inject.

Import rules:
- The public facade (`subinstall.api`) imports *this* package.
- This package may import: `subinstall.adapters`, `subinstall.service_layer`,
  `subinstall.interfaces`, and `subinstall.config`.
- Inner layers must not import `subinstall.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap, build_sink

__all__ = ["AppContainer", "bootstrap", "build_sink"]
