"""subinstall

Install callables into namespaces (modules, classes, objects, mappings) by
name, with a policy for what happens when the name is already taken: overwrite
with a notice, overwrite quietly, or refuse.
"""

from .api import (
    export,
    fatal_install_sub,
    install_installers,
    install_sub,
    reinstall_sub,
)

__all__ = [
    "__version__",
    "export",
    "fatal_install_sub",
    "install_installers",
    "install_sub",
    "reinstall_sub",
]
__version__ = "0.1.0"
