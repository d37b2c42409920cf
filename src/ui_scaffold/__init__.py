"""ui-scaffold: copy registry components into a consumer project.

Import from submodules:
- version: __version__
- operations.install: run_install (full add workflow)
- operations.resolve: resolve (dependency closure)
"""

from ui_scaffold.version import __version__ as __version__
