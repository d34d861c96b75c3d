"""agents-md-kit: Install the agents.md package for OpenCode and Claude Code.

Import from submodules:
- version: __version__
- operations: install, install_target
"""

from agents_md_kit.version import __version__ as __version__
