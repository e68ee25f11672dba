"""
sdd-system - spec-driven development CLI core

Hosts the tech pack extension mechanism: installable bundles that declare
component types, skills, agents, lifecycle phases, and command handlers.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
