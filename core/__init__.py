"""Core of FlowTrans.

This package contains the host adapter, query handling and the translation service registry.
"""

from core.plugin import FlowPlugin
from core.version import VERSION

__all__: list[str] = ["VERSION", "FlowPlugin"]
