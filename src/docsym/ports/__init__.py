"""Port interfaces for docsym.

Ports define the contracts that adapters must implement, following the
Dependency Inversion Principle. The request handler depends only on these
abstractions, not concrete implementations.
"""

from docsym.ports.store import DocumentStorePort
from docsym.ports.syntax import SyntaxTreeProviderPort

__all__ = [
    "DocumentStorePort",
    "SyntaxTreeProviderPort",
]
