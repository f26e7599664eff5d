"""docsym error types.

All custom exceptions inherit from DocsymError to allow
catching any docsym-specific error. The extraction engine
itself never raises; these belong to the host layers.
"""


class DocsymError(Exception):
    """Base exception for all docsym errors."""

    pass


class ConfigurationError(DocsymError):
    """Invalid configuration."""

    pass


class SyntaxTreeError(DocsymError):
    """Source could not be turned into a syntax tree."""

    def __init__(self, message: str, uri: str | None = None) -> None:
        super().__init__(message)
        self.uri = uri


class DocumentNotFoundError(DocsymError):
    """Requested document is not held by the store."""

    def __init__(self, uri: str) -> None:
        super().__init__(f"Document not found: {uri}")
        self.uri = uri


class DocumentSupersededError(DocsymError):
    """Document changed while its outline was being computed."""

    def __init__(self, uri: str, expected_version: int, actual_version: int | None) -> None:
        super().__init__(
            f"Document {uri} superseded: expected version {expected_version},"
            f" found {actual_version}"
        )
        self.uri = uri
        self.expected_version = expected_version
        self.actual_version = actual_version
