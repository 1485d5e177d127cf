"""
Error types for Tessera graph loading, compilation and design-file export.
"""


class TesseraError(Exception):
    """Base exception for all Tessera errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class GraphError(TesseraError):
    """
    Raised when a component graph cannot be loaded or queried.

    Examples:
    - Malformed graph document
    - Reference to an unknown component type or instance
    - Redefinition of a built-in prefab type
    """

    pass


class ConfigError(TesseraError):
    """
    Raised when tessera.toml is missing or invalid.
    """

    pass


class CompilationError(TesseraError):
    """
    Raised when a target fails to compile a program.

    Examples:
    - Missing template or binding source file
    - Missing asset referenced by a binding
    - Invalid target options
    - Unknown target
    """

    pass


class HostnameResolutionError(CompilationError):
    """
    Raised when the hostname used for hot serving cannot be resolved.

    Only hot compilations resolve a hostname, so this never aborts a
    regular compilation.
    """

    pass


class ExporterError(TesseraError):
    """Base class for design-file export failures."""

    pass


class InvalidSourceFileError(ExporterError):
    """Raised when an exporter is given a file it cannot parse."""

    def __init__(self, message: str = "Invalid source file."):
        super().__init__(message)


class UnsupportedPlatformError(ExporterError):
    """Raised when an exporter is used on a host it does not support."""

    pass


class ExporterToolError(ExporterError):
    """
    Raised when the external design tool is missing or fails.

    The message of the underlying tool is preserved.
    """

    pass
