"""
Gatekeeper Error Hierarchy

Validation outcomes are returned as data (ValidationResult) and never raised.
The exceptions below cover the surrounding plumbing: loading configuration
and reading manifest files from disk.
"""


class GatekeeperError(Exception):
    """Base exception for all gatekeeper errors."""
    pass


class ConfigurationError(GatekeeperError):
    """Error in validator configuration.

    Raised when a configuration file cannot be parsed, or when a
    configuration value (from a file, the environment or the CLI) is invalid.
    """
    pass


class ManifestLoadError(GatekeeperError):
    """A manifest file could not be read or parsed.

    Attributes:
        path: Path of the file that failed to load
        suggestion: Optional hint on how to fix the problem
    """

    def __init__(self, message: str, path: str = None, suggestion: str = None):
        super().__init__(message)
        self.path = path
        self.suggestion = suggestion
