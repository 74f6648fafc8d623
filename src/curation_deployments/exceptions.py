"""Custom exception classes for curation-deployments."""


class DeploymentError(Exception):
    """Base exception for deployment-related errors."""

    pass


class ConfigurationError(DeploymentError, ValueError):
    """Raised when chain configuration is missing or incomplete."""

    pass


class ForgeError(DeploymentError, RuntimeError):
    """Raised when a forge invocation fails or returns unreadable output."""

    pass


class VerificationError(DeploymentError, RuntimeError):
    """Raised when the block explorer rejects a verification request."""

    pass
