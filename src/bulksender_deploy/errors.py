"""Domain errors for bulksender-deploy."""


class DeployError(RuntimeError):
    """Raised when the deployment cannot continue safely."""


class BuildFailure(DeployError):
    """Raised when the contract build exits with a non-zero status."""


class CredentialStoreUnavailable(DeployError):
    """Raised when the local key store cannot provide a signing key."""


class NetworkUnreachable(DeployError):
    """Raised when the network node cannot be reached."""
