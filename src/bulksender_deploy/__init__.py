"""
bulksender-deploy - build, deploy and migrate the bulk sender NEAR contract
"""

__version__ = "0.1.0"

from .core import MigrationRunner, build_transaction
from .errors import DeployError

__all__ = ["MigrationRunner", "build_transaction", "DeployError"]
