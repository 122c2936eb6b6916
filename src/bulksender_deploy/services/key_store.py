"""File-based key store compatible with `near login` credentials."""

import json
from pathlib import Path
from typing import Optional, Union

from bulksender_deploy.environments import default_credentials_dir
from bulksender_deploy.errors import CredentialStoreUnavailable
from bulksender_deploy.errors_catalog import actionable_error


class FileKeyStore:
    """Reads unencrypted keys laid out as `<root>/<network>/<account_id>.json`."""

    SECRET_FIELDS = ("private_key", "secret_key")

    def __init__(self, root: Optional[Union[str, Path]] = None):
        self.root = Path(root).expanduser() if root else default_credentials_dir()

    def key_path(self, network: str, account_id: str) -> Path:
        return self.root / network / f"{account_id}.json"

    def get_secret_key(self, network: str, account_id: str) -> str:
        if not self.root.is_dir():
            raise CredentialStoreUnavailable(
                actionable_error("credentials_dir_missing", path=str(self.root), network=network)
            )

        path = self.key_path(network, account_id)
        if not path.is_file():
            raise CredentialStoreUnavailable(
                actionable_error(
                    "credentials_file_missing",
                    account_id=account_id,
                    path=str(path.parent),
                    network=network,
                )
            )

        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise CredentialStoreUnavailable(
                actionable_error("credentials_file_invalid", path=str(path))
            ) from exc

        if isinstance(payload, dict):
            for field_name in self.SECRET_FIELDS:
                secret = payload.get(field_name)
                if isinstance(secret, str) and secret:
                    return secret

        raise CredentialStoreUnavailable(actionable_error("credentials_file_invalid", path=str(path)))
