import json

import pytest

from bulksender_deploy.errors import CredentialStoreUnavailable
from bulksender_deploy.services.key_store import FileKeyStore


def write_key(root, network, account_id, payload):
    directory = root / network
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / f"{account_id}.json"
    path.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")
    return path


def test_key_store_reads_private_key(tmp_path):
    write_key(
        tmp_path,
        "testnet",
        "nearsend.testnet",
        {"account_id": "nearsend.testnet", "public_key": "ed25519:pub", "private_key": "ed25519:secret"},
    )

    assert FileKeyStore(tmp_path).get_secret_key("testnet", "nearsend.testnet") == "ed25519:secret"


def test_key_store_accepts_legacy_secret_key_field(tmp_path):
    write_key(tmp_path, "mainnet", "bulksender.near", {"secret_key": "ed25519:legacy"})

    assert FileKeyStore(tmp_path).get_secret_key("mainnet", "bulksender.near") == "ed25519:legacy"


def test_key_store_keys_are_scoped_by_network(tmp_path):
    write_key(tmp_path, "testnet", "bulksender.near", {"private_key": "ed25519:wrong-network"})

    with pytest.raises(CredentialStoreUnavailable, match="No key file for bulksender.near"):
        FileKeyStore(tmp_path).get_secret_key("mainnet", "bulksender.near")


def test_key_store_missing_directory(tmp_path):
    with pytest.raises(CredentialStoreUnavailable, match="Credential directory not found"):
        FileKeyStore(tmp_path / "nope").get_secret_key("testnet", "nearsend.testnet")


@pytest.mark.parametrize("payload", ["not json", {"account_id": "nearsend.testnet"}, ["ed25519:x"]])
def test_key_store_rejects_malformed_files(tmp_path, payload):
    write_key(tmp_path, "testnet", "nearsend.testnet", payload)

    with pytest.raises(CredentialStoreUnavailable, match="unreadable or malformed"):
        FileKeyStore(tmp_path).get_secret_key("testnet", "nearsend.testnet")


def test_key_store_defaults_to_home_credentials(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))

    assert FileKeyStore().root == tmp_path / ".near-credentials"
