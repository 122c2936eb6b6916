import dataclasses

import pytest

from bulksender_deploy.environments import ENVIRONMENTS, default_credentials_dir, get_environment
from bulksender_deploy.errors import DeployError


def test_networks_have_consistent_identifiers():
    testnet = get_environment("testnet")
    mainnet = get_environment("mainnet")

    assert testnet.contract_account_id == "nearsend.testnet"
    assert testnet.node_url == "https://rpc.testnet.near.org"
    assert mainnet.contract_account_id == "bulksender.near"
    assert mainnet.oracle_account_id == "fpo.opfilabs.near"
    assert mainnet.oracle_provider_id == "opfilabs.near"
    assert mainnet.node_url == "https://rpc.mainnet.near.org"

    for field in ("contract_account_id", "oracle_account_id", "oracle_provider_id", "node_url"):
        assert "testnet" not in getattr(mainnet, field)
        assert "mainnet" not in getattr(testnet, field)


def test_environments_are_immutable():
    with pytest.raises(TypeError):
        ENVIRONMENTS["devnet"] = ENVIRONMENTS["testnet"]

    with pytest.raises(dataclasses.FrozenInstanceError):
        ENVIRONMENTS["testnet"].node_url = "http://localhost:3030"


def test_unknown_network_is_rejected():
    with pytest.raises(DeployError, match="Supported networks: testnet, mainnet"):
        get_environment("betanet")


def test_default_credentials_dir_is_under_home(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))

    assert default_credentials_dir() == tmp_path / ".near-credentials"
