"""Per-network deployment settings."""

from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from bulksender_deploy.errors import DeployError
from bulksender_deploy.errors_catalog import actionable_error
from bulksender_deploy.models import Environment

WASM_PATH = "./target/res/bulk_sender.wasm"
CREDENTIALS_DIR_NAME = ".near-credentials"

ENVIRONMENTS: Mapping[str, Environment] = MappingProxyType(
    {
        "testnet": Environment(
            network="testnet",
            contract_account_id="nearsend.testnet",
            oracle_account_id="fpo.opfilabs.testnet",
            oracle_provider_id="opfilabs.testnet",
            node_url="https://rpc.testnet.near.org",
            wasm_path=WASM_PATH,
        ),
        "mainnet": Environment(
            network="mainnet",
            contract_account_id="bulksender.near",
            oracle_account_id="fpo.opfilabs.near",
            oracle_provider_id="opfilabs.near",
            node_url="https://rpc.mainnet.near.org",
            wasm_path=WASM_PATH,
        ),
    }
)

NETWORKS = tuple(ENVIRONMENTS)


def default_credentials_dir() -> Path:
    return Path.home() / CREDENTIALS_DIR_NAME


def get_environment(network: str, environments: Mapping[str, Environment] = ENVIRONMENTS) -> Environment:
    try:
        return environments[network]
    except KeyError:
        raise DeployError(
            actionable_error(
                "unknown_network",
                network=network,
                supported=", ".join(environments),
            )
        ) from None
