"""Shared domain models for bulksender-deploy."""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple, Union


@dataclass(frozen=True)
class Environment:
    """Static settings for one NEAR network."""

    network: str
    contract_account_id: str
    oracle_account_id: str
    oracle_provider_id: str
    node_url: str
    wasm_path: str


@dataclass(frozen=True)
class DeploySettings:
    """Per-run settings resolved from CLI options and the config file."""

    build_command: Tuple[str, ...] = ("bash", "shell-script/build.sh")
    wasm_path: Optional[str] = None
    credentials_dir: Optional[str] = None
    migrate_gas: int = 200_000_000_000_000
    set_oracle_gas: int = 30_000_000_000_000
    migrate_deposit: int = 0
    dry_run: bool = False


@dataclass(frozen=True)
class DeployContract:
    code: bytes = field(repr=False)

    def describe(self) -> str:
        return f"deploy_contract ({len(self.code)} bytes)"


@dataclass(frozen=True)
class FunctionCall:
    method_name: str
    args: Dict[str, Any]
    gas: int
    deposit: int = 0

    def encoded_args(self) -> bytes:
        return json.dumps(self.args, separators=(",", ":")).encode("utf-8")

    def describe(self) -> str:
        return (
            f"function_call {self.method_name}({self.encoded_args().decode('utf-8')}) "
            f"gas={self.gas} deposit={self.deposit}"
        )


Action = Union[DeployContract, FunctionCall]


@dataclass(frozen=True)
class TransactionRequest:
    """An ordered batch of actions applied atomically under one signature."""

    signer_id: str
    receiver_id: str
    actions: Tuple[Action, ...]


@dataclass(frozen=True)
class BuildResult:
    command: Tuple[str, ...]
    returncode: int

    @property
    def ok(self) -> bool:
        return self.returncode == 0
