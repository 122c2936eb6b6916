import logging
import os
from typing import Any, Callable, Dict, Optional

from rich.console import Console

from .errors import BuildFailure, DeployError
from .errors_catalog import actionable_error
from .models import DeployContract, DeploySettings, Environment, FunctionCall, TransactionRequest
from .services.build import BuildService
from .services.chain_client import ChainClient

console = Console()
logger = logging.getLogger("bulksender_deploy")

Connector = Callable[[Environment], ChainClient]


def build_transaction(environment: Environment, code: bytes, settings: DeploySettings) -> TransactionRequest:
    """Deploy, migrate and configure the oracle in one atomic transaction."""
    contract_id = environment.contract_account_id
    return TransactionRequest(
        signer_id=contract_id,
        receiver_id=contract_id,
        actions=(
            DeployContract(code),
            FunctionCall(
                "migrate",
                {},
                gas=settings.migrate_gas,
                deposit=settings.migrate_deposit,
            ),
            FunctionCall(
                "set_oracle",
                {
                    "oracle_account_id": environment.oracle_account_id,
                    "oracle_provider_id": environment.oracle_provider_id,
                },
                gas=settings.set_oracle_gas,
            ),
        ),
    )


class MigrationRunner:
    def __init__(
        self,
        environment: Environment,
        build_service: BuildService,
        connector: Connector,
        settings: Optional[DeploySettings] = None,
        output: Console = console,
    ):
        self.environment = environment
        self.build_service = build_service
        self.connector = connector
        self.settings = settings or DeploySettings()
        self.console = output

    @property
    def wasm_path(self) -> str:
        return self.settings.wasm_path or self.environment.wasm_path

    def read_contract(self) -> bytes:
        if not os.path.isfile(self.wasm_path):
            raise DeployError(actionable_error("wasm_missing", path=self.wasm_path))
        with open(self.wasm_path, "rb") as file_obj:
            return file_obj.read()

    def build(self):
        result = self.build_service.build()
        if not result.ok:
            raise BuildFailure(
                actionable_error(
                    "build_failed",
                    returncode=str(result.returncode),
                    command=" ".join(result.command),
                )
            )
        self.console.print("[green]Smart contract built.[/green]")

    def print_plan(self, transaction: TransactionRequest):
        self.console.print(f"[bold blue]Network:[/bold blue] {self.environment.network} ({self.environment.node_url})")
        self.console.print(f"[bold blue]Signer:[/bold blue] {transaction.signer_id}")
        self.console.print(f"[bold blue]Receiver:[/bold blue] {transaction.receiver_id}")
        for index, action in enumerate(transaction.actions, start=1):
            self.console.print(f"  {index}. {action.describe()}")

    def print_outcomes(self, result: Dict[str, Any]):
        receipts = result.get("receipts_outcome", [])
        self.console.print(receipts)
        for receipt in receipts:
            self.console.print(receipt.get("outcome"))

    def dry_run(self) -> int:
        logger.info("Dry run: skipping build and submission.")
        if os.path.isfile(self.wasm_path):
            code = self.read_contract()
        else:
            logger.warning("Contract binary %s not found; planning with an empty binary.", self.wasm_path)
            code = b""
        self.print_plan(build_transaction(self.environment, code, self.settings))
        return 0

    def run(self) -> int:
        """Build, connect, submit and print. SDK errors propagate to the caller."""
        logger.info("Starting migration on %s...", self.environment.network)

        if self.settings.dry_run:
            return self.dry_run()

        try:
            self.build()
        except BuildFailure as exc:
            self.console.print("[bold red]Error:[/bold red] Failed to build smart contract")
            logger.error(str(exc))
            return 1

        client = self.connector(self.environment)
        transaction = build_transaction(self.environment, self.read_contract(), self.settings)
        self.print_plan(transaction)

        result = client.submit_transaction(transaction)
        self.print_outcomes(result)
        logger.info("Migration submitted to %s.", transaction.receiver_id)
        return 0
