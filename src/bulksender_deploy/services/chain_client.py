"""NEAR network access for bulksender-deploy."""

import logging
from typing import Any, Dict, Optional, Protocol

import near_api.account
import near_api.providers
import near_api.signer
import near_api.transactions
import requests

from bulksender_deploy.errors import CredentialStoreUnavailable, DeployError, NetworkUnreachable
from bulksender_deploy.errors_catalog import actionable_error
from bulksender_deploy.models import Action, DeployContract, Environment, FunctionCall, TransactionRequest
from bulksender_deploy.services.key_store import FileKeyStore

logger = logging.getLogger("bulksender_deploy")


class ChainClient(Protocol):
    account_id: str

    def submit_transaction(self, transaction: TransactionRequest) -> Dict[str, Any]:
        ...


class NearChainClient:
    """Signs and submits transactions on behalf of one NEAR account."""

    def __init__(self, account, account_id: str, node_url: str, sdk=near_api):
        self.account = account
        self.account_id = account_id
        self.node_url = node_url
        self.sdk = sdk

    def to_sdk_action(self, action: Action):
        if isinstance(action, DeployContract):
            return self.sdk.transactions.create_deploy_contract_action(action.code)
        if isinstance(action, FunctionCall):
            return self.sdk.transactions.create_function_call_action(
                action.method_name,
                action.encoded_args(),
                action.gas,
                action.deposit,
            )
        raise DeployError(f"Unsupported action type: {type(action).__name__}")

    def submit_transaction(self, transaction: TransactionRequest) -> Dict[str, Any]:
        if transaction.signer_id != self.account_id:
            raise DeployError(
                f"Transaction signer {transaction.signer_id} does not match "
                f"connected account {self.account_id}."
            )

        actions = [self.to_sdk_action(action) for action in transaction.actions]
        logger.debug(
            "Submitting %s actions to %s via %s",
            len(actions),
            transaction.receiver_id,
            self.node_url,
        )
        # near-api-py only exposes batched actions through this method.
        return self.account._sign_and_submit_tx(transaction.receiver_id, actions)


def connect(
    environment: Environment,
    credentials_dir: Optional[str] = None,
    key_store: Optional[FileKeyStore] = None,
    sdk=near_api,
) -> NearChainClient:
    """Open an authenticated session for the environment's contract account."""
    key_store = key_store or FileKeyStore(credentials_dir)
    account_id = environment.contract_account_id
    secret_key = key_store.get_secret_key(environment.network, account_id)

    logger.info("Connecting to %s at %s as %s", environment.network, environment.node_url, account_id)
    provider = sdk.providers.JsonProvider(environment.node_url)
    try:
        key_pair = sdk.signer.KeyPair(secret_key)
    except (ValueError, TypeError) as exc:
        raise CredentialStoreUnavailable(
            actionable_error(
                "credentials_file_invalid",
                path=str(key_store.key_path(environment.network, account_id)),
            )
        ) from exc
    signer = sdk.signer.Signer(account_id, key_pair)

    try:
        account = sdk.account.Account(provider, signer, account_id)
    except (
        requests.exceptions.ConnectionError,
        requests.exceptions.Timeout,
        requests.exceptions.HTTPError,
    ) as exc:
        raise NetworkUnreachable(
            actionable_error(
                "node_unreachable",
                network=environment.network,
                node_url=environment.node_url,
            )
        ) from exc

    return NearChainClient(account, account_id=account_id, node_url=environment.node_url, sdk=sdk)
