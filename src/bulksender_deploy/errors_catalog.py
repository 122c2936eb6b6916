"""Actionable error catalog for bulksender-deploy."""

from typing import Dict

_ERROR_MESSAGES: Dict[str, Dict[str, str]] = {
    "unknown_network": {
        "what": "Unknown network '{network}'. Supported networks: {supported}.",
        "next": "Pass `--network` with one of the supported networks.",
    },
    "build_failed": {
        "what": "Failed to build smart contract (exit code {returncode}).",
        "next": "Run `{command}` manually and fix the reported errors.",
    },
    "credentials_dir_missing": {
        "what": "Credential directory not found: {path}",
        "next": "Run `near login --networkId {network}` or pass `--credentials-dir`.",
    },
    "credentials_file_missing": {
        "what": "No key file for {account_id} in {path}",
        "next": "Run `near login --networkId {network}` with the {account_id} account.",
    },
    "credentials_file_invalid": {
        "what": "Key file {path} is unreadable or malformed.",
        "next": "Re-create it with `near login` or check its permissions.",
    },
    "node_unreachable": {
        "what": "Could not reach {network} node at {node_url}.",
        "next": "Check your network connection and the RPC endpoint status.",
    },
    "wasm_missing": {
        "what": "Contract binary not found: {path}",
        "next": "Check `wasm_path` or the output location of the build script.",
    },
}


def actionable_error(code: str, **kwargs: str) -> str:
    if code not in _ERROR_MESSAGES:
        raise KeyError(f"Unknown error catalog key: {code}")

    template = _ERROR_MESSAGES[code]
    what = template["what"].format(**kwargs)
    next_step = template["next"].format(**kwargs)
    return f"{what} Suggested action: {next_step}"
