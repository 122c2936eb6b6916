import logging
import os
import shlex
from functools import partial

import click
from rich.logging import RichHandler

from .core import MigrationRunner, console
from .environments import NETWORKS, get_environment
from .errors import DeployError
from .models import DeploySettings
from .services.build import DEFAULT_BUILD_COMMAND, ShellBuildService
from .services.chain_client import connect
from .services.command_runner import CommandRunner
from .services.config_loader import ConfigLoader

DEFAULT_CONFIG_FILE = ".bulksender-deploy.yml"


def _resolve_option(cli_value, config, key, default=None):
    if cli_value is not None:
        return cli_value
    if key in config:
        return config[key]
    return default


def _build_command(value):
    if value is None:
        return DEFAULT_BUILD_COMMAND
    if isinstance(value, str):
        return tuple(shlex.split(value))
    return tuple(value)


logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(rich_tracebacks=True, show_level=False, show_path=False)],
)


@click.command()
@click.option(
    "--network",
    required=False,
    type=click.Choice(NETWORKS),
    help="Target NEAR network.",
)
@click.option(
    "--config",
    required=False,
    type=click.Path(),
    help=f"Path to a YAML configuration file. Defaults to {DEFAULT_CONFIG_FILE} if present.",
)
@click.option(
    "--credentials-dir",
    required=False,
    type=click.Path(),
    help="Key store directory (default: ~/.near-credentials).",
)
@click.option("--verbose", is_flag=True, default=None, help="Enable verbose logging")
@click.option("--log-file", type=click.Path(), help="Path to log file")
@click.option(
    "--dry-run",
    is_flag=True,
    default=None,
    help="Print the planned transaction without building or contacting the network.",
)
def main(network, config, credentials_dir, verbose, log_file, dry_run):
    """Build the bulk sender contract, deploy it and run its migration."""
    logger = logging.getLogger("bulksender_deploy")

    try:
        config_loader = ConfigLoader()
        resolved_config = config
        if resolved_config is None:
            default_config_path = os.path.join(os.getcwd(), DEFAULT_CONFIG_FILE)
            if os.path.exists(default_config_path):
                resolved_config = default_config_path

        config_values = config_loader.load(resolved_config)
    except DeployError as exc:
        raise click.ClickException(str(exc)) from exc

    network = _resolve_option(network, config_values, "network")
    credentials_dir = _resolve_option(credentials_dir, config_values, "credentials_dir")
    verbose = bool(_resolve_option(verbose, config_values, "verbose", default=False))
    log_file = _resolve_option(log_file, config_values, "log_file")
    dry_run = bool(_resolve_option(dry_run, config_values, "dry_run", default=False))

    if not network:
        raise click.ClickException("Missing required option '--network' (or provide it in config).")

    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
        file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
        logger.addHandler(file_handler)

    try:
        environment = get_environment(network)
        settings = DeploySettings(
            build_command=_build_command(config_values.get("build_command")),
            wasm_path=config_values.get("wasm_path"),
            credentials_dir=credentials_dir,
            migrate_gas=int(config_values.get("migrate_gas", DeploySettings.migrate_gas)),
            set_oracle_gas=int(config_values.get("set_oracle_gas", DeploySettings.set_oracle_gas)),
            migrate_deposit=int(config_values.get("migrate_deposit", DeploySettings.migrate_deposit)),
            dry_run=dry_run,
        )
    except (DeployError, TypeError, ValueError) as exc:
        raise click.ClickException(str(exc)) from exc

    runner = MigrationRunner(
        environment=environment,
        build_service=ShellBuildService(
            CommandRunner(logger=logger),
            console=console,
            command=settings.build_command,
        ),
        connector=partial(connect, credentials_dir=settings.credentials_dir),
        settings=settings,
    )

    raise SystemExit(runner.run())


def migrate_testnet():
    main(args=["--network", "testnet"])


def migrate_mainnet():
    main(args=["--network", "mainnet"])


if __name__ == "__main__":
    main()
