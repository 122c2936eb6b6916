"""Contract build step."""

from typing import Protocol, Sequence

from bulksender_deploy.models import BuildResult
from bulksender_deploy.services.command_runner import CommandRunner

DEFAULT_BUILD_COMMAND = ("bash", "shell-script/build.sh")


class BuildService(Protocol):
    def build(self) -> BuildResult:
        ...


class ShellBuildService:
    """Builds the contract by running the project's build script."""

    def __init__(self, command_runner: CommandRunner, console, command: Sequence[str] = DEFAULT_BUILD_COMMAND):
        self.command_runner = command_runner
        self.console = console
        self.command = tuple(command)

    def build(self) -> BuildResult:
        self.console.print(f"[blue]Building smart contract: {' '.join(self.command)}[/blue]")
        result = self.command_runner.run(self.command, check=False)
        return BuildResult(command=self.command, returncode=result.returncode)
