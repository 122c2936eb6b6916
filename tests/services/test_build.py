import sys

from rich.console import Console

from bulksender_deploy.services.build import DEFAULT_BUILD_COMMAND, ShellBuildService
from bulksender_deploy.services.command_runner import CommandRunner


class DummyLogger:
    def debug(self, *_args, **_kwargs):
        return None

    def warning(self, *_args, **_kwargs):
        return None


def build_service(command):
    return ShellBuildService(CommandRunner(logger=DummyLogger()), console=Console(quiet=True), command=command)


def test_default_build_command_runs_build_script():
    assert DEFAULT_BUILD_COMMAND == ("bash", "shell-script/build.sh")


def test_successful_build_reports_ok():
    result = build_service([sys.executable, "-c", "pass"]).build()

    assert result.ok
    assert result.returncode == 0


def test_failing_build_returns_result_instead_of_raising():
    result = build_service([sys.executable, "-c", "import sys; sys.exit(4)"]).build()

    assert not result.ok
    assert result.returncode == 4
    assert result.command[0] == sys.executable
