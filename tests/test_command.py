import pytest

from fieldbuilder.builder import BuilderError
from fieldbuilder.command import Command, main


def test_main_succeeds():
    assert main() == 0


def test_command_from_builder():
    command = (
        Command.builder()
        .executable("cargo")
        .arg("build")
        .arg("--release")
        .build()
    )
    assert command.executable == "cargo"
    assert command.args == ["build", "--release"]
    assert command.env == []
    assert command.current_dir is None


def test_command_env_and_current_dir():
    command = Command.builder().executable("cargo").env("A=1").current_dir("..").build()
    assert command.env == ["A=1"]
    assert command.current_dir == ".."


def test_command_requires_executable():
    with pytest.raises(BuilderError, match="executable"):
        Command.builder().arg("build").build()


def test_command_builder_name():
    assert type(Command.builder()).__name__ == "CommandBuilder"