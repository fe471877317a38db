"""Tests for the console loggers."""

from chip8core import Machine, UnknownOpcodeError
from chip8core.logging import ConsoleLogger, MachineLogger


def test_level_filtering(capsys):
    logger = ConsoleLogger(name="test", log_level="INFO", use_colors=False, show_timestamps=False)

    logger.debug("hidden")
    logger.info("shown")
    logger.error("also shown")

    out = capsys.readouterr().out.splitlines()
    assert out == ["[    INFO][test] shown", "[   ERROR][test] also shown"]


def test_critical_level_is_silent(capsys):
    logger = ConsoleLogger(log_level="CRITICAL", use_colors=False)

    logger.error("nothing")

    assert capsys.readouterr().out == ""


def test_machine_logger_events(capsys):
    logger = MachineLogger(log_level="DEBUG", use_colors=False, show_timestamps=False)
    machine = Machine(seed=0, logger=logger)

    machine.load(bytes(35))
    machine.reset()
    logger.log_failure(UnknownOpcodeError(0xF0FF, 0x200), 0x200)

    out = capsys.readouterr().out
    assert "[Machine] Loaded program: 35 bytes (1.0% of program space)" in out
    assert "[Machine] Machine reset" in out
    assert "UnknownOpcodeError at pc=0x200: Unknown opcode 0xF0FF" in out
