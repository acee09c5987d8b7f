import io
import sys

import pytest

from net_sweep.errors import ProbeExecutionError
from net_sweep.main import main
from net_sweep.probers import ScriptedProber


def test_range_scenario_prints_only_reachable(capsys):
    """Диапазон 10.0.0.1-10.0.0.3, отвечает только 10.0.0.2"""
    prober = ScriptedProber({"10.0.0.2": True})

    code = main(["10.0.0.1", "10.0.0.3"], prober=prober)

    assert code == 0
    assert capsys.readouterr().out.splitlines() == ["10.0.0.2"]
    assert sorted(prober.calls) == ["10.0.0.1", "10.0.0.2", "10.0.0.3"]


def test_file_mode(tmp_path, capsys):
    path = tmp_path / "hosts.txt"
    path.write_text("alpha\nbeta\ngamma\n", encoding="utf-8")
    prober = ScriptedProber({"alpha": True, "gamma": True})

    code = main(["--file", str(path)], prober=prober)

    assert code == 0
    assert sorted(capsys.readouterr().out.splitlines()) == ["alpha", "gamma"]


def test_pipe_mode(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("one\ntwo\n"))
    prober = ScriptedProber({"two": True})

    code = main(["--pipe"], prober=prober)

    assert code == 0
    assert capsys.readouterr().out.splitlines() == ["two"]


def test_empty_file_is_not_an_error(tmp_path, capsys):
    path = tmp_path / "hosts.txt"
    path.write_text("", encoding="utf-8")
    prober = ScriptedProber()

    assert main(["-f", str(path)], prober=prober) == 0
    assert capsys.readouterr().out == ""
    assert prober.calls == []


@pytest.mark.parametrize("argv", [
    [],
    ["10.0.0.1", "10.0.0.2", "--pipe"],
    ["--file", "hosts.txt", "--pipe"],
    ["10.0.0.1"],
])
def test_invalid_combination_exits_without_probing(argv, capsys):
    prober = ScriptedProber()

    code = main(argv, prober=prober)

    assert code == 1
    assert prober.calls == []
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Ошибка:")


def test_bad_address_exits_non_zero(capsys):
    prober = ScriptedProber()

    assert main(["10.0.0.1", "10.0.0.300"], prober=prober) == 1
    assert "10.0.0.300" in capsys.readouterr().err
    assert prober.calls == []


def test_missing_file_exits_non_zero(tmp_path, capsys):
    prober = ScriptedProber()

    assert main(["--file", str(tmp_path / "nope.txt")], prober=prober) == 1
    assert "nope.txt" in capsys.readouterr().err


def test_invalid_option_value_exits_non_zero(capsys):
    assert main(["10.0.0.1", "10.0.0.2", "--count", "0"], prober=ScriptedProber()) == 1


def test_probe_failure_is_reported_and_run_completes(capsys):
    prober = ScriptedProber({
        "10.0.0.1": True,
        "10.0.0.2": ProbeExecutionError("10.0.0.2", "ping завершился с кодом 2"),
    })

    code = main(["10.0.0.1", "10.0.0.3"], prober=prober)

    captured = capsys.readouterr()
    assert code == 0
    assert captured.out.splitlines() == ["10.0.0.1"]
    assert "10.0.0.2" in captured.err


def test_verbose_prints_summary(capsys):
    prober = ScriptedProber({"10.0.0.1": True})

    assert main(["10.0.0.1", "10.0.0.2", "-v"], prober=prober) == 0

    captured = capsys.readouterr()
    assert captured.out.splitlines() == ["10.0.0.1"]
    assert "ИТОГИ СКАНИРОВАНИЯ" in captured.err


@pytest.mark.parametrize("content", [
    "ping:\n  count: \"3\"\n",
    "logging:\n  level: 10\n",
])
def test_wrong_config_types_exit_non_zero(tmp_path, capsys, content):
    path = tmp_path / "sweep.yaml"
    path.write_text(content, encoding="utf-8")
    prober = ScriptedProber()

    code = main(["10.0.0.1", "10.0.0.1", "--config", str(path)], prober=prober)

    assert code == 1
    assert prober.calls == []
    assert capsys.readouterr().err.startswith("Ошибка:")


def test_interrupt_while_reading_stdin(monkeypatch, capsys):
    """Ctrl-C во время чтения стандартного ввода завершает работу с кодом 130"""
    class InterruptedStream:
        def __iter__(self):
            yield "10.0.0.1\n"
            raise KeyboardInterrupt

    monkeypatch.setattr(sys, "stdin", InterruptedStream())
    prober = ScriptedProber()

    code = main(["--pipe"], prober=prober)

    assert code == 130
    assert prober.calls == []
    assert "прервано" in capsys.readouterr().err
