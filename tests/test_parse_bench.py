from __future__ import annotations

import importlib.util
import logging
import sys
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "parse_bench.py"


@pytest.fixture
def bench(monkeypatch):
    monkeypatch.delenv("DEBUG", raising=False)
    spec = importlib.util.spec_from_file_location("parse_bench", SCRIPT)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    # Keep the script from replacing pytest's log capture handlers.
    monkeypatch.setattr(module.LoggerConfigurator, "configure", lambda self: None)
    return module


def test_cases_parse(bench):
    from simple_irc.message import parse_message

    for line in bench.CASES.values():
        parse_message(line)


def test_run_returns_timing_per_case(bench):
    results = bench.run(3)
    assert set(results) == {"parse_simple", "parse_complex"}
    assert all(t >= 0 for t in results.values())


def test_main_logs_results(bench, caplog):
    caplog.set_level(logging.INFO, logger="simple_irc")
    assert bench.main(["--iterations", "2"]) == 0
    msgs = [r.message for r in caplog.records]
    assert any(m.startswith("parse_simple:") and "us/call" in m for m in msgs)
    assert any(m.startswith("parse_complex:") for m in msgs)
    assert "Benchmark finished" in msgs


def test_main_rejects_non_positive_iterations(bench):
    with pytest.raises(SystemExit):
        bench.main(["--iterations", "0"])


def test_script_puts_project_root_on_path(bench):
    assert str(SCRIPT.parent.parent) in sys.path
