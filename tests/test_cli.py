import json
import logging
from argparse import Namespace

import pytest

from trifuzz.cli.argtypes import parse_keyvals, parse_kv
from trifuzz.cli.commands import explain
from trifuzz.cli.main import main


def _out(capsys):
    return capsys.readouterr().out.splitlines()


def test_predict_inverter(capsys):
    main(["predict", "--system", "inverter", "x=0"])
    (line,) = _out(capsys)
    name, value = line.split(": ")
    assert name == "y"
    assert abs(float(value)) < 1e-6


def test_predict_two_inputs(capsys):
    main(["predict", "--system", "cruise", "distance=0.2", "speed=1.25"])
    (line,) = _out(capsys)
    assert line.startswith("throttle: -")


@pytest.mark.parametrize("kv", ["x=5", "q=1"])
def test_errors_exit_with_code_2(capsys, kv):
    with pytest.raises(SystemExit) as ei:
        main(["predict", "--system", "inverter", kv])
    assert ei.value.code == 2
    assert capsys.readouterr().err.startswith("error:")


def test_bad_pair_is_rejected_by_argparse(capsys):
    with pytest.raises(SystemExit):
        main(["predict", "--system", "inverter", "x:0"])


def test_cog_step_option(capsys):
    main(["--cog-step", "0.1", "predict", "--system", "inverter", "x=0.5"])
    (line,) = _out(capsys)
    assert float(line.split(": ")[1]) < 0.0


def test_sweep_one_input(capsys):
    main(["sweep", "--system", "inverter", "--start", "-1", "--stop", "1", "--by", "0.5"])
    lines = _out(capsys)
    assert lines[0] == "x => y"
    assert len(lines) == 6
    assert lines[3].startswith("+0.000000 => ")


def test_sweep_reports_dead_zone(capsys):
    main(["sweep", "--system", "inverter", "--start", "-2.5", "--stop", "-2", "--by", "0.25"])
    lines = _out(capsys)[1:]
    assert len(lines) == 3
    assert all(line.endswith("n/a") for line in lines)


def test_sweep_cross_table(capsys):
    main(["sweep", "--system", "grid", "--input", "input1", "--cross", "input2"])
    lines = _out(capsys)
    assert lines[0] == "output:"
    assert lines[1].startswith(" input1\\input2 |")
    # title, header, rule, 9 rows, rule
    assert len(lines) == 13


def test_explain_json(capsys):
    main(["explain", "--system", "inverter", "x=0.5", "--json"])
    res = json.loads(capsys.readouterr().out)
    assert res["inputs"]["x"]["degrees"] == pytest.approx({"zero": 0.5, "positive": 0.5})
    fired = res["outputs"]["y"]["fired"]
    assert [f["rule"] for f in fired] == [1, 2]
    assert res["outputs"]["y"]["value"] < 0.0


def test_explain_text_without_firing(capsys):
    main(["explain", "--system", "inverter", "x=9"])
    lines = _out(capsys)
    assert lines[0] == "Input: x = 9 -> -"
    assert lines[1] == "Output: y = undefined (no rule fired)"


def test_show_rules(capsys):
    main(["show", "--system", "inverter", "--rules"])
    lines = _out(capsys)
    assert lines[0] == "System contains 3 rules of inferential mechanism:"
    assert len(lines) == 4


def test_show_bad_index(capsys):
    with pytest.raises(SystemExit) as ei:
        main(["show", "--system", "inverter", "--input", "3"])
    assert ei.value.code == 2


def test_run_json(tmp_path, capsys):
    cfg = tmp_path / "run.json"
    cfg.write_text(json.dumps({
        "predict": {"system": "inverter", "kv": {"x": 0.0}},
        "show": {"system": "inverter", "rules": True},
    }))
    main(["run", "--config", str(cfg)])
    lines = _out(capsys)
    assert lines[0] == "[run] predict"
    assert lines[2] == "[run] show"


def test_run_yaml_with_settings(tmp_path, capsys):
    cfg = tmp_path / "run.yaml"
    cfg.write_text(
        "settings:\n"
        "  step: 0.25\n"
        "sweep:\n"
        "  - {system: inverter, start: 0, stop: 0.5, by: 0.5}\n"
        "  - {system: dual, at: [input=0]}\n"
    )
    main(["run", "--config", str(cfg)])
    lines = _out(capsys)
    assert lines.count("[run] sweep") == 2
    assert "x => y" in lines
    assert "input => output1 output2" in lines


def test_run_unknown_section(tmp_path):
    cfg = tmp_path / "run.yaml"
    cfg.write_text("learn: {}\n")
    with pytest.raises(SystemExit, match="unknown section"):
        main(["run", "--config", str(cfg)])


def test_parse_kv():
    assert parse_kv(" speed = 1.5") == ("speed", 1.5)
    assert parse_keyvals({"a": 1}) == {"a": 1.0}
    assert parse_keyvals(["a=1", ("b", 2)]) == {"a": 1.0, "b": 2.0}
    assert parse_keyvals(None) == {}


@pytest.mark.parametrize("settings", ["{step: 0}", "{bogus: 1}"])
def test_run_bad_settings_exit_with_code_2(tmp_path, capsys, settings):
    cfg = tmp_path / "run.yaml"
    cfg.write_text(f"settings: {settings}\nshow: {{system: inverter}}\n")
    with pytest.raises(SystemExit) as ei:
        main(["run", "--config", str(cfg)])
    assert ei.value.code == 2
    assert capsys.readouterr().err.startswith("error:")


def test_run_zero_sweep_step_is_rejected(tmp_path):
    cfg = tmp_path / "run.yaml"
    cfg.write_text("sweep: {system: inverter, by: 0}\n")
    with pytest.raises(SystemExit, match="must be > 0"):
        main(["run", "--config", str(cfg)])


def test_explain_zero_area(monkeypatch, capsys, narrow_output_system):
    monkeypatch.setattr(explain, "system_from_args", lambda args: narrow_output_system)
    explain.cmd_explain(Namespace(kv=[("x", 0.0)], json=False))
    lines = _out(capsys)
    assert lines[1] == "Output: y = undefined (zero area under the fired terms)"
    assert lines[2].startswith("  R0: if x is zero then y is tiny")


def test_verbose_turns_on_debug(monkeypatch, capsys):
    seen = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: seen.update(kw))
    main(["-v", "predict", "--system", "inverter", "x=0"])
    assert seen["level"] == logging.DEBUG
    main(["predict", "--system", "inverter", "x=0"])
    assert seen["level"] == logging.WARNING


def test_verbose_trace_reaches_the_log(caplog, capsys):
    caplog.set_level(logging.DEBUG, logger="trifuzz")
    main(["-v", "predict", "--system", "inverter", "x=0.5"])
    messages = [r.getMessage() for r in caplog.records]
    assert "y: range(-2.000000 to 1.000000)" in messages
