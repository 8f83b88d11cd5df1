import pytest
import re
from crr import cli
from crr.pricing.tree import price

def test_demo_output(capsys, monkeypatch):
    monkeypatch.delenv("CRR_CONFIG", raising=False)
    assert cli.main([]) == 0
    out = capsys.readouterr().out
    m = re.fullmatch(r"The American call option price is: (\d+\.\d{2})\n", out)
    assert m
    assert m.group(1) == f"{price(100, 100, 0.05, 1, 100, 0.2):.2f}"

def test_overrides_from_config_file(tmp_path, capsys):
    yml = tmp_path/"c.yaml"
    yml.write_text("pricing:\n  days: 365\n")
    assert cli.main(["--config", str(yml), "--steps", "200"]) == 0
    out = capsys.readouterr().out
    assert out.strip().endswith(f"{price(100, 100, 0.05, 365, 200, 0.2):.2f}")

def test_library_error_exit_code(capsys, monkeypatch):
    monkeypatch.delenv("CRR_CONFIG", raising=False)
    assert cli.main(["--sigma", "0"]) == 2
    assert "error:" in capsys.readouterr().err
    assert cli.main(["--steps", "0"]) == 2

def test_convergence_table_printed(capsys, monkeypatch):
    monkeypatch.delenv("CRR_CONFIG", raising=False)
    assert cli.main(["--days", "365", "--convergence"]) == 0
    out = capsys.readouterr().out
    assert "black_scholes" in out and "1000" in out

@pytest.mark.parametrize("flag", ["--spot", "--strike"])
def test_convergence_bad_input_exit_code(capsys, monkeypatch, flag):
    monkeypatch.delenv("CRR_CONFIG", raising=False)
    assert cli.main(["--days", "365", "--convergence", flag, "0"]) == 2
    assert "error:" in capsys.readouterr().err

def test_convergence_uses_configured_steps(capsys, monkeypatch):
    monkeypatch.delenv("CRR_CONFIG", raising=False)
    assert cli.main(["--days", "365", "--steps", "7", "--convergence"]) == 0
    first_cols = [line.split()[0] for line in capsys.readouterr().out.splitlines()[1:]]
    assert "7" in first_cols

def test_quoted_number_in_config_file(tmp_path, capsys):
    yml = tmp_path/"q.yaml"
    yml.write_text('pricing:\n  spot: "100"\n  days: "365"\n')
    assert cli.main(["--config", str(yml)]) == 0
    assert capsys.readouterr().out.strip().endswith(f"{price(100, 100, 0.05, 365, 100, 0.2):.2f}")

def test_unusable_config_value_exit_code(tmp_path, capsys):
    yml = tmp_path/"bad.yaml"
    yml.write_text('pricing:\n  spot: "abc"\n')
    assert cli.main(["--config", str(yml)]) == 2
    assert "pricing.spot" in capsys.readouterr().err
