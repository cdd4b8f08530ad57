import pytest

import circuitgen.__main__ as cli
from circuitgen.validate import ValidationError


def test_main_writes_svg_and_tikz(tmp_path, capsys):
    svg_path = tmp_path / "out" / "art.svg"
    tikz_path = tmp_path / "out" / "art.tex"

    cli.main(
        [
            "--seed",
            "123456789012",
            "--svg-output-path",
            str(svg_path),
            "--tikz-output-path",
            str(tikz_path),
            "--check",
        ]
    )

    out = capsys.readouterr().out
    assert "Seed: 123456789012 (#123456789012)" in out
    assert "Checks: passed" in out
    assert svg_path.read_text(encoding="utf-8").startswith("<?xml")
    assert "\\begin{tikzpicture}" in tikz_path.read_text(encoding="utf-8")


def test_main_is_deterministic_for_a_seed(tmp_path):
    first = tmp_path / "a.svg"
    second = tmp_path / "b.svg"

    cli.main(["--seed", "42", "--svg-output-path", str(first)])
    cli.main(["--seed", "42", "--svg-output-path", str(second)])

    assert first.read_text(encoding="utf-8") == second.read_text(encoding="utf-8")


def test_main_frames_use_fresh_seeds(monkeypatch, capsys):
    seeds = iter([111, 222, 333])
    monkeypatch.setattr(cli, "parse_seed", lambda value: next(seeds))

    cli.main(["--frames", "3"])

    out = capsys.readouterr().out
    assert "Seed: 111" in out
    assert "Seed: 222" in out
    assert "Seed: 333" in out


def test_main_exits_when_checks_fail(monkeypatch):
    def _fail(scene):
        raise ValidationError("crossing")

    monkeypatch.setattr(cli, "check_scene", _fail)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--seed", "7", "--check"])
    assert excinfo.value.code == 1
