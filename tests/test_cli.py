"""Tests for the command line entry point."""

import json

import pytest

from racingcar.cli import main, prompt_names, prompt_try_count
from racingcar.config import RaceSettings


def _answers(*values: str):
    queue = list(values)
    return lambda prompt: queue.pop(0)


def test_single_game_prints_rounds_and_winners(capsys) -> None:
    exit_code = main(["--names", "pobi,crew", "--rounds", "3", "--threshold", "0"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "pobi : ---" in out
    assert "crew : ---" in out
    assert out.rstrip().endswith("Winners: pobi, crew")


def test_zero_rounds_everyone_wins(capsys) -> None:
    assert main(["--names", "pobi,woni,jun", "--rounds", "0"]) == 0
    assert "Winners: pobi, woni, jun" in capsys.readouterr().out


def test_duplicate_names_fail(capsys) -> None:
    exit_code = main(["--names", "car1,car2,car1", "--rounds", "1"])

    assert exit_code == 1
    assert "Car names must not be duplicated." in capsys.readouterr().err


def test_negative_rounds_fail(capsys) -> None:
    assert main(["--names", "pobi", "--rounds", "-1"]) == 1
    assert "Try count must not be negative." in capsys.readouterr().err


def test_bad_settings_fail(capsys) -> None:
    assert main(["--names", "pobi", "--rounds", "1", "--threshold", "50"]) == 2
    assert "Invalid settings" in capsys.readouterr().err


def test_seeded_games_repeat(capsys) -> None:
    args = ["--names", "pobi,woni,jun", "--rounds", "5", "--seed", "42"]
    main(args)
    first = capsys.readouterr().out
    main(args)
    assert capsys.readouterr().out == first


def test_simulations_print_summary(capsys) -> None:
    exit_code = main(["--names", "pobi,crew", "--rounds", "3", "-n", "25", "--seed", "1"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "MONTE CARLO SIMULATION RESULTS" in out
    assert "25 simulations" in out


def test_export_writes_files(tmp_path, capsys) -> None:
    main(["--names", "pobi,crew", "--rounds", "2", "--threshold", "0", "--export", str(tmp_path)])

    data = json.loads((tmp_path / "race_results.json").read_text())
    assert data["winners"] == ["pobi", "crew"]
    assert (tmp_path / "race_results.csv").exists()


def test_prompt_names_retries_until_valid(capsys) -> None:
    names = prompt_names(RaceSettings(), read=_answers("pobi,pobi", "toolongname", "pobi,crew"))

    assert names == ["pobi", "crew"]
    out = capsys.readouterr().out
    assert out.count("[ERROR]") == 2


def test_prompt_try_count_retries_until_valid(capsys) -> None:
    try_count = prompt_try_count(read=_answers("three", "-2", "3"))

    assert try_count.value == 3
    out = capsys.readouterr().out
    assert "must be a number" in out
    assert "Try count must not be negative." in out


def test_missing_arguments_are_prompted(monkeypatch, capsys) -> None:
    monkeypatch.setattr("builtins.input", _answers("pobi,crew", "0"))
    assert main([]) == 0
    assert "Winners: pobi, crew" in capsys.readouterr().out


@pytest.mark.parametrize("count", ["0", "-5"])
def test_non_positive_simulations_fail(count: str, capsys) -> None:
    exit_code = main(["--names", "pobi,crew", "--rounds", "3", "-n", count, "--seed", "1"])

    captured = capsys.readouterr()
    assert exit_code == 1
    assert "Simulation count must be at least 1." in captured.err
    assert "Winners" not in captured.out
    assert "MONTE CARLO" not in captured.out
