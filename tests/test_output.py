"""Tests for console output and file export."""

import csv
import json

from racingcar.analysis import MonteCarloRunner
from racingcar.models import CarStatus, TryCount
from racingcar.output import ConsoleOutput, Exporter
from racingcar.simulation import FixedMoveStrategy, RaceRecord, RacingCarService


def _record() -> RaceRecord:
    service = RacingCarService()
    service.create_cars(["pobi", "crew"])
    record = RaceRecord()
    service.run(TryCount(2), FixedMoveStrategy(True), on_round=record.record_round)
    record.finish(service)
    return record


def test_format_status_draws_one_dash_per_step() -> None:
    assert ConsoleOutput.format_status(CarStatus("pobi", 3)) == "pobi : ---"
    assert ConsoleOutput.format_status(CarStatus("crew", 0)) == "crew : "


def test_print_round_and_winners(capsys) -> None:
    ConsoleOutput.print_round([CarStatus("pobi", 1), CarStatus("crew", 0)])
    ConsoleOutput.print_winners([CarStatus("pobi", 1), CarStatus("jun", 1)])

    out = capsys.readouterr().out
    assert out == "pobi : -\ncrew : \n\nWinners: pobi, jun\n"


def test_print_monte_carlo_summary(capsys) -> None:
    results = MonteCarloRunner(["pobi", "crew"], TryCount(3), seed=2).run(20)
    ConsoleOutput.print_monte_carlo_summary(results)

    out = capsys.readouterr().out
    assert "20 simulations" in out
    assert "pobi" in out
    assert "crew" in out


def test_export_race_csv(tmp_path) -> None:
    path = Exporter(tmp_path).export_race_csv(_record())

    with open(path, newline="") as f:
        rows = list(csv.reader(f))

    assert rows == [
        ["round", "name", "position"],
        ["1", "pobi", "1"],
        ["1", "crew", "1"],
        ["2", "pobi", "2"],
        ["2", "crew", "2"],
    ]


def test_export_race_json(tmp_path) -> None:
    path = Exporter(tmp_path).export_race_json(_record())
    data = json.loads(path.read_text())

    assert data["rounds"] == [{"pobi": 1, "crew": 1}, {"pobi": 2, "crew": 2}]
    assert data["final"] == [
        {"name": "pobi", "position": 2},
        {"name": "crew", "position": 2},
    ]
    assert data["winners"] == ["pobi", "crew"]


def test_export_all_uses_prefix(tmp_path) -> None:
    files = Exporter(tmp_path / "out").export_all(_record(), prefix="game1")
    assert files["race_csv"].name == "game1_race_results.csv"
    assert files["race_json"].name == "game1_race_results.json"
    assert all(path.exists() for path in files.values())


def test_export_statistics_json(tmp_path) -> None:
    results = MonteCarloRunner(["pobi", "crew"], TryCount(3), seed=4).run(10)
    path = Exporter(tmp_path).export_statistics_json(results)
    data = json.loads(path.read_text())

    assert data["metadata"] == {"num_simulations": 10, "try_count": 3}
    assert set(data["car_statistics"]) == {"pobi", "crew"}
    assert set(data["win_probabilities"]) == {"pobi", "crew"}
