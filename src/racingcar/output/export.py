"""Export game results to CSV and JSON."""

import csv
import json
from pathlib import Path
from typing import Any

from racingcar.analysis.montecarlo import SimulationResults
from racingcar.simulation.service import RaceRecord


class Exporter:
    """Exports game results to various formats."""

    def __init__(self, output_dir: str | Path = "output"):
        """Initialize exporter.

        Args:
            output_dir: Directory for output files
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def export_race_csv(
        self,
        record: RaceRecord,
        filename: str = "race_results.csv",
    ) -> Path:
        """Export every round of a game to CSV, one row per car per round.

        Args:
            record: Recorded game
            filename: Output filename

        Returns:
            Path to created file
        """
        filepath = self.output_dir / filename

        with open(filepath, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(["round", "name", "position"])

            for round_number, statuses in zip(record.round_numbers, record.rounds):
                for status in statuses:
                    writer.writerow([round_number, status.name, status.position])

        return filepath

    def export_race_json(
        self,
        record: RaceRecord,
        filename: str = "race_results.json",
    ) -> Path:
        """Export a game's rounds, final standings and winners to JSON."""
        filepath = self.output_dir / filename

        race_dict: dict[str, Any] = {
            "rounds": [
                {status.name: status.position for status in statuses}
                for statuses in record.rounds
            ],
            "final": [
                {"name": s.name, "position": s.position}
                for s in record.final_statuses
            ],
            "winners": [w.name for w in record.winners],
        }

        with open(filepath, "w") as f:
            json.dump(race_dict, f, indent=2)

        return filepath

    def export_statistics_json(
        self,
        results: SimulationResults,
        filename: str = "statistics.json",
    ) -> Path:
        """Export aggregated Monte Carlo statistics to JSON.

        Args:
            results: Simulation results
            filename: Output filename

        Returns:
            Path to created file
        """
        filepath = self.output_dir / filename

        stats_dict: dict[str, Any] = {
            "metadata": {
                "num_simulations": results.num_simulations,
                "try_count": results.try_count,
            },
            "win_probabilities": results.get_win_probabilities(),
            "car_statistics": {},
        }

        for name, stats in results.car_stats.items():
            stats_dict["car_statistics"][name] = {
                "wins": stats.wins,
                "win_rate": stats.win_rate,
                "sole_wins": stats.sole_wins,
                "sole_win_rate": stats.sole_win_rate,
                "avg_position": stats.avg_position,
                "best_position": stats.best_position,
                "worst_position": stats.worst_position,
            }

        with open(filepath, "w") as f:
            json.dump(stats_dict, f, indent=2)

        return filepath

    def export_all(self, record: RaceRecord, prefix: str = "") -> dict[str, Path]:
        """Export a game in every format.

        Returns:
            Dictionary of format -> filepath
        """
        prefix = f"{prefix}_" if prefix else ""

        return {
            "race_csv": self.export_race_csv(record, f"{prefix}race_results.csv"),
            "race_json": self.export_race_json(record, f"{prefix}race_results.json"),
        }
