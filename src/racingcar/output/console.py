"""Console output formatting."""

from racingcar.analysis.montecarlo import SimulationResults
from racingcar.models import CarStatus

TRACK_MARK = "-"


class ConsoleOutput:
    """Formats game results for console display."""

    @staticmethod
    def format_status(status: CarStatus) -> str:
        """Render one car as "name : ---", one dash per step."""
        return f"{status.name} : {TRACK_MARK * status.position}"

    @staticmethod
    def print_round(statuses: list[CarStatus]) -> None:
        """Print the field after one round, followed by a blank line.

        Args:
            statuses: Car statuses in entry order
        """
        for status in statuses:
            print(ConsoleOutput.format_status(status))
        print()

    @staticmethod
    def print_race_header() -> None:
        print("\nRace results")

    @staticmethod
    def print_winners(winners: list[CarStatus]) -> None:
        """Print the winners line.

        Args:
            winners: Winning cars in entry order
        """
        print(f"Winners: {', '.join(w.name for w in winners)}")

    @staticmethod
    def print_monte_carlo_summary(results: SimulationResults) -> None:
        """Print Monte Carlo simulation summary.

        Args:
            results: Aggregated simulation results
        """
        print("\n" + "=" * 60)
        print(f"MONTE CARLO SIMULATION RESULTS - {results.try_count} rounds")
        print(f"({results.num_simulations} simulations)")
        print("=" * 60)

        print("\nWIN PROBABILITIES (shared wins included):")
        print("-" * 50)
        for name, prob in results.get_win_probabilities().items():
            stats = results.car_stats[name]
            bar = "#" * int(prob / 2)
            print(f"{name:<6} {prob:5.1f}%  (outright {stats.sole_win_rate:5.1f}%) {bar}")

        print("\nFINAL POSITION:")
        print("-" * 50)
        for name, stats in results.car_stats.items():
            if stats.positions:
                print(
                    f"{name:<6} "
                    f"Avg: {stats.avg_position:5.2f}  "
                    f"Best: {stats.best_position:3d}  "
                    f"Worst: {stats.worst_position:3d}"
                )

        print("=" * 60)
