"""Monte Carlo analysis and statistics."""

from .montecarlo import CarStatistics, MonteCarloRunner, SimulationResults

__all__ = ["CarStatistics", "MonteCarloRunner", "SimulationResults"]
