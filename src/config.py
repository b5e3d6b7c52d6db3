from dataclasses import dataclass

METHODS = ("hc", "ils", "sa", "sa+hc")


@dataclass
class SearchConfig:
    # Which search to run: hill climbing, iterated local search, simulated annealing,
    # or simulated annealing followed by a hill climb
    method: str = "sa"
    seed: int = 13062025

    # Simulated annealing. The iteration cap is iterations * number of aircraft
    iterations: int = 100
    alpha: float = 0.99
    sa_max: int = 50

    # Initial temperature calibration. Sample size is sample_factor * number of aircraft
    beta: float = 2.0
    gamma: float = 0.95
    sample_factor: int = 10
    seed_temperature: float = 10.0

    # Hill climbing / iterated local search
    hill_climb_iterations: int = 50
    max_iterations_without_improvement: int = 20

    def validate(self) -> None:
        if self.method not in METHODS:
            raise ValueError(f"Unknown method: {self.method}. Expected one of {', '.join(METHODS)}")
        if not 0 < self.alpha < 1:
            raise ValueError("alpha must be in (0, 1).")
        if self.iterations < 0 or self.hill_climb_iterations < 0 or self.max_iterations_without_improvement < 0:
            raise ValueError("Iteration budgets must be non-negative.")
