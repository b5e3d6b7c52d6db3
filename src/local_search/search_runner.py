import random
from typing import Callable

from src.config import SearchConfig
from src.local_search.landing_problem import LandingProblem
from src.local_search.hill_climbing import hill_climb, iterated_local_search
from src.local_search.simulated_annealing import initial_temperature, simulated_annealing


def run_local_search(problem: LandingProblem, config: SearchConfig = None,
                     log_output: Callable[[str], None] = None, sa_logger=None):
    """Run the search method named in the config and return the best solution found"""
    if config is None:
        config = SearchConfig()
    config.validate()
    
    rng = random.Random(config.seed)
    n = problem.instance.num_aircraft
    
    if config.method == "hc":
        return hill_climb(problem, problem.initial_solution(), config.hill_climb_iterations, rng, log_output)
    
    if config.method == "ils":
        return iterated_local_search(problem, config.hill_climb_iterations,
                                     config.max_iterations_without_improvement, rng, log_output)
    
    solution = problem.initial_solution()
    start_temp = initial_temperature(problem, solution, config.beta, config.gamma,
                                     config.sample_factor * n, config.seed_temperature, rng, log_output)
    if log_output:
        log_output(f"Initial temp: {start_temp}")
    
    solution = simulated_annealing(problem, solution, config.iterations * n, config.alpha, config.sa_max,
                                   start_temp, rng, log_output, sa_logger)
    
    if config.method == "sa+hc":
        solution = hill_climb(problem, solution, config.hill_climb_iterations, rng, log_output)
    
    return solution
