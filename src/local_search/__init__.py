"""
Local search for single runway aircraft landing scheduling.
Includes hill climbing, iterated local search, simulated annealing and the landing problem they run on.
"""

from src.local_search.problem import Problem
from src.local_search.landing_problem import LandingProblem
from src.local_search.hill_climbing import hill_climb, shake, iterated_local_search
from src.local_search.simulated_annealing import initial_temperature, simulated_annealing
from src.local_search.search_runner import run_local_search
from src.local_search.rules_engine import landing_cost, conflicts, conflict_cost, is_valid, calculate_full_score

__all__ = [
    'Problem',
    'LandingProblem',
    'hill_climb',
    'shake',
    'iterated_local_search',
    'initial_temperature',
    'simulated_annealing',
    'run_local_search',
    'landing_cost',
    'conflicts',
    'conflict_cost',
    'is_valid',
    'calculate_full_score',
]
