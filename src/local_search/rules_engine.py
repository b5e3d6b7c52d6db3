from typing import Iterator, Tuple

from src.base_model.arrival import Arrival
from src.base_model.instance import Instance
from src.base_model.solution import Solution

# Cost of a separation conflict per unit of overlapping time.
# Must dominate any landing penalty so that resolving a conflict always pays off.
CONFLICT_PENALTY = 5000.0


def landing_cost(instance: Instance, solution: Solution) -> float:
    return sum(instance.aircraft[arrival.aircraft_id].cost_for_landing(arrival.landing_time) for arrival in solution)


def conflicts(instance: Instance, solution: Solution) -> Iterator[Tuple[Arrival, Arrival, int]]:
    """
    Yield (leader, follower, overlap) for every pair of neighbouring arrivals that violates separation.
    
    Only neighbours in landing-time order are compared, so the solution must be sorted.
    Two arrivals that are not next to each other are never reported, even if the
    separation between them is violated.
    """
    for leader, follower in zip(solution, solution[1:]):
        max_landing_time = follower.landing_time - instance.separation_time_between(leader.aircraft_id, follower.aircraft_id)
        if leader.landing_time > max_landing_time:
            yield leader, follower, leader.landing_time - max_landing_time


def conflict_cost(instance: Instance, solution: Solution) -> float:
    return sum(CONFLICT_PENALTY * overlap for _, _, overlap in conflicts(instance, solution))


def is_valid(instance: Instance, solution: Solution) -> bool:
    return next(conflicts(instance, solution), None) is None


def calculate_full_score(instance: Instance, solution: Solution) -> float:
    return landing_cost(instance, solution) + conflict_cost(instance, solution)


def calculate_score_breakdown(instance: Instance, solution: Solution) -> list:
    """
    Returns:
        [total cost, landing cost, conflict cost, number of conflicts]
    """
    landing = landing_cost(instance, solution)
    n_conflicts = 0
    conflict = 0.0
    for _, _, overlap in conflicts(instance, solution):
        n_conflicts += 1
        conflict += CONFLICT_PENALTY * overlap
    
    return [landing + conflict, landing, conflict, n_conflicts]
