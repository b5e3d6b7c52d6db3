"""
A solution is a plain list of arrivals, one per aircraft, kept sorted by landing time.
Conflict detection only looks at neighbouring arrivals, so every function that changes
a landing time has to sort again before the solution is handed back.
"""
from typing import Dict, List

from src.base_model.arrival import Arrival

Solution = List[Arrival]


def sort_solution(solution: Solution) -> Solution:
    """Sort in place by landing time (stable) and return the same list"""
    solution.sort(key=lambda arrival: arrival.landing_time)
    return solution


def change_arrival(solution: Solution, position: int, landing_time: int) -> Solution:
    """Copy the solution, give the arrival at `position` a new landing time and re-sort the copy."""
    new_solution = list(solution)
    new_solution[position] = Arrival(new_solution[position].aircraft_id, landing_time)
    return sort_solution(new_solution)


def is_sorted(solution: Solution) -> bool:
    return all(a.landing_time <= b.landing_time for a, b in zip(solution, solution[1:]))


def landing_times_by_aircraft(solution: Solution) -> Dict[int, int]:
    return {arrival.aircraft_id: arrival.landing_time for arrival in solution}
