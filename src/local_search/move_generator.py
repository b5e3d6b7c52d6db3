import random
from typing import Iterator

from src.base_model.instance import Instance
from src.base_model.solution import Solution, change_arrival
from src.local_search.rules_engine import calculate_full_score


def zigzag_times(current: int, earliest: int, latest: int) -> Iterator[int]:
    """
    Yield the times of [earliest, latest] ordered by distance to `current`,
    earlier before later: current-1, current+1, current-2, current+2, ...
    When one edge of the window is reached the other side continues alone.
    `current` itself is not yielded.
    """
    offset = 1
    while current - offset >= earliest or current + offset <= latest:
        if current - offset >= earliest:
            yield current - offset
        if current + offset <= latest:
            yield current + offset
        offset += 1


def generate_random_neighbor(instance: Instance, solution: Solution, rng: random.Random) -> Solution:
    """Give a random arrival a random landing time inside its window"""
    if not solution:
        raise ValueError("No arrivals found in the solution.")
    
    position = rng.randrange(len(solution))
    aircraft = instance.aircraft[solution[position].aircraft_id]
    landing_time = rng.randint(aircraft.earliest, aircraft.latest)
    
    return change_arrival(solution, position, landing_time)


def generate_first_improvement_neighbor(instance: Instance, solution: Solution, rng: random.Random) -> Solution:
    """
    Return the first retiming of a single arrival that lowers the cost.
    
    Arrivals are visited in random order, and for each arrival the landing times closest
    to its current time are tried first. If nothing improves, an unchanged copy is returned.
    """
    current_cost = calculate_full_score(instance, solution)
    
    positions = list(range(len(solution)))
    rng.shuffle(positions)
    
    for position in positions:
        arrival = solution[position]
        aircraft = instance.aircraft[arrival.aircraft_id]
        
        for landing_time in zigzag_times(arrival.landing_time, aircraft.earliest, aircraft.latest):
            new_solution = change_arrival(solution, position, landing_time)
            if calculate_full_score(instance, new_solution) < current_cost:
                return new_solution
    
    return list(solution)
