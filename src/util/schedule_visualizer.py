from src.base_model.instance import Instance
from src.base_model.solution import Solution
from src.local_search.rules_engine import conflicts, calculate_score_breakdown, is_valid


def _separation_column(instance: Instance, solution: Solution, position: int) -> str:
    """Separation to the previous and to the next arrival, '-' where there is none"""
    before = "-"
    after = "-"
    if position > 0:
        before = str(instance.separation_time_between(solution[position - 1].aircraft_id, solution[position].aircraft_id))
    if position < len(solution) - 1:
        after = str(instance.separation_time_between(solution[position].aircraft_id, solution[position + 1].aircraft_id))
    return f"{before} , {after}"


def visualize(instance: Instance, solution: Solution):
    """
    Print the costs of the solution followed by one row per arrival in landing order.
    Arrivals that take part in a separation conflict are marked with '*'.
    """
    total, landing, conflict, _ = calculate_score_breakdown(instance, solution)
    print(f"TotalCost={total}\tLandingCost={landing}\tConflictCost={conflict}\tValid={is_valid(instance, solution)}")
    
    in_conflict = set()
    for leader, follower, _ in conflicts(instance, solution):
        in_conflict.add(leader)
        in_conflict.add(follower)
    
    separator = "-" * 49
    print(separator)
    print("| ID\t| Time\t| Conf.\t| Land.\t| Separation\t|")
    print(separator)
    for position, arrival in enumerate(solution):
        aircraft = instance.aircraft[arrival.aircraft_id]
        print(f"| {aircraft.aircraft_id}\t"
              f"| {arrival.landing_time:<6}"
              f"| {'*' if arrival in in_conflict else ' '}\t"
              f"| {int(aircraft.cost_for_landing(arrival.landing_time)):<4}\t"
              f"| {_separation_column(instance, solution, position):<7}\t|")
    print(separator)


def solution_to_json(instance: Instance, solution: Solution) -> dict:
    total, landing, conflict, n_conflicts = calculate_score_breakdown(instance, solution)
    return {
        "total_cost": total,
        "landing_cost": landing,
        "conflict_cost": conflict,
        "conflicts": n_conflicts,
        "valid": n_conflicts == 0,
        "arrivals": [
            {
                "aircraft_id": arrival.aircraft_id,
                "landing_time": arrival.landing_time,
                "cost": instance.aircraft[arrival.aircraft_id].cost_for_landing(arrival.landing_time)
            }
            for arrival in solution
        ]
    }
