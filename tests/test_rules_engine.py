import random
import unittest

from src.base_model.arrival import Arrival
from src.base_model.instance import Instance
from src.local_search.landing_problem import LandingProblem
from src.local_search.rules_engine import (
    CONFLICT_PENALTY,
    landing_cost,
    conflicts,
    conflict_cost,
    is_valid,
    calculate_full_score,
    calculate_score_breakdown
)
from src.util.data_generator import generate_test_data


def make_instance(windows, separation_times, penalty_before=1.0, penalty_after=1.0):
    return Instance.from_parsed_data({
        "num_aircraft": len(windows),
        "aircraft": [
            {"earliest": earliest, "target": target, "latest": latest,
             "penalty_before": penalty_before, "penalty_after": penalty_after,
             "separation_times": separation_times[i]}
            for i, (earliest, target, latest) in enumerate(windows)
        ]
    })


class TestRulesEngine(unittest.TestCase):
    
    def setUp(self):
        # separation(0, 1) = 5 but separation(1, 0) = 1
        self.instance = make_instance([(0, 10, 30), (0, 12, 30)], [[0, 5], [1, 0]])
    
    def test_conflict_between_neighbours(self):
        solution = [Arrival(0, 10), Arrival(1, 12)]
        
        found = list(conflicts(self.instance, solution))
        
        self.assertEqual(found, [(Arrival(0, 10), Arrival(1, 12), 3)])
        self.assertEqual(conflict_cost(self.instance, solution), 3 * CONFLICT_PENALTY)
        self.assertFalse(is_valid(self.instance, solution))
    
    def test_no_conflict_when_separated(self):
        solution = [Arrival(0, 10), Arrival(1, 20)]
        
        self.assertEqual(list(conflicts(self.instance, solution)), [])
        self.assertEqual(conflict_cost(self.instance, solution), 0)
        self.assertTrue(is_valid(self.instance, solution))
    
    def test_separation_depends_on_landing_order(self):
        solution = [Arrival(1, 10), Arrival(0, 12)]
        
        self.assertTrue(is_valid(self.instance, solution))
    
    def test_exact_separation_is_not_a_conflict(self):
        solution = [Arrival(0, 10), Arrival(1, 15)]
        
        self.assertTrue(is_valid(self.instance, solution))
    
    def test_only_neighbouring_arrivals_are_checked(self):
        # aircraft 0 needs 100 units before aircraft 2, but aircraft 1 lands in between
        instance = make_instance([(0, 10, 200)] * 3, [[0, 5, 100], [5, 0, 5], [5, 5, 0]])
        solution = [Arrival(0, 10), Arrival(1, 20), Arrival(2, 30)]
        
        self.assertTrue(is_valid(instance, solution))
    
    def test_landing_cost_is_asymmetric(self):
        instance = make_instance([(0, 10, 30), (0, 50, 80)], [[0, 5], [5, 0]],
                                 penalty_before=2.0, penalty_after=3.0)
        
        self.assertEqual(landing_cost(instance, [Arrival(0, 7), Arrival(1, 50)]), 6.0)
        self.assertEqual(landing_cost(instance, [Arrival(0, 10), Arrival(1, 54)]), 12.0)
    
    def test_zero_cost_at_target_when_separated(self):
        instance = make_instance([(0, 10, 60), (0, 30, 60), (0, 50, 60)],
                                 [[0, 5, 5], [5, 0, 5], [5, 5, 0]])
        solution = instance.initial_solution()
        
        self.assertEqual(landing_cost(instance, solution), 0)
        self.assertTrue(is_valid(instance, solution))
        self.assertEqual(calculate_full_score(instance, solution), 0)
    
    def test_cost_is_landing_plus_conflict_cost(self):
        instance = Instance.from_parsed_data(generate_test_data(15, seed=3))
        problem = LandingProblem(instance)
        rng = random.Random(3)
        
        solution = problem.initial_solution()
        for _ in range(50):
            solution = problem.random_neighbor(solution, rng)
            self.assertEqual(calculate_full_score(instance, solution),
                             landing_cost(instance, solution) + conflict_cost(instance, solution))
    
    def test_score_breakdown(self):
        solution = [Arrival(0, 10), Arrival(1, 12)]
        
        total, landing, conflict, n_conflicts = calculate_score_breakdown(self.instance, solution)
        
        self.assertEqual(landing, 0)
        self.assertEqual(conflict, 3 * CONFLICT_PENALTY)
        self.assertEqual(total, calculate_full_score(self.instance, solution))
        self.assertEqual(n_conflicts, 1)


if __name__ == '__main__':
    unittest.main()
