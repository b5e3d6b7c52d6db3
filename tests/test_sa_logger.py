import os
import random
import tempfile
import unittest

from src.base_model.arrival import Arrival
from src.base_model.instance import Instance
from src.local_search.landing_problem import LandingProblem
from src.local_search.simulated_annealing import simulated_annealing
from src.util.data_generator import generate_test_data
from src.util.sa_logger import SimulatedAnnealingLogger, extract_solution_features


class TestSimulatedAnnealingLogger(unittest.TestCase):
    
    def test_features_are_indexed_by_aircraft(self):
        features = extract_solution_features([Arrival(2, 5), Arrival(0, 7), Arrival(1, 9)])
        
        self.assertEqual(features.tolist(), [7.0, 9.0, 5.0])
    
    def test_only_every_nth_state_and_new_bests_are_kept(self):
        sa_logger = SimulatedAnnealingLogger(log_every_n_iterations=3)
        solution = [Arrival(0, 1)]
        
        sa_logger.log_state(solution, 10.0, 1.0, "random", True)  # new best
        sa_logger.log_state(solution, 12.0, 1.0, "random", True)  # skipped
        sa_logger.log_state(solution, 12.0, 1.0, "random", True)  # every 3rd
        sa_logger.log_state(solution, 11.0, 1.0, "random", False)  # skipped
        sa_logger.log_state(solution, 11.0, 1.0, "initial", True, event_type="start")  # event
        
        self.assertEqual([state.iteration for state in sa_logger.states], [1, 3, 5])
        self.assertEqual([state.is_best for state in sa_logger.states], [True, False, False])
    
    def test_save_and_load(self):
        problem = LandingProblem(Instance.from_parsed_data(generate_test_data(6, seed=2)))
        sa_logger = SimulatedAnnealingLogger(log_every_n_iterations=5)
        simulated_annealing(problem, problem.initial_solution(), 200, 0.9, 20, 100.0, random.Random(2), sa_logger=sa_logger)
        
        with tempfile.TemporaryDirectory() as temp_dir:
            path = os.path.join(temp_dir, "trace.json")
            sa_logger.save_log(path)
            loaded = SimulatedAnnealingLogger.load_log(path)
        
        self.assertEqual(len(loaded.states), len(sa_logger.states))
        self.assertEqual(loaded.best_score, sa_logger.best_score)
        for original, restored in zip(sa_logger.states, loaded.states):
            self.assertEqual(original.score, restored.score)
            self.assertEqual(original.event_type, restored.event_type)
            self.assertEqual(original.solution_features.tolist(), restored.solution_features.tolist())


if __name__ == '__main__':
    unittest.main()
