import io
import json
import os
import sys
import tempfile
import unittest
from contextlib import redirect_stdout
from unittest.mock import patch

from src.base_model.arrival import Arrival
from src.base_model.instance import Instance
from src.local_search.rules_engine import CONFLICT_PENALTY
from src.util.schedule_visualizer import visualize, solution_to_json
from src import main


class TestScheduleVisualizer(unittest.TestCase):
    
    def setUp(self):
        self.instance = Instance.from_parsed_data({
            "num_aircraft": 3,
            "aircraft": [
                {"earliest": 0, "target": 10, "latest": 30, "penalty_before": 1.0, "penalty_after": 2.0,
                 "separation_times": [0, 5, 5]},
                {"earliest": 0, "target": 12, "latest": 30, "penalty_before": 1.0, "penalty_after": 2.0,
                 "separation_times": [5, 0, 5]},
                {"earliest": 0, "target": 25, "latest": 30, "penalty_before": 1.0, "penalty_after": 2.0,
                 "separation_times": [5, 5, 0]},
            ]
        })
        # aircraft 0 and 1 are in conflict, aircraft 2 is fine
        self.solution = [Arrival(0, 10), Arrival(1, 12), Arrival(2, 26)]
    
    def test_visualize_marks_conflicts(self):
        buffer = io.StringIO()
        with redirect_stdout(buffer):
            visualize(self.instance, self.solution)
        output = buffer.getvalue().splitlines()
        
        self.assertIn("Valid=False", output[0])
        rows = [line for line in output if line.startswith("| ") and not line.startswith("| ID")]
        self.assertEqual(len(rows), 3)
        self.assertIn("*", rows[0])
        self.assertIn("*", rows[1])
        self.assertNotIn("*", rows[2])
        self.assertIn("- , 5", rows[0])
        self.assertIn("5 , -", rows[2])
    
    def test_solution_to_json(self):
        data = solution_to_json(self.instance, self.solution)
        
        self.assertEqual(data["landing_cost"], 2.0)
        self.assertEqual(data["conflict_cost"], 3 * CONFLICT_PENALTY)
        self.assertEqual(data["total_cost"], 2.0 + 3 * CONFLICT_PENALTY)
        self.assertFalse(data["valid"])
        self.assertEqual([a["aircraft_id"] for a in data["arrivals"]], [0, 1, 2])
        self.assertEqual(data["arrivals"][2]["cost"], 2.0)


class TestMain(unittest.TestCase):
    
    def test_generated_instance_end_to_end(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            output_path = os.path.join(temp_dir, "out.json")
            log_path = os.path.join(temp_dir, "search.log")
            argv = ["main", "--test", "6", "--method", "hc", "--hc-iterations", "5",
                    "--output", output_path, "--log", log_path]
            
            with patch.object(sys, "argv", argv), redirect_stdout(io.StringIO()):
                exit_code = main.main()
            
            self.assertEqual(exit_code, 0)
            with open(output_path) as f:
                data = json.load(f)
            self.assertEqual(len(data["arrivals"]), 6)
            with open(log_path) as f:
                self.assertIn("Cost before:", f.read())
    
    def test_missing_input_file(self):
        argv = ["main", "--input", "does/not/exist.txt"]
        
        with patch.object(sys, "argv", argv), redirect_stdout(io.StringIO()):
            self.assertEqual(main.main(), 1)


if __name__ == '__main__':
    unittest.main()
