#!/usr/bin/env python3
"""
Simple benchmarking script for the Aircraft Landing Scheduler.
Runs every search method on generated instances from 10 to 100 aircraft and writes
aircraft, method, time, cost and validity to CSV.
"""

import csv
import time
import sys

# Import the scheduler functions directly
sys.path.append('.')
from src.config import SearchConfig, METHODS
from src.util.data_generator import generate_test_data
from src.base_model.instance import Instance
from src.local_search.landing_problem import LandingProblem
from src.local_search.search_runner import run_local_search
from src.local_search.rules_engine import calculate_full_score, is_valid


def run_single_test(n_aircraft: int, method: str) -> tuple[float, float, bool]:
    """
    Run one search method on a generated instance.
    
    Args:
        n_aircraft: Number of aircraft to generate
        method: Search method name
        
    Returns:
        Time taken in seconds, final cost and whether the solution is conflict free
    """
    start_time = time.time()
    
    instance = Instance.from_parsed_data(generate_test_data(n_aircraft))
    problem = LandingProblem(instance)
    
    final_solution = run_local_search(problem, SearchConfig(method=method, iterations=20))
    
    elapsed_time = time.time() - start_time
    cost = calculate_full_score(instance, final_solution)
    valid = is_valid(instance, final_solution)
    
    print(f"Aircraft: {n_aircraft:4d}, Method: {method:6s}, Time: {elapsed_time:6.1f}s, Cost: {cost:10.1f}, Valid: {valid}")
    
    return elapsed_time, cost, valid


def main():
    """Run benchmark from 10 to 100 aircraft in steps of 10 and save to CSV."""
    output_file = 'benchmark_results.csv'
    
    aircraft_counts = list(range(10, 101, 10))
    
    print(f"Running benchmark for {len(aircraft_counts)} instance sizes and {len(METHODS)} methods")
    print(f"Output: {output_file}")
    print("-" * 50)
    
    results = []
    
    for i, n_aircraft in enumerate(aircraft_counts, 1):
        print(f"[{i:3d}/{len(aircraft_counts)}] Testing {n_aircraft} aircraft...")
        for method in METHODS:
            elapsed_time, cost, valid = run_single_test(n_aircraft, method)
            results.append((n_aircraft, method, elapsed_time, cost, valid))
    
    with open(output_file, 'w', newline='') as csvfile:
        writer = csv.writer(csvfile)
        writer.writerow(['aircraft', 'method', 'time', 'cost', 'valid'])
        writer.writerows(results)
    
    print(f"\nResults saved to {output_file}")
    print(f"Tested {len(results)} configurations")


if __name__ == "__main__":
    main()
