import random
from typing import Callable

from src.local_search.problem import Problem

DEFAULT_SEED = 13062025

# Number of first-improvement neighbors generated per hill climbing iteration
NEIGHBORS = 5


def hill_climb(problem: Problem, solution, max_iterations: int, rng: random.Random = None,
               log_output: Callable[[str], None] = None):
    """
    Repeatedly replace the current solution with the best of NEIGHBORS first-improvement
    neighbors (or keep it, if none of them is better).
    
    Stops after max_iterations, not when a local optimum is reached.
    """
    if max_iterations < 0:
        raise ValueError("max_iterations must be non-negative.")
    if rng is None:
        rng = random.Random(DEFAULT_SEED)
    
    current_solution = solution
    for iteration in range(max_iterations):
        neighbors = [problem.first_improvement_neighbor(current_solution, rng) for _ in range(NEIGHBORS)]
        neighbors.append(current_solution)
        current_solution = problem.best_solution(neighbors)
        
        if log_output:
            log_output(f"Hill climb iteration: {iteration + 1}, Score: {problem.cost(current_solution)}")
    
    return current_solution


def shake(problem: Problem, solution, intensity: int, rng: random.Random):
    """Apply `intensity` random moves in a row"""
    for _ in range(intensity):
        solution = problem.random_neighbor(solution, rng)
    return solution


def iterated_local_search(problem: Problem, hill_climb_iterations: int, max_iterations_without_improvement: int,
                          rng: random.Random = None, log_output: Callable[[str], None] = None):
    """
    Hill climb from the initial solution, then keep shaking and re-climbing the best solution.
    
    Every failed attempt makes the next shake one move stronger. An improvement is accepted
    and resets the shake back to a single move. The search ends once
    max_iterations_without_improvement attempts in a row have failed.
    """
    if max_iterations_without_improvement < 0:
        raise ValueError("max_iterations_without_improvement must be non-negative.")
    if rng is None:
        rng = random.Random(DEFAULT_SEED)
    
    best_solution = hill_climb(problem, problem.initial_solution(), hill_climb_iterations, rng)
    best_score = problem.cost(best_solution)
    
    if log_output:
        log_output(f"Initial local optimum score: {best_score}")
    
    intensity = 1
    iteration = 0
    last_improvement = 0
    while iteration - last_improvement < max_iterations_without_improvement:
        iteration += 1
        
        shaken_solution = shake(problem, best_solution, intensity, rng)
        candidate_solution = hill_climb(problem, shaken_solution, hill_climb_iterations, rng)
        candidate_score = problem.cost(candidate_solution)
        
        if candidate_score < best_score:
            best_solution = candidate_solution
            best_score = candidate_score
            intensity = 1
            last_improvement = iteration
        else:
            intensity += 1
        
        if log_output:
            log_output(f"Iteration: {iteration}, Intensity: {intensity}, Score: {candidate_score}, Best: {best_score}")
    
    return best_solution
