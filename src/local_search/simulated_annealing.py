import math
import random
from typing import Callable

from src.local_search.problem import Problem
from src.local_search.hill_climbing import DEFAULT_SEED

# Annealing stops once the temperature drops to this value
MIN_TEMPERATURE = 0.1


def _accept(delta: float, temperature: float, rng: random.Random) -> bool:
    """Metropolis criterion"""
    if delta < 0:
        return True
    return rng.random() < math.exp(-delta / temperature)


def initial_temperature(problem: Problem, solution, beta: float, gamma: float, sample_size: int,
                        temperature: float, rng: random.Random = None,
                        log_output: Callable[[str], None] = None) -> float:
    """
    Find a start temperature at which most random moves are accepted.
    
    Starting from `temperature`, sample `sample_size` random neighbors of `solution` and count
    how many pass the Metropolis test. Return the temperature as soon as the accepted fraction
    exceeds `gamma`, otherwise multiply the temperature by `beta` and sample again.
    
    Args:
        problem: The problem the solution belongs to
        solution: Fixed reference solution all neighbors are drawn from
        beta: Growth factor of the temperature, must be > 1
        gamma: Target acceptance ratio in (0, 1)
        sample_size: Neighbors sampled per temperature
        temperature: Temperature to start from
    """
    if beta <= 1:
        raise ValueError("beta must be greater than 1.")
    if not 0 < gamma < 1:
        raise ValueError("gamma must be in (0, 1).")
    if sample_size < 1:
        raise ValueError("sample_size must be at least 1.")
    if temperature <= 0:
        raise ValueError("temperature must be positive.")
    if rng is None:
        rng = random.Random(DEFAULT_SEED)
    
    current_score = problem.cost(solution)
    while True:
        accepted = 0
        for _ in range(sample_size):
            neighbor = problem.random_neighbor(solution, rng)
            if _accept(problem.cost(neighbor) - current_score, temperature, rng):
                accepted += 1
        
        if log_output:
            log_output(f"Temp: {temperature:.2f}, Accepted: {accepted}/{sample_size}")
        
        if accepted / sample_size > gamma:
            return temperature
        temperature *= beta


def simulated_annealing(problem: Problem, solution, max_iterations: int, alpha: float, sa_max: int,
                        initial_temp: float, rng: random.Random = None,
                        log_output: Callable[[str], None] = None, sa_logger=None):
    """
    Simulated annealing with geometric cooling.
    
    At every temperature up to sa_max random neighbors are proposed and accepted by the Metropolis
    criterion, after which the temperature is multiplied by alpha. The run ends when the temperature
    reaches MIN_TEMPERATURE or after max_iterations proposals in total.
    
    Returns:
        The best solution seen during the run, which is not necessarily the last current solution
    """
    if not 0 < alpha < 1:
        raise ValueError("alpha must be in (0, 1).")
    if initial_temp <= 0:
        raise ValueError("initial_temp must be positive.")
    if sa_max < 1:
        raise ValueError("sa_max must be at least 1.")
    if max_iterations < 0:
        raise ValueError("max_iterations must be non-negative.")
    if rng is None:
        rng = random.Random(DEFAULT_SEED)
    
    current_solution = solution
    current_score = problem.cost(current_solution)
    best_solution = current_solution
    best_score = current_score
    temperature = initial_temp
    
    if sa_logger:
        sa_logger.log_state(current_solution, current_score, temperature, "initial", True, event_type="start")
    if log_output:
        log_output(f"Starting simulated annealing with parameters:")
        log_output(f"Max iterations: {max_iterations}, Alpha: {alpha}, Iterations per temperature: {sa_max}")
        log_output(f"Start temperature: {initial_temp}")
        log_output(f"Initial score: {current_score}")
    
    iteration = 0
    while temperature > MIN_TEMPERATURE:
        moves_accepted_this_temperature = 0
        moves_explored_this_temperature = 0
        
        for _ in range(sa_max):
            if iteration >= max_iterations:
                if log_output:
                    log_output(f"Iteration limit reached. Best: {best_score}")
                return best_solution
            iteration += 1
            moves_explored_this_temperature += 1
            
            neighbor = problem.random_neighbor(current_solution, rng)
            neighbor_score = problem.cost(neighbor)
            is_accepted = _accept(neighbor_score - current_score, temperature, rng)
            
            if is_accepted:
                current_solution = neighbor
                current_score = neighbor_score
                moves_accepted_this_temperature += 1
                
                if current_score < best_score:
                    best_solution = current_solution
                    best_score = current_score
            
            if sa_logger:
                sa_logger.log_state(current_solution, current_score, temperature, "random", is_accepted)
        
        if log_output:
            log_output(f"Iteration: {iteration}, Temp: {temperature:.2f}, "
                       f"Accepted: {moves_accepted_this_temperature}/{moves_explored_this_temperature}, "
                       f"Score: {current_score}, Best: {best_score}")
        
        temperature *= alpha
    
    return best_solution
