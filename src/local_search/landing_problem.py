import random

from src.base_model.instance import Instance
from src.base_model.solution import Solution
from src.local_search.problem import Problem
from src.local_search.rules_engine import calculate_full_score
from src.local_search.move_generator import generate_random_neighbor, generate_first_improvement_neighbor


class LandingProblem(Problem[Solution]):
    """Single runway landing problem over a fixed instance"""
    
    def __init__(self, instance: Instance):
        self.instance = instance
    
    def initial_solution(self) -> Solution:
        return self.instance.initial_solution()
    
    def random_neighbor(self, solution: Solution, rng: random.Random) -> Solution:
        return generate_random_neighbor(self.instance, solution, rng)
    
    def first_improvement_neighbor(self, solution: Solution, rng: random.Random) -> Solution:
        return generate_first_improvement_neighbor(self.instance, solution, rng)
    
    def cost(self, solution: Solution) -> float:
        return calculate_full_score(self.instance, solution)
