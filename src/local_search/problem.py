import random
from typing import Generic, List, TypeVar

S = TypeVar("S")


class Problem(Generic[S]):
    """
    What the search algorithms need to know about a problem.
    
    Subclasses implement the four operations below. The search algorithms in
    hill_climbing.py and simulated_annealing.py only ever talk to this interface.
    """
    
    def initial_solution(self) -> S:
        raise NotImplementedError
    
    def random_neighbor(self, solution: S, rng: random.Random) -> S:
        raise NotImplementedError
    
    def first_improvement_neighbor(self, solution: S, rng: random.Random) -> S:
        raise NotImplementedError
    
    def cost(self, solution: S) -> float:
        raise NotImplementedError
    
    def best_solution(self, solutions: List[S]) -> S:
        """Cheapest solution in the list. On ties the first one wins."""
        if not solutions:
            raise ValueError("Cannot pick the best solution of an empty list.")
        return min(solutions, key=self.cost)
