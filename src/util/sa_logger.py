import numpy as np
import matplotlib.pyplot as plt
from typing import List, Optional
from dataclasses import dataclass
import json
from datetime import datetime
import os

from src.base_model.solution import Solution


@dataclass
class SearchState:
    """Represents a state in the search process"""
    iteration: int
    score: float
    temperature: float
    solution_features: np.ndarray  # landing time of every aircraft, indexed by aircraft id
    move_type: str
    is_accepted: bool
    is_best: bool
    event_type: Optional[str] = None  # 'start' for the state the search begins from


def extract_solution_features(solution: Solution) -> np.ndarray:
    features = np.zeros(len(solution))
    for arrival in solution:
        features[arrival.aircraft_id] = arrival.landing_time
    return features


class SimulatedAnnealingLogger:
    """Logger for capturing search states during simulated annealing"""
    
    def __init__(self, log_every_n_iterations: int = 10):
        self.states: List[SearchState] = []
        self.log_every_n_iterations = log_every_n_iterations
        self.iteration_count = 0
        self.best_score = float('inf')
        
    def log_state(self, 
                  solution: Solution,
                  score: float,
                  temperature: float,
                  move_type: str,
                  is_accepted: bool,
                  event_type: Optional[str] = None):
        """Log a search state"""
        
        self.iteration_count += 1
        
        # Only log every n iterations to avoid too much data
        if self.iteration_count % self.log_every_n_iterations != 0:
            # But always log special events and best solutions
            if event_type is None and score >= self.best_score:
                return
                
        is_best = score < self.best_score
        if is_best:
            self.best_score = score
        
        state = SearchState(
            iteration=self.iteration_count,
            score=score,
            temperature=temperature,
            solution_features=extract_solution_features(solution),
            move_type=move_type,
            is_accepted=is_accepted,
            is_best=is_best,
            event_type=event_type
        )
        
        self.states.append(state)
        
    def create_visualization(self, output_path: str = None) -> Optional[str]:
        """Plot score and temperature over the iterations"""
        if not self.states:
            print("No states logged!")
            return None
            
        print(f"Creating visualization from {len(self.states)} logged states...")
        
        iterations = np.array([state.iteration for state in self.states])
        scores = np.array([state.score for state in self.states])
        temperatures = np.array([state.temperature for state in self.states])
        best_scores = np.minimum.accumulate(scores)
        
        fig, (ax_score, ax_temp) = plt.subplots(2, 1, figsize=(12, 8), sharex=True)
        ax_score.plot(iterations, scores, label="Current score", alpha=0.6)
        ax_score.plot(iterations, best_scores, label="Best score", linewidth=2)
        ax_score.set_yscale("symlog")
        ax_score.set_ylabel("Cost")
        ax_score.legend()
        ax_temp.plot(iterations, temperatures, color="tab:red")
        ax_temp.set_yscale("log")
        ax_temp.set_ylabel("Temperature")
        ax_temp.set_xlabel("Iteration")
        fig.tight_layout()
        
        if not output_path:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            output_dir = "output"
            os.makedirs(output_dir, exist_ok=True)
            output_path = os.path.join(output_dir, f"convergence_{timestamp}.png")
        
        fig.savefig(output_path)
        plt.close(fig)
        return output_path
        
    def save_log(self, filepath: str):
        """Save the log data to a JSON file"""
        data = []
        for state in self.states:
            data.append({
                'iteration': state.iteration,
                'score': state.score,
                'temperature': state.temperature,
                'features': state.solution_features.tolist(),
                'move_type': state.move_type,
                'is_accepted': state.is_accepted,
                'is_best': state.is_best,
                'event_type': state.event_type
            })
            
        with open(filepath, 'w') as f:
            json.dump(data, f, indent=2)
            
    @staticmethod
    def load_log(filepath: str) -> 'SimulatedAnnealingLogger':
        """Load log data from a JSON file"""
        logger = SimulatedAnnealingLogger()
        
        with open(filepath, 'r') as f:
            data = json.load(f)
            
        for item in data:
            state = SearchState(
                iteration=item['iteration'],
                score=item['score'],
                temperature=item['temperature'],
                solution_features=np.array(item['features']),
                move_type=item['move_type'],
                is_accepted=item['is_accepted'],
                is_best=item['is_best'],
                event_type=item.get('event_type')
            )
            logger.states.append(state)
        
        if logger.states:
            logger.iteration_count = logger.states[-1].iteration
            logger.best_score = min(state.score for state in logger.states)
            
        return logger
