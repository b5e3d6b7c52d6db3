import random
from pathlib import Path
from typing import Dict, Any

from src.base_model.wake_category import WakeCategory

# Minimum time between a leading aircraft (row) and a following aircraft (column).
# Heavier leaders produce stronger wake turbulence, so the matrix is not symmetric.
SEPARATION_MATRIX = {
    WakeCategory.HEAVY:  {WakeCategory.HEAVY: 8, WakeCategory.MEDIUM: 10, WakeCategory.LIGHT: 12},
    WakeCategory.MEDIUM: {WakeCategory.HEAVY: 6, WakeCategory.MEDIUM: 6,  WakeCategory.LIGHT: 10},
    WakeCategory.LIGHT:  {WakeCategory.HEAVY: 6, WakeCategory.MEDIUM: 6,  WakeCategory.LIGHT: 6},
}

# Cost per unit of time away from target. Heavy aircraft carry more passengers
PENALTY_RATES = {
    WakeCategory.HEAVY: 30.0,
    WakeCategory.MEDIUM: 20.0,
    WakeCategory.LIGHT: 10.0,
}

def generate_test_data(n_aircraft: int, seed: int = 13062025, time_between_targets: int = 8,
                       freeze_time: int = 10) -> Dict[str, Any]:
    """
    Generate a landing problem in the same shape as the parser output.
    
    Args:
        n_aircraft: Number of aircraft
        seed: Seed for the random generator
        time_between_targets: Average gap between consecutive target times
        freeze_time: Freeze time written to the instance
    """
    if n_aircraft < 1:
        raise ValueError("At least one aircraft is needed.")
    
    gen = random.Random(seed)
    
    category_probabilities = {
        WakeCategory.HEAVY: 0.2,
        WakeCategory.MEDIUM: 0.65,
        WakeCategory.LIGHT: 0.15
    }
    categories = gen.choices(
        list(category_probabilities.keys()),
        weights=list(category_probabilities.values()),
        k=n_aircraft
    )
    
    horizon = n_aircraft * time_between_targets
    
    aircraft = []
    for i, category in enumerate(categories):
        target = gen.randint(75, 75 + horizon)
        earliest = target - gen.randint(10, 60)
        latest = target + gen.randint(60, 300)
        appearance_time = max(0, earliest - gen.randint(0, 75))
        
        penalty_before = PENALTY_RATES[category]
        penalty_after = PENALTY_RATES[category] * gen.choice([1.0, 1.5, 2.0])
        
        separation_times = [
            0 if j == i else SEPARATION_MATRIX[category][other]
            for j, other in enumerate(categories)
        ]
        
        aircraft.append({
            "appearance_time": appearance_time,
            "earliest": earliest,
            "target": target,
            "latest": latest,
            "penalty_before": penalty_before,
            "penalty_after": penalty_after,
            "separation_times": separation_times,
            "wake_category": category.name
        })
    
    return {
        "num_aircraft": n_aircraft,
        "freeze_time": freeze_time,
        "aircraft": aircraft
    }

def save_test_data(parsed_data: Dict[str, Any], output_path: Path) -> None:
    """Write the data in the OR-Library airland format read by the parser"""
    lines = [f"{parsed_data['num_aircraft']} {parsed_data.get('freeze_time', 0)}"]
    for plane in parsed_data["aircraft"]:
        lines.append(f"{plane.get('appearance_time', 0)} {plane['earliest']} {plane['target']} {plane['latest']} "
                     f"{plane['penalty_before']:.2f} {plane['penalty_after']:.2f}")
        
        separation_times = [str(t) for t in plane["separation_times"]]
        for start in range(0, len(separation_times), 10):
            lines.append(" ".join(separation_times[start:start + 10]))
    
    with open(output_path, 'w') as f:
        f.write("\n".join(lines) + "\n")
