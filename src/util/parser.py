from typing import Dict
from pathlib import Path


def _next_int(tokens, what: str) -> int:
    try:
        return int(next(tokens))
    except StopIteration:
        raise ValueError(f"Unexpected end of file while reading {what}")


def _next_float(tokens, what: str) -> float:
    try:
        return float(next(tokens))
    except StopIteration:
        raise ValueError(f"Unexpected end of file while reading {what}")


def parse_input(input_path: Path) -> Dict:
    """
    Parse an OR-Library airland file into a structured data dictionary.
    
    The first line holds the number of aircraft and the freeze time. Each aircraft then has
    its appearance time, earliest, target and latest landing time, the penalty rates for landing
    before and after target, followed by one separation time per aircraft. The separation times
    are usually wrapped over several lines, so the file is read as a flat stream of tokens.
    
    Args:
        input_path: Path to the input file
        
    Returns:
        Dictionary containing parsed data
    """
    with open(input_path, 'r') as f:
        tokens = iter(f.read().split())
    
    num_aircraft = _next_int(tokens, "the number of aircraft")
    freeze_time = _next_int(tokens, "the freeze time")
    
    aircraft = []
    for i in range(num_aircraft):
        plane = {
            "appearance_time": _next_int(tokens, f"aircraft {i}"),
            "earliest": _next_int(tokens, f"aircraft {i}"),
            "target": _next_int(tokens, f"aircraft {i}"),
            "latest": _next_int(tokens, f"aircraft {i}"),
            "penalty_before": _next_float(tokens, f"aircraft {i}"),
            "penalty_after": _next_float(tokens, f"aircraft {i}"),
        }
        plane["separation_times"] = [_next_int(tokens, f"separation times of aircraft {i}") for _ in range(num_aircraft)]
        aircraft.append(plane)
    
    parsed_data = {
        "num_aircraft": num_aircraft,
        "freeze_time": freeze_time,
        "aircraft": aircraft
    }
    
    print(f"Parsed {len(aircraft)} aircraft, freeze time {freeze_time}")
    
    return parsed_data
