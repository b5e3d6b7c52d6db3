from typing import Dict, Tuple

from src.base_model.aircraft import Aircraft
from src.base_model.arrival import Arrival
from src.base_model.solution import Solution, sort_solution
from src.base_model.wake_category import WakeCategory


class Instance:
    """Class holding the immutable aircraft table of one landing problem."""
    
    def __init__(self, aircraft: list[Aircraft], freeze_time: int = 0):
        if not aircraft:
            raise ValueError("An instance needs at least one aircraft.")
        
        for index, plane in enumerate(aircraft):
            if plane.aircraft_id != index:
                raise ValueError(f"Aircraft ids must be dense and ordered, found id {plane.aircraft_id} at position {index}.")
            if len(plane.separation_times) != len(aircraft):
                raise ValueError(f"Aircraft {index} has {len(plane.separation_times)} separation times, expected {len(aircraft)}.")
            if not plane.earliest <= plane.target <= plane.latest:
                raise ValueError(f"Aircraft {index} has an unordered time window: {plane.earliest}, {plane.target}, {plane.latest}.")
            if plane.penalty_before < 0 or plane.penalty_after < 0:
                raise ValueError(f"Aircraft {index} has a negative penalty rate.")
        
        self.aircraft: Tuple[Aircraft, ...] = tuple(aircraft)
        self.freeze_time: int = freeze_time
    
    @classmethod
    def from_parsed_data(cls, parsed_data: Dict) -> 'Instance':
        """
        Build an instance from the dictionary returned by the parser or the data generator.
        
        Args:
            parsed_data: Dictionary with "num_aircraft", "aircraft" and optionally "freeze_time"
        
        Returns:
            The instance
        """
        num_aircraft = parsed_data["num_aircraft"]
        aircraft_data = parsed_data["aircraft"]
        if num_aircraft != len(aircraft_data):
            raise ValueError(f"Expected {num_aircraft} aircraft, but got {len(aircraft_data)}.")
        
        aircraft = []
        for aircraft_id, plane in enumerate(aircraft_data):
            if "separation_times" not in plane:
                raise ValueError(f"Aircraft {aircraft_id} is missing its separation times.")
            
            wake_category = plane.get("wake_category")
            if isinstance(wake_category, str):
                wake_category = WakeCategory.from_string(wake_category)
            
            aircraft.append(Aircraft(
                aircraft_id=aircraft_id,
                earliest=int(plane["earliest"]),
                target=int(plane["target"]),
                latest=int(plane["latest"]),
                penalty_before=float(plane["penalty_before"]),
                penalty_after=float(plane["penalty_after"]),
                separation_times=tuple(int(t) for t in plane["separation_times"]),
                appearance_time=int(plane.get("appearance_time", 0)),
                wake_category=wake_category
            ))
        
        return cls(aircraft, freeze_time=int(parsed_data.get("freeze_time", 0)))
    
    @property
    def num_aircraft(self) -> int:
        return len(self.aircraft)
    
    def separation_time_between(self, leader_id: int, follower_id: int) -> int:
        return self.aircraft[leader_id].separation_times[follower_id]
    
    def initial_solution(self) -> Solution:
        """Every aircraft lands at its target time"""
        return sort_solution([Arrival(plane.aircraft_id, plane.target) for plane in self.aircraft])
    
    def __str__(self):
        return f"Instance({self.num_aircraft} aircraft, freeze_time={self.freeze_time})"
