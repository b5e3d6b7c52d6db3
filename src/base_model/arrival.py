from dataclasses import dataclass

@dataclass(frozen=True)
class Arrival:
    """Class representing an aircraft assigned to a landing time"""
    aircraft_id: int
    landing_time: int
        
    def __str__(self):
        return f"Arrival(A{self.aircraft_id}, T{self.landing_time})"
