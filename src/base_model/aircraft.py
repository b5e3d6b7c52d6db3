from dataclasses import dataclass
from typing import Optional, Tuple

from src.base_model.wake_category import WakeCategory

@dataclass(frozen=True)
class Aircraft:
    """Class representing an aircraft waiting to land"""
    aircraft_id: int # 0-indexed, also the index into every separation row
    earliest: int
    target: int
    latest: int
    penalty_before: float # cost per unit of time for landing before target
    penalty_after: float # cost per unit of time for landing after target
    separation_times: Tuple[int, ...] # separation_times[j]: time that must pass after this aircraft lands before j may land
    appearance_time: int = 0
    wake_category: Optional[WakeCategory] = None
    
    def cost_for_landing(self, landing_time: int) -> float:
        if landing_time < self.target:
            return self.penalty_before * (self.target - landing_time)
        return self.penalty_after * (landing_time - self.target)
    
    def is_within_window(self, landing_time: int) -> bool:
        return self.earliest <= landing_time <= self.latest
    
    def __str__(self):
        return f"(#{self.aircraft_id}, T={self.earliest}<{self.target}<{self.latest})"
