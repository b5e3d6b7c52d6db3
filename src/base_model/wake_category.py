from enum import Enum, auto

class WakeCategory(Enum):
    """
    Wake turbulence category of an aircraft.
    The category of the leading aircraft decides how long a following aircraft has to wait,
    which is why the separation between two aircraft is not symmetric.
    """
    
    HEAVY = auto()
    MEDIUM = auto()
    LIGHT = auto()
    
    def __str__(self):
        return self.name.capitalize()
    
    @classmethod
    def from_string(cls, category_string: str) -> 'WakeCategory':
        try:
            return cls[category_string.upper()]
        except KeyError:
            raise ValueError(f"No wake category found for: {category_string}")
