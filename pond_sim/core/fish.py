"""
Fish class hierarchy for the pond simulation
Base Fish class with Pike and Carp subclasses for species-specific aging
"""

from typing import Optional, Tuple
from abc import ABC, abstractmethod


OLD_AGE = "old_age"
STARVATION = "starvation"
EATEN = "eaten"


class Fish(ABC):
    """Abstract base class for all fish in the pond"""
    _next_id = 1

    def __init__(self, age: int, max_age: int, reproduction_age: int,
                 position: Tuple[int, int] = (0, 0)) -> None:
        self.id = Fish._next_id
        Fish._next_id += 1
        self.age = age
        self.max_age = max_age
        self.reproduction_age = reproduction_age
        self.position = tuple(position)
        self.is_alive = True
        self.cause_of_death: Optional[str] = None

    @property
    @abstractmethod
    def is_predator(self) -> bool:
        """Return whether this fish is a predator"""
        pass

    @property
    def symbol(self) -> str:
        return "P" if self.is_predator else "C"

    def move(self, new_position: Tuple[int, int]) -> None:
        """Set position without validation (the pond keeps the grid consistent)"""
        self.position = tuple(new_position)

    def can_reproduce(self) -> bool:
        return self.age >= self.reproduction_age

    def die(self, cause: str) -> None:
        """Mark as dead. The first cause recorded is kept."""
        if self.is_alive:
            self.is_alive = False
            self.cause_of_death = cause

    def age_one_tick(self) -> None:
        """Increment age; dies once age exceeds max_age"""
        self.age += 1
        if self.age > self.max_age:
            self.die(OLD_AGE)

    def __repr__(self) -> str:
        state = "alive" if self.is_alive else f"dead:{self.cause_of_death}"
        return (f"{type(self).__name__}(id={self.id}, age={self.age}, "
                f"position={self.position}, {state})")


class Carp(Fish):
    """Carp - prey fish with no extra state"""

    @property
    def is_predator(self) -> bool:
        return False


class Pike(Fish):
    """Pike - predator that starves without regular meals"""

    def __init__(self, age: int, max_age: int, reproduction_age: int,
                 max_hunger_time: int, position: Tuple[int, int] = (0, 0)) -> None:
        super().__init__(age, max_age, reproduction_age, position)
        self.hunger_time = 0
        self.max_hunger_time = max_hunger_time

    @property
    def is_predator(self) -> bool:
        return True

    def is_hungry(self) -> bool:
        return self.hunger_time >= self.max_hunger_time

    def eat(self) -> None:
        """Reset hunger. Finding and removing the prey is the caller's job."""
        self.hunger_time = 0

    def age_one_tick(self) -> None:
        """Age first, then grow hungrier; either check can kill"""
        super().age_one_tick()
        self.hunger_time += 1
        if self.is_hungry():
            self.die(STARVATION)
