from __future__ import annotations
import random
from abc import ABC, abstractmethod

POCKETS = 37


class RandomSource(ABC):
    @abstractmethod
    def draw(self) -> int:
        """Uniform integer in [0, 36]."""
        raise NotImplementedError


class SystemRandomSource(RandomSource):
    def __init__(self) -> None:
        self.rng = random.SystemRandom()

    def draw(self) -> int:
        return self.rng.randrange(POCKETS)


class SeededRandomSource(RandomSource):
    def __init__(self, seed: int | None = None) -> None:
        self.rng = random.Random(seed)

    def draw(self) -> int:
        return self.rng.randrange(POCKETS)
