import random
from typing import Sequence, TypeVar

from subsynth.errors import EmptyChoice, InvalidRange

T = TypeVar("T")


class RandomSource:
    """Seeded source of every random draw in a batch.

    Owns a private ``random.Random`` so nothing else in the process can
    disturb the sequence; one seed reproduces a whole batch.
    """

    def __init__(self, seed: int):
        self.seed = seed
        self._rng = random.Random(seed)

    def draw_int(self, low: int, high: int) -> int:
        """Uniform integer in ``[low, high]``, both ends included."""
        if low > high:
            raise InvalidRange(f"cannot draw from empty range [{low}, {high}]")
        return self._rng.randint(low, high)

    def choose(self, seq: Sequence[T]) -> T:
        if not seq:
            raise EmptyChoice("cannot choose from an empty sequence")
        return seq[self.draw_int(0, len(seq) - 1)]
