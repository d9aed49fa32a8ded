"""The fixed parameters of a dining-philosophers simulation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

from .parser import validate_arguments


@dataclass(frozen=True)
class Rules:
    """Parameters of a simulation, all times in milliseconds.

    ``must_eat`` is ``None`` when no meal count ends the simulation.
    """

    nb_philos: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    must_eat: Optional[int] = None

    @classmethod
    def from_args(cls, args: Sequence[str]) -> "Rules":
        """Build rules from command-line arguments (program name excluded).

        The order is: number of philosophers, time to die, time to eat,
        time to sleep and, optionally, the number of meals each must eat.
        """
        values = validate_arguments(args)
        nb_philos, time_to_die, time_to_eat, time_to_sleep, *rest = values
        return cls(
            nb_philos=nb_philos,
            time_to_die=time_to_die,
            time_to_eat=time_to_eat,
            time_to_sleep=time_to_sleep,
            must_eat=rest[0] if rest else None,
        )

    def time_to_think(self) -> int:
        """Thinking pause: 90% of the slack left after eating and sleeping.

        Truncated toward zero; negative when there is no slack.
        """
        slack = self.time_to_die - self.time_to_eat - self.time_to_sleep
        return int(slack * 0.9)