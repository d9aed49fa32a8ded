# philosophers

A threaded simulation of the dining philosophers problem. The philosophers sit around a table. Each one eats, sleeps and thinks in turn. There is one fork between each pair of neighbours, and a philosopher needs both of its forks to eat. Every philosopher runs in its own thread. A monitor thread ends the simulation in one of two cases:

- a philosopher has gone `time_to_die` milliseconds without starting a meal;
- a meal count was given and every philosopher has eaten at least that many meals.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_times_each_philosopher_must_eat]
```

The same program can also be started with `python -m philosophers.cli`, followed by the same arguments.

All times are in milliseconds. Each argument must be a positive whole number no greater than 2147483647. Leading whitespace and a single leading `+` are accepted. The program rejects the following and exits with status 1:

- a wrong number of arguments, reported on standard error as `Error : expected 4 or 5 arguments`;
- a value that is not valid, reported as `Error: invalid argument value`.

Example:

```
philo 5 800 200 200 7
```

Each event goes on its own line of standard output, in this form:

```
<milliseconds since start> <philosopher number> <action>
```

Philosophers are numbered from 1. The action is one of the following:

- `has taken a fork`
- `is eating`
- `is sleeping`
- `is thinking`
- `died`

A starving philosopher produces one `died` line, and nothing is printed after it. If the simulation ends because everyone has eaten enough, no `died` line is printed.

Notes on the behaviour:

- Odd-numbered philosophers take their left fork first. Even-numbered philosophers take their right fork first.
- When the number of philosophers is odd, each philosopher pauses after thinking. The pause is 90% of `time_to_die - time_to_eat - time_to_sleep`.
- A single philosopher takes one fork and waits until it starves.

## Library use

```python
import sys

from philosophers.rules import Rules
from philosophers.simulation import Simulation

rules = Rules.from_args(["4", "410", "200", "200", "3"])
Simulation(rules, sys.stdout).run()
```

- `philosophers.parser.parse_number` parses one argument.
- `philosophers.parser.validate_arguments` checks a list of 4 or 5 arguments and returns the values as integers.
- Both functions raise `philosophers.parser.ArgumentError`, a subclass of `ValueError`, when the input is not valid.
- `Rules` is a frozen dataclass. Its `must_eat` field is `None` when no meal count was given.
- `Simulation(rules, out)` writes its events to `out`, which defaults to standard output.

## Tests

```
pip install .[test]
pytest
```