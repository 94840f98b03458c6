# philosim

A simulation of the dining philosophers problem. Each philosopher runs in its
own thread and sits at a round table with one fork between each pair of
neighbours. A philosopher thinks, picks up both neighbouring forks, eats,
puts the forks down and sleeps, over and over. Philosophers in even seats
reach for their left fork first and those in odd seats for their right fork
first. A monitor thread checks every millisecond whether a philosopher has
gone longer than the time to die without starting a meal. It also checks
whether every philosopher is full.

## Installation

```
pip install .
```

## Usage

```
philosim number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_meals]
```

The same can be run with `python -m philosim.cli`.

All times are in milliseconds. Every argument must be a positive whole number
that fits in a signed 32-bit integer. Leading whitespace and a sign are
accepted, so `" +5"` reads as 5. The start of the simulation is put off by
20 ms for each philosopher, so that every thread is ready before the first
event.

If `number_of_meals` is given, a philosopher counts as full when it starts a
meal after already having eaten that many. The simulation stops once every
philosopher is full. Without it, the simulation runs until a philosopher dies.

A lone philosopher takes the only fork, waits out the time to die and then
dies. No monitor runs in that case and `number_of_meals` has no effect.

Each event is printed on its own line. A line holds the number of milliseconds
since the start, the philosopher's number (counting from 1), and what happened:

```
0 1 is thinking
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
200 1 is sleeping
...
410 3 died
```

The possible events are `has taken a fork`, `is eating`, `is sleeping`,
`is thinking` and `died`. Nothing is printed after a death or after every
philosopher is full.

If the number of arguments is wrong, the usage line is printed. If an argument
is invalid, `Error: Invalid arguments.` is printed. In both cases the command
exits with status 1.

## Using it from Python

```python
import io

from philosim.arguments import parse_arguments
from philosim.simulation import Simulation

settings = parse_arguments(["4", "410", "200", "200", "3"])
out = io.StringIO()
Simulation(settings, out).run()
print(out.getvalue())
```

- `philosim.arguments` has `parse_arguments`, which returns a frozen
  `Settings` dataclass and raises `ArgumentError` (a `ValueError`) for bad
  input. It also has the helpers `is_valid_number` and `parse_number`.
  `parse_number` returns -1 when a value leaves the 32-bit range.
- `philosim.simulation` has `Simulation`, whose `run()` starts the threads
  and blocks until they finish. Output goes to the `out` stream, or to
  standard output when `out` is `None`. The module also has the `Activity`
  enum, whose values are the event messages, and the `Philosopher`
  dataclass. `format_status(elapsed_ms, philosopher_number, activity)` builds
  one status line.
- `philosim.clock` has `now_ms()` for wall-clock milliseconds and
  `wait_until(deadline_ms)`.
- `philosim.cli` has `main(argv=None)`, which returns the exit status.

## Running the tests

```
pip install ".[test]"
pytest
```