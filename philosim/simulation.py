"""Threaded dining philosophers simulation."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import TextIO

from philosim.arguments import Settings
from philosim.clock import now_ms, wait_until

_SPIN_INTERVAL = 0.0001
_MONITOR_INTERVAL = 0.001
_START_DELAY_PER_PHILOSOPHER_MS = 20


class Activity(Enum):
    """What a philosopher is doing, with the message printed for it."""

    FORK = "has taken a fork"
    EATING = "is eating"
    SLEEPING = "is sleeping"
    THINKING = "is thinking"
    DIED = "died"


@dataclass
class Philosopher:
    """One seat at the table; forks are indices into the simulation's forks."""

    id: int
    left_fork: int
    right_fork: int
    last_eat: int
    eat_count: int = 0
    lock: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )


def format_status(elapsed_ms: int, philosopher_number: int, activity: Activity) -> str:
    """Build one status line: elapsed time, philosopher number and message."""
    return f"{elapsed_ms} {philosopher_number} {activity.value}"


class Simulation:
    """Shared state of one run and the routines the threads execute."""

    def __init__(self, settings: Settings, out: TextIO | None = None) -> None:
        self.settings = settings
        self._out = out if out is not None else sys.stdout
        count = settings.philo_count
        self.start = now_ms() + count * _START_DELAY_PER_PHILOSOPHER_MS
        self.philosophers = [
            Philosopher(
                id=index,
                left_fork=index,
                right_fork=(index + 1) % count,
                last_eat=self.start,
            )
            for index in range(count)
        ]
        self.forks = [threading.Lock() for _ in range(count)]
        self._print_lock = threading.Lock()
        self._running_lock = threading.Lock()
        self._full_lock = threading.Lock()
        self._running = True
        self._full = 0

    # Shared state -------------------------------------------------------

    def is_running(self) -> bool:
        """Tell whether the simulation has not been stopped."""
        with self._running_lock:
            return self._running

    def stop(self) -> None:
        """Stop the simulation; no further status lines are printed."""
        with self._running_lock:
            self._running = False

    def full_count(self) -> int:
        """Return how many philosophers have eaten enough."""
        with self._full_lock:
            return self._full

    def mark_full(self) -> None:
        """Record that one more philosopher has eaten enough."""
        with self._full_lock:
            self._full += 1

    def last_meal(self, philosopher: Philosopher) -> int:
        """Return when *philosopher* last started eating, in milliseconds."""
        with philosopher.lock:
            return philosopher.last_eat

    # Forks --------------------------------------------------------------

    def take_forks(self, philosopher: Philosopher) -> None:
        """Pick up both forks, even seats left first and odd seats right first."""
        if philosopher.id % 2 == 0:
            order = (philosopher.left_fork, philosopher.right_fork)
        else:
            order = (philosopher.right_fork, philosopher.left_fork)
        for fork in order:
            self.forks[fork].acquire()
            self.announce(philosopher, Activity.FORK)

    def release_forks(self, philosopher: Philosopher) -> None:
        """Put both forks back on the table."""
        self.forks[philosopher.left_fork].release()
        self.forks[philosopher.right_fork].release()

    # Output and timing --------------------------------------------------

    def announce(self, philosopher: Philosopher, activity: Activity) -> None:
        """Print a status line for *philosopher* unless the simulation stopped."""
        with self._print_lock:
            if not self.is_running():
                return
            elapsed = now_ms() - self.start
            print(
                format_status(elapsed, philosopher.id + 1, activity),
                file=self._out,
                flush=True,
            )

    def _duration(self, activity: Activity) -> int:
        settings = self.settings
        if activity is Activity.EATING:
            return settings.time_to_eat
        if activity is Activity.SLEEPING:
            return settings.time_to_sleep
        if activity is Activity.DIED:
            return settings.time_to_die
        return 0

    def spend(self, philosopher: Philosopher, activity: Activity) -> None:
        """Wait out *activity*, returning early if the simulation stops."""
        end_at = now_ms() + self._duration(activity)
        while now_ms() < end_at:
            if not self.is_running():
                break
            time.sleep(_SPIN_INTERVAL)
        if activity is Activity.EATING:
            philosopher.eat_count += 1

    # Monitoring ---------------------------------------------------------

    def is_dead(self, philosopher: Philosopher) -> bool:
        """Report and stop on *philosopher* having starved."""
        if now_ms() - self.last_meal(philosopher) > self.settings.time_to_die:
            self.announce(philosopher, Activity.DIED)
            self.stop()
            return True
        return False

    def all_conditions_reached(self) -> bool:
        """Tell whether someone died or everyone has eaten enough."""
        if any(self.is_dead(philosopher) for philosopher in self.philosophers):
            return True
        if self.full_count() == self.settings.philo_count:
            self.stop()
            return True
        return False

    # Thread bodies ------------------------------------------------------

    def _cycle(self, philosopher: Philosopher) -> None:
        self.announce(philosopher, Activity.THINKING)
        self.take_forks(philosopher)
        self.announce(philosopher, Activity.EATING)
        with philosopher.lock:
            philosopher.last_eat = now_ms()
        if philosopher.eat_count == self.settings.must_eat_count:
            self.mark_full()
        self.spend(philosopher, Activity.EATING)
        self.release_forks(philosopher)
        self.announce(philosopher, Activity.SLEEPING)
        self.spend(philosopher, Activity.SLEEPING)

    def _wait_till_die(self, philosopher: Philosopher) -> None:
        with self.forks[0]:
            self.announce(philosopher, Activity.THINKING)
            self.announce(philosopher, Activity.FORK)
            self.spend(philosopher, Activity.DIED)
            self.announce(philosopher, Activity.DIED)

    def _philosopher_routine(self, philosopher: Philosopher) -> None:
        wait_until(self.start)
        if self.settings.philo_count == 1:
            self._wait_till_die(philosopher)
            return
        while self.is_running():
            self._cycle(philosopher)

    def _monitor_routine(self) -> None:
        wait_until(self.start)
        while not self.all_conditions_reached():
            time.sleep(_MONITOR_INTERVAL)

    def run(self) -> None:
        """Start every thread and wait for the simulation to finish."""
        threads = [
            threading.Thread(
                target=self._philosopher_routine,
                args=(philosopher,),
                name=f"philosopher-{philosopher.id + 1}",
            )
            for philosopher in self.philosophers
        ]
        if self.settings.philo_count > 1:
            threads.append(
                threading.Thread(target=self._monitor_routine, name="monitor")
            )
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()