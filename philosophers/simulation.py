"""Threaded dining-philosophers simulation with a monitoring thread."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass, field
from typing import Optional, TextIO

from .rules import Rules

_MAX_EAT_ATTEMPTS = 1000
_RETRY_DELAY = 0.0001
_MONITOR_DELAY = 0.0001


def current_time_ms() -> int:
    """Wall-clock time in whole milliseconds."""
    return time.time_ns() // 1_000_000


@dataclass(eq=False)
class Philosopher:
    """One diner: its forks, its meal count and the time of its last meal."""

    id: int
    left_fork: threading.Lock
    right_fork: threading.Lock
    last_meal: int
    meals_eaten: int = 0
    lock: threading.Lock = field(default_factory=threading.Lock)
    thread: Optional[threading.Thread] = None

    def fork_order(self) -> tuple[threading.Lock, threading.Lock]:
        """Forks in the order this philosopher picks them up."""
        if self.id % 2 == 0:
            return self.right_fork, self.left_fork
        return self.left_fork, self.right_fork


class Simulation:
    """Runs the philosophers and a monitor until a death or all have eaten."""

    def __init__(self, rules: Rules, out: Optional[TextIO] = None) -> None:
        self.rules = rules
        self.out = out if out is not None else sys.stdout
        self.start_time = current_time_ms()
        self.forks = [threading.Lock() for _ in range(rules.nb_philos)]
        self.philosophers = [
            Philosopher(
                id=index + 1,
                left_fork=self.forks[index],
                right_fork=self.forks[(index + 1) % rules.nb_philos],
                last_meal=self.start_time,
            )
            for index in range(rules.nb_philos)
        ]
        self._print_lock = threading.Lock()
        self._death_lock = threading.Lock()
        self._stopped = False

    def run(self) -> None:
        """Start every thread and wait for all of them to finish."""
        for philosopher in self.philosophers:
            with philosopher.lock:
                philosopher.last_meal = current_time_ms()
            philosopher.thread = threading.Thread(
                target=self.philosopher_routine, args=(philosopher,), daemon=True
            )
            philosopher.thread.start()
        monitor = threading.Thread(target=self.monitor_routine, daemon=True)
        monitor.start()
        monitor.join()
        for philosopher in self.philosophers:
            philosopher.thread.join()

    def is_stopped(self) -> bool:
        """Whether the simulation has ended."""
        with self._death_lock:
            return self._stopped

    def _stop(self) -> None:
        with self._death_lock:
            self._stopped = True

    def _elapsed(self) -> int:
        return current_time_ms() - self.start_time

    def display_action(self, philosopher: Philosopher, message: str) -> None:
        """Print a timestamped action unless the simulation has ended."""
        with self._print_lock:
            if not self.is_stopped():
                self.out.write(f"{self._elapsed()} {philosopher.id} {message}\n")
                self.out.flush()

    def sleep_if_alive(self, duration_ms: int) -> None:
        """Wait for ``duration_ms`` milliseconds, returning early on stop."""
        end_time = current_time_ms() + duration_ms
        while not self.is_stopped():
            time_left = end_time - current_time_ms()
            if time_left <= 0:
                break
            time.sleep(0.002 if time_left > 5 else 0.0005)

    def _handle_death(self, philosopher: Philosopher) -> None:
        with self._death_lock:
            if self._stopped:
                return
            self._stopped = True
        with self._print_lock:
            self.out.write(f"{self._elapsed()} {philosopher.id} died\n")
            self.out.flush()

    def check_death(self) -> bool:
        """Report the first philosopher that starved; True if one did."""
        for philosopher in self.philosophers:
            with philosopher.lock:
                starving = current_time_ms() - philosopher.last_meal
            if starving >= self.rules.time_to_die:
                self._handle_death(philosopher)
                return True
        return False

    def check_full(self) -> bool:
        """True when a meal goal is set and every philosopher has reached it."""
        must_eat = self.rules.must_eat
        if must_eat is None or must_eat <= 0:
            return False
        full = 0
        for philosopher in self.philosophers:
            with philosopher.lock:
                if philosopher.meals_eaten >= must_eat:
                    full += 1
        return full == self.rules.nb_philos

    def check_end_condition(self) -> bool:
        """Stop the simulation on a death or when everyone has eaten enough."""
        if self.check_death():
            return True
        if self.check_full():
            self._stop()
            return True
        return False

    def _grab_forks(
        self, philosopher: Philosopher, first: threading.Lock, second: threading.Lock
    ) -> bool:
        first.acquire()
        self.display_action(philosopher, "has taken a fork")
        if self.is_stopped():
            first.release()
            return False
        second.acquire()
        self.display_action(philosopher, "has taken a fork")
        if self.is_stopped():
            first.release()
            second.release()
            return False
        return True

    def _start_eating(self, philosopher: Philosopher) -> None:
        if self.is_stopped():
            return
        self.display_action(philosopher, "is eating")
        now = current_time_ms()
        with philosopher.lock:
            philosopher.last_meal = now
            philosopher.meals_eaten += 1
        self.sleep_if_alive(self.rules.time_to_eat)

    def eat_cycle(self, philosopher: Philosopher) -> None:
        """Take both forks, eat once, and put the forks back."""
        first, second = philosopher.fork_order()
        attempts = 0
        while not self.is_stopped() and attempts < _MAX_EAT_ATTEMPTS:
            attempts += 1
            if not self._grab_forks(philosopher, first, second):
                time.sleep(_RETRY_DELAY)
                continue
            try:
                self._start_eating(philosopher)
            finally:
                second.release()
                first.release()
            break

    def _lone_philosopher(self, philosopher: Philosopher) -> None:
        start = current_time_ms()
        with philosopher.left_fork:
            self.display_action(philosopher, "has taken a fork")
            while current_time_ms() - start < self.rules.time_to_die:
                time.sleep(_RETRY_DELAY)

    def philosopher_routine(self, philosopher: Philosopher) -> None:
        """Eat, sleep and think until the simulation ends."""
        if self.rules.nb_philos == 1:
            self._lone_philosopher(philosopher)
            return
        self.display_action(philosopher, "is thinking")
        if philosopher.id % 2 == 0:
            time.sleep(_RETRY_DELAY)
        while not self.is_stopped():
            self.eat_cycle(philosopher)
            self.display_action(philosopher, "is sleeping")
            self.sleep_if_alive(self.rules.time_to_sleep)
            self.display_action(philosopher, "is thinking")
            if self.rules.nb_philos % 2 != 0:
                self.sleep_if_alive(self.rules.time_to_think())

    def monitor_routine(self) -> None:
        """Watch for the end condition and stop the simulation when it holds."""
        while not self.is_stopped():
            if self.check_end_condition():
                self._stop()
                break
            time.sleep(_MONITOR_DELAY)