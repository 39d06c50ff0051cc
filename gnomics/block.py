"""Base class defining the lifecycle shared by every computational block."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from typing import Any, Union

PathLike = Union[str, "os.PathLike[str]"]


class Block(ABC):
    """A unit of computation with a fixed lifecycle.

    A forward pass runs ``step`` (advance time), ``pull`` (gather inputs from
    children), ``compute`` (turn inputs into outputs), ``store`` (record the
    output in history) and, when learning, ``learn`` (update memories).
    """

    def init(self) -> None:
        """Set up internal structures from the connected inputs."""

    @abstractmethod
    def save(self, path: PathLike) -> None:
        """Persist learned state to ``path``."""

    @abstractmethod
    def load(self, path: PathLike) -> None:
        """Restore learned state from ``path``."""

    @abstractmethod
    def clear(self) -> None:
        """Reset input, output and memory state; learned weights are kept."""

    @abstractmethod
    def step(self) -> None:
        """Advance the output history by one time step."""

    @abstractmethod
    def pull(self) -> None:
        """Copy child outputs into the block's inputs."""

    @abstractmethod
    def compute(self) -> None:
        """Compute the output state from the input state."""

    def learn(self) -> None:
        """Update internal memories from the current inputs and outputs."""

    @abstractmethod
    def store(self) -> None:
        """Record the current output state in history."""

    @abstractmethod
    def memory_usage(self) -> int:
        """Estimated memory footprint in bytes."""

    @abstractmethod
    def output(self) -> Any:
        """The block's shared output object, for connecting to other blocks."""

    def execute(self, learn_flag: bool) -> None:
        """Run step, pull, compute and store, then learn if ``learn_flag`` is true."""
        self.step()
        self.pull()
        self.compute()
        self.store()
        if learn_flag:
            self.learn()