"""Producers and consumers of random matrices sharing a bounded buffer."""

from __future__ import annotations

import random as _random
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import TextIO

from pcmatrix.counter import Counter
from pcmatrix.matrix import Matrix, display_matrix
from pcmatrix.settings import DEFAULT_MATRIX_MODE, LOOPS, MAX


@dataclass
class ProdConsStats:
    """Totals kept by one worker thread.

    sumtotal is the sum of all elements produced or consumed, multtotal
    the number of multiplications done and matrixtotal the number of
    matrices produced or consumed.
    """

    sumtotal: int = 0
    multtotal: int = 0
    matrixtotal: int = 0

    def record(self, matrix: Matrix) -> None:
        """Count one matrix and add its elements to the running sum."""
        self.sumtotal += matrix.total()
        self.matrixtotal += 1

    def __add__(self, other: object) -> ProdConsStats:
        if not isinstance(other, ProdConsStats):
            return NotImplemented
        return ProdConsStats(
            sumtotal=self.sumtotal + other.sumtotal,
            multtotal=self.multtotal + other.multtotal,
            matrixtotal=self.matrixtotal + other.matrixtotal,
        )


class BoundedBuffer:
    """A fixed-capacity ring of matrices.

    The buffer itself does no waiting; callers serialise access with
    their own lock. It also counts how many matrices went in and out.
    """

    def __init__(self, capacity: int = MAX) -> None:
        if capacity < 1:
            raise ValueError(f"buffer capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._slots: list[Matrix | None] = [None] * capacity
        self._fill = 0
        self._use = 0
        self._count = Counter()
        self.produced = Counter()
        self.consumed = Counter()

    def put(self, matrix: Matrix) -> None:
        """Store a matrix in the next free slot."""
        if self.full:
            raise IndexError("put into a full buffer")
        self._slots[self._fill] = matrix
        self._fill = (self._fill + 1) % self.capacity
        self._count.increment()
        self.produced.increment()

    def get(self) -> Matrix:
        """Remove and return the oldest matrix."""
        if not len(self):
            raise IndexError("get from an empty buffer")
        matrix = self._slots[self._use]
        self._slots[self._use] = None
        self._use = (self._use + 1) % self.capacity
        self._count.decrement()
        self.consumed.increment()
        assert matrix is not None
        return matrix

    @property
    def full(self) -> bool:
        """Whether every slot is taken."""
        return len(self) == self.capacity

    def __len__(self) -> int:
        return self._count.value()


class _Worker(threading.Thread):
    """A thread that keeps its target's return value or exception."""

    def __init__(self, target: Callable[[], ProdConsStats]) -> None:
        super().__init__(daemon=True)
        self._job = target
        self._result: ProdConsStats | None = None
        self._error: BaseException | None = None

    def run(self) -> None:
        try:
            self._result = self._job()
        except BaseException as exc:  # re-raised in the joining thread
            self._error = exc

    def join_result(self) -> ProdConsStats:
        self.join()
        if self._error is not None:
            raise self._error
        assert self._result is not None
        return self._result


class ProducerConsumer:
    """Produces matrices into a shared buffer and multiplies pairs of them.

    A consumer takes one matrix, then takes further matrices one at a time
    until one can be multiplied by the first; matrices that do not fit are
    discarded. Each multiplication is written to the output stream.
    """

    def __init__(
        self,
        buffer_size: int = MAX,
        matrices: int = LOOPS,
        mode: int = DEFAULT_MATRIX_MODE,
        rng: _random.Random | None = None,
        stream: TextIO | None = None,
    ) -> None:
        if mode < 0:
            raise ValueError(f"matrix mode must not be negative, got {mode}")
        self.buffer = BoundedBuffer(buffer_size)
        self.matrices = matrices
        self.mode = mode
        self.rng = rng if rng is not None else _random.Random()
        self.stream = stream
        self._lock = threading.Lock()
        self._has_room = threading.Condition(self._lock)
        self._has_items = threading.Condition(self._lock)

    def _all_produced(self) -> bool:
        return self.buffer.produced.value() >= self.matrices

    def _all_consumed(self) -> bool:
        return self.buffer.consumed.value() >= self.matrices

    def produce(self) -> ProdConsStats:
        """Generate matrices into the buffer until enough have been made."""
        stats = ProdConsStats()
        buffer = self.buffer
        while not self._all_produced():
            matrix = Matrix.random(self.mode, self.rng)
            with self._lock:
                while buffer.full and not self._all_produced():
                    self._has_room.wait()
                if not self._all_produced():
                    buffer.put(matrix)
                    stats.record(matrix)
                self._has_items.notify()
        with self._lock:
            self._has_items.notify_all()
        return stats

    def consume(self) -> ProdConsStats:
        """Take matrices from the buffer and multiply pairs until done."""
        stats = ProdConsStats()
        while not self._all_consumed():
            with self._lock:
                if not self._consume_pair(stats):
                    break
        with self._lock:
            self._has_room.notify_all()
        return stats

    def _await_items(self) -> None:
        while not len(self.buffer) and not self._all_consumed():
            self._has_items.wait()

    def _drained(self) -> bool:
        return not len(self.buffer) and self._all_consumed()

    def _take(self, stats: ProdConsStats) -> Matrix:
        matrix = self.buffer.get()
        stats.record(matrix)
        self._has_room.notify()
        return matrix

    def _consume_pair(self, stats: ProdConsStats) -> bool:
        """Find and multiply one pair; return False when work has run out."""
        self._await_items()
        if self._all_consumed():
            return False
        first = self._take(stats)
        if self._drained():
            return False

        self._await_items()
        if self._all_consumed():
            return False
        second = self._take(stats)

        product = first.multiply(second, self.stream)
        while product is None:
            self._await_items()
            if self._drained() or self._all_consumed():
                return False
            second = self._take(stats)
            product = first.multiply(second, self.stream)

        stats.multtotal += 1
        out = self.stream
        display_matrix(first, out)
        self._write("\tX\n")
        display_matrix(second, out)
        self._write("\t=\n")
        display_matrix(product, out)
        self._write("\n")
        return True

    def _write(self, text: str) -> None:
        if self.stream is None:
            print(text, end="")
        else:
            self.stream.write(text)

    def run(self, workers: int = 1) -> tuple[ProdConsStats, ProdConsStats]:
        """Run workers producers and workers consumers on a fresh buffer.

        Returns the summed producer stats and the summed consumer stats.
        """
        if workers < 0:
            raise ValueError(f"worker count must not be negative, got {workers}")
        self.buffer = BoundedBuffer(self.buffer.capacity)
        producers = [_Worker(self.produce) for _ in range(workers)]
        consumers = [_Worker(self.consume) for _ in range(workers)]
        for producer, consumer in zip(producers, consumers):
            producer.start()
            consumer.start()
        produced = sum((p.join_result() for p in producers), ProdConsStats())
        consumed = sum((c.join_result() for c in consumers), ProdConsStats())
        return produced, consumed