"""Command-line entry point for the matrix producer/consumer run."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pcmatrix.prodcons import ProducerConsumer
from pcmatrix.settings import Settings

_USAGE = "usage: pcmatrix [workers [buffer_size [matrices [mode]]]]"


def main(argv: Sequence[str] | None = None) -> int:
    """Run producers and consumers as set by argv and print the totals."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = Settings.from_argv(args)
    except ValueError as exc:
        print(f"pcmatrix: {exc}", file=sys.stderr)
        print(_USAGE, file=sys.stderr)
        return 2

    print(settings.describe(defaults_used=not args))

    if settings.workers < 0:
        print(
            f"pcmatrix: worker count must not be negative, got {settings.workers}",
            file=sys.stderr,
        )
        return 1
    try:
        engine = ProducerConsumer(
            buffer_size=settings.buffer_size,
            matrices=settings.matrices,
            mode=settings.mode,
        )
    except ValueError as exc:
        print(f"pcmatrix: {exc}", file=sys.stderr)
        return 1

    print(f"Producing {settings.matrices} matrices in mode {settings.mode}.")
    print(f"Using a shared buffer of size={settings.buffer_size}")
    print(f"With {settings.workers} producer and consumer thread(s). ")
    print()

    produced, consumed = engine.run(settings.workers)

    print(
        f"Sum of Matrix elements --> Produced={produced.sumtotal} "
        f"= Consumed={consumed.sumtotal}"
    )
    print(
        f"Matrices produced={produced.matrixtotal} "
        f"consumed={consumed.matrixtotal} multiplied={consumed.multtotal}"
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())