"""Demo driver: fire requests at a limiter and print each decision."""

from __future__ import annotations

import argparse
from dataclasses import replace

from ..core.clock import MonotonicClock
from ..core.logger import configure_logger
from .config import LimiterSettings
from .main import build_limiter


def run(limiter, requests: int = 15, delay: float = 0.5, clock=None) -> list[bool]:
    clock = clock or MonotonicClock()
    results = []
    for i in range(1, requests + 1):
        ok = limiter.try_consume(1)
        results.append(ok)
        if ok:
            print(f"Request {i} processed successfully.")
        else:
            print(f"Request {i} rejected due to rate limiting.")
        clock.sleep(delay)
    return results


def main(argv: list[str] | None = None):
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--requests", type=int, default=15)
    parser.add_argument("--delay", type=float, default=0.5)
    parser.add_argument("--capacity", type=int)
    parser.add_argument("--rate", type=float)
    args = parser.parse_args(argv)

    settings = LimiterSettings.from_env()
    if args.capacity is not None:
        settings = replace(settings, capacity=args.capacity)
    if args.rate is not None:
        settings = replace(settings, refill_rate=args.rate)
    configure_logger(settings.log_level)

    limiter = build_limiter(settings)
    results = run(limiter, requests=args.requests, delay=args.delay)
    print(f"Admitted {sum(results)} of {len(results)} requests")


if __name__ == "__main__":  # pragma: no cover
    main()
