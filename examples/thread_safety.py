"""Thread Safety Example - Sharing a FuzzyConfig Between Threads.

FuzzyConfig guards its custom token and pattern aliases with a
readers-writer lock: any number of threads may convert at once, while
registration (add_tokens, add_patterns, add_locale) briefly takes exclusive
access. Conversions never observe a half-registered batch.

Demonstrates:
1. Register at startup, then convert from many threads (recommended)
2. Registering new aliases while conversions are running

Python 3.13+.
"""

from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor, as_completed
from datetime import datetime

from fuzzydate import FuzzyConfig, Pattern
from fuzzydate.constants import TOKEN_WDAY_FRI, TOKEN_WDAY_MON

NOW = datetime.fromisoformat("2024-01-12T15:22:28+02:00")


# Example 1: Register once, convert concurrently (RECOMMENDED)
def example_1_recommended_pattern() -> None:
    """Register all aliases during startup, then share the config for reads."""
    print("=" * 60)
    print("Example 1: Recommended Pattern - Register at Startup")
    print("=" * 60)

    config = FuzzyConfig(week_start_mon=True)
    config.add_tokens({"maanantai": TOKEN_WDAY_MON, "perjantai": TOKEN_WDAY_FRI})
    config.add_patterns({"ensi [wday]": Pattern.NEXT_WDAY, "viime [wday]": Pattern.LAST_WDAY})
    print("[STARTUP] Aliases registered")

    expressions = ["ensi maanantai", "viime perjantai", "-2d 1h", "first day of next month"]

    with ThreadPoolExecutor(max_workers=4) as executor:
        futures = {executor.submit(config.to_datetime, expr, NOW): expr for expr in expressions}
        for future in as_completed(futures):
            print(f"[{futures[future]!r}] -> {future.result().isoformat()}")

    print()


# Example 2: Registration while converting
def example_2_dynamic_registration() -> None:
    """Aliases registered mid-flight become visible to later conversions."""
    print("=" * 60)
    print("Example 2: Registration During Conversions")
    print("=" * 60)

    config = FuzzyConfig()
    registered = threading.Event()
    results: list[str] = []

    def converter() -> None:
        registered.wait(timeout=5.0)
        results.append(config.to_datetime("ensi maanantai", NOW).isoformat())

    def registrar() -> None:
        config.add_tokens({"maanantai": TOKEN_WDAY_MON})
        config.add_patterns({"ensi [wday]": Pattern.NEXT_WDAY})
        registered.set()

    threads = [threading.Thread(target=converter) for _ in range(3)]
    threads.append(threading.Thread(target=registrar))
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    print(f"Converted {len(results)} times: {sorted(set(results))}")
    # Output: Converted 3 times: ['2024-01-15T15:22:28+02:00']
    print()


if __name__ == "__main__":
    example_1_recommended_pattern()
    example_2_dynamic_registration()
