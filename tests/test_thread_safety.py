"""Thread safety tests.

Schemas are immutable and the active schema lives in a ContextVar. These
tests verify that:
1. Threads transliterating with different schemas do not see each other's tables
2. One Transliterator can be shared across threads
3. set_schema in one thread leaves other threads on SBL

These tests use real threading to catch actual concurrency bugs.
"""

import threading
from concurrent.futures import ThreadPoolExecutor, as_completed

from hebrew_transliteration import Transliterator, get_schema, set_schema, transliterate, with_defaults
from hebrew_transliteration.schema import SBL

SHALOM = "ש\u05B8\u05C1לו\u05B9ם"
SHABBAT = "ש\u05B7\u05C1ב\u05B8\u05BCת"

SCHEMAS = {
    "sbl": ({}, "šālôm"),
    "sh": ({"SHIN": "sh"}, "shālôm"),
    "x": ({"SHIN": "x", "QAMATS": "a"}, "xalôm"),
    "o": ({"HOLAM_VAV": "o"}, "šālom"),
}


class TestConcurrentTransliteration:
    """Concurrent calls with different schemas."""

    def test_different_schemas(self) -> None:
        errors: list[str] = []

        def run(name: str, iteration: int) -> None:
            overrides, expected = SCHEMAS[name]
            result = transliterate(SHALOM, overrides)
            if result != expected:
                errors.append(f"{name}/{iteration}: got {result!r}, expected {expected!r}")

        with ThreadPoolExecutor(max_workers=8) as executor:
            futures = [
                executor.submit(run, name, i) for i in range(25) for name in SCHEMAS
            ]
            for future in as_completed(futures):
                future.result()

        assert not errors, f"Thread errors: {errors}"

    def test_shared_transliterator(self) -> None:
        tr = Transliterator({"SHIN": "sh"})
        results: list[list[str]] = []
        lock = threading.Lock()

        def run() -> None:
            out = tr.transliterate_many([SHALOM, SHABBAT])
            with lock:
                results.append(out)

        threads = [threading.Thread(target=run) for _ in range(16)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=5.0)

        assert len(results) == 16
        assert all(out == ["shālôm", "shabbāt"] for out in results)


class TestContextIsolation:
    """The active schema is per thread."""

    def test_set_schema_does_not_leak(self) -> None:
        seen: list[str] = []
        ready = threading.Event()
        done = threading.Event()

        def setter() -> None:
            set_schema(with_defaults(SBL, {"SHIN": "sh"}))
            ready.set()
            done.wait(timeout=5.0)
            seen.append(get_schema().shin)

        def reader() -> None:
            ready.wait(timeout=5.0)
            seen.append(get_schema().shin)
            done.set()

        threads = [threading.Thread(target=setter), threading.Thread(target=reader)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=5.0)

        assert sorted(seen) == ["sh", "š"]
        assert get_schema() is SBL
