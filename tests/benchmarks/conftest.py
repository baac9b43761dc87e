"""Deterministic stack-trace generators for performance benchmarks.

All generators produce fixed, reproducible text. No random values.
Three shapes: a long flat trace of unrelated frames, a wide trace of
frames sharing package prefixes, and a deep chain where every frame
extends the previous one.
"""

from __future__ import annotations

import pytest


def generate_flat_trace(num_lines: int) -> str:
    """Frames that share no word with their predecessor."""
    return "".join(
        f"frame{i}_{'ab'[i % 2]}.call(File{i}.java:{i})\n" for i in range(num_lines)
    )


def generate_package_trace(num_packages: int, frames_per_package: int) -> str:
    """Java-style frames grouped under a handful of packages."""
    lines: list[str] = []
    for p in range(num_packages):
        for f in range(frames_per_package):
            lines.append(
                f"        at org.example.pkg{p}.sub.Handler{f % 3}"
                f".method{f}(Handler{f % 3}.java:{f + 1})"
            )
    return "\n".join(lines) + "\n"


def generate_deep_chain(depth: int) -> str:
    """Each line extends the previous one by one path component."""
    return "".join("x." * k + "y\n" for k in range(1, depth + 1))


def generate_nested_brackets(depth: int) -> str:
    """One line of ``depth`` nested generic brackets."""
    return "Outer" + "<T" * depth + ">" * depth + "::call"


# --- Fixtures for each shape ---


@pytest.fixture
def flat_trace_1000() -> str:
    """1000 unrelated frames."""
    return generate_flat_trace(1000)


@pytest.fixture
def package_trace_1000() -> str:
    """50 packages x 20 frames."""
    return generate_package_trace(50, 20)


@pytest.fixture
def deep_chain_1500() -> str:
    """1500 ever-deepening frames."""
    return generate_deep_chain(1500)


@pytest.fixture
def nested_brackets_10000() -> str:
    """10 000 nested generic brackets on one line."""
    return generate_nested_brackets(10_000)
