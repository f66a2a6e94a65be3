#!/usr/bin/env python3
# =============================================================================
# approxeq -- CI CHECKS RUNNER
# File:   scripts/run_ci_checks.py
# =============================================================================
#
# PURPOSE
# -------
# Runs the test suite once per NaN-policy configuration:
#   Stage 1: pytest with default settings    (APPROXEQ_NAN_EQUALITY=0)
#   Stage 2: pytest with NaN-equality on     (APPROXEQ_NAN_EQUALITY=1)
# Both stages enforce coverage >= 90% via pytest-cov.
#
# Exit codes:
#   0 -- All stages passed.
#   1 -- Stage 1 failed.
#   2 -- Stage 2 failed.
#
# Usage:
#   python scripts/run_ci_checks.py
# =============================================================================

from __future__ import annotations

import os
import pathlib
import subprocess
import sys

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
_REPO_ROOT = pathlib.Path(__file__).parent.parent
_PYTHON    = sys.executable

_PYTEST_CMD = [
    _PYTHON, "-m", "pytest",
    "--cov=approxeq",
    "--cov-report=term-missing",
    "--cov-fail-under=90",
]

_STAGES = (
    ("default", {"APPROXEQ_NAN_EQUALITY": "0", "APPROXEQ_NULL_FEATURE": "1"}, 1),
    ("nan-equality", {"APPROXEQ_NAN_EQUALITY": "1", "APPROXEQ_NULL_FEATURE": "1"}, 2),
)


def _separator(char: str = "=", width: int = 72) -> str:
    return char * width


def _run(cmd: list[str], label: str, env_overrides: dict[str, str]) -> int:
    """
    Run a subprocess command with extra environment variables, stream
    stdout/stderr live, return exit code.
    """
    print(_separator())
    print(f"CI STAGE: {label}")
    print(f"CMD:      {' '.join(cmd)}")
    print(f"ENV:      {' '.join(f'{k}={v}' for k, v in env_overrides.items())}")
    print(_separator("-"))
    sys.stdout.flush()

    proc = subprocess.run(
        cmd,
        cwd=str(_REPO_ROOT),
        env={**os.environ, **env_overrides},
    )
    return proc.returncode


def main() -> int:
    print(_separator())
    print("approxeq CI GATE -- starting")
    print(_separator())
    sys.stdout.flush()

    for label, env_overrides, failure_code in _STAGES:
        rc = _run(_PYTEST_CMD, f"pytest [{label}]", env_overrides)
        if rc != 0:
            print(_separator())
            print(f"CI RESULT: FAIL  [stage={label}  exit_code={rc}]")
            print(_separator())
            sys.stdout.flush()
            return failure_code

        print(_separator("-"))
        print(f"CI STAGE {label}: PASS")
        sys.stdout.flush()

    print(_separator())
    print("CI RESULT: PASS  [stages=" + ",".join(s[0] for s in _STAGES) + "]")
    print(_separator())
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
