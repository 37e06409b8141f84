"""Execute a single test-data step through the CLI wrapper.

A step is a command suffix appended to the wrapper invocation
(``ts-node index.ts`` by default) followed by a fixed wait, which lets the
external system settle before the next step is issued.
"""
from __future__ import annotations

import argparse
import shlex
import subprocess
import sys
import time
from typing import Optional, Sequence

DEFAULT_WRAPPER = "ts-node index.ts"


def wait(seconds: float) -> None:
    print(f"Waiting {seconds} seconds!")
    time.sleep(seconds)


def build_command(command: str, wrapper: str = DEFAULT_WRAPPER) -> str:
    """Full command line: wrapper followed by the suffix, passed verbatim."""
    return f"{wrapper} {command}"


def execute(
    command: str,
    wait_s: float,
    wrapper: str = DEFAULT_WRAPPER,
    cwd: Optional[str] = None,
) -> str:
    """Run ``<wrapper> <command>``, print its stdout, then wait ``wait_s`` seconds.

    Returns the captured stdout once the wait has elapsed. A non-zero exit
    raises :class:`subprocess.CalledProcessError` before any wait happens;
    a spawn failure surfaces as the underlying ``OSError``.
    """
    full_cmd = build_command(command, wrapper)
    print(f"Executing: {full_cmd}")

    process = subprocess.run(
        shlex.split(full_cmd),
        cwd=cwd,
        capture_output=True,
        text=True,
    )
    print(process.stdout)
    process.check_returncode()

    wait(wait_s)
    return process.stdout


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run a single test-data step via the CLI wrapper")
    parser.add_argument("command", help="Suffix passed to the wrapper, e.g. 'register roco --export -o 1-register-roco'")
    parser.add_argument("--wait", type=int, default=0, help="Seconds to wait after a successful run")
    parser.add_argument("--wrapper", default=DEFAULT_WRAPPER, help=f"Wrapper invocation (défaut: '{DEFAULT_WRAPPER}')")
    parser.add_argument("--workdir", default=None, help="Directory the wrapper runs in")
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_arg_parser()
    args = parser.parse_args(argv)
    if args.wait < 0:
        parser.error("--wait must be >= 0")
    try:
        execute(args.command, args.wait, wrapper=args.wrapper, cwd=args.workdir)
    except subprocess.CalledProcessError as exc:
        if exc.stderr:
            print(exc.stderr, file=sys.stderr, end="")
        sys.exit(exc.returncode or 1)


if __name__ == "__main__":
    main()
