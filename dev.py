"""Development script to run checks (formatting, linting, tests) and a sample run."""

import argparse
import subprocess
import sys


def run_command(command: list[str], step_name: str) -> None:
    """Run a shell command as a step in the development process."""
    print(f"\n--- Running Step: {step_name} ---")
    print(f"$ {' '.join(command)}")
    try:
        subprocess.run(command, check=True)
    except subprocess.CalledProcessError:
        print(f"\n❌ Failed: {step_name}")
        sys.exit(1)


def main() -> None:
    """Run the development checks and optionally a sample extraction."""
    parser = argparse.ArgumentParser(
        description="Run development checks and a sample extraction."
    )
    parser.add_argument(
        "--ci", action="store_true", help="Run checks and tests only, without fixing"
    )
    parser.add_argument(
        "--sample",
        help="Source file or directory to dump after the checks pass",
    )
    args = parser.parse_args()

    if not args.ci:
        run_command([sys.executable, "-m", "ruff", "format"], "Ruff Formatting")
        run_command(
            [sys.executable, "-m", "ruff", "check", "--fix"],
            "Ruff Linting & Fixes",
        )

    run_command([sys.executable, "-m", "ruff", "format", "--check"], "Format Check")
    run_command([sys.executable, "-m", "ruff", "check"], "Lint Check")
    run_command([sys.executable, "-m", "pytest", "-q"], "Tests")

    if args.ci:
        print("\n✅ CI checks passed successfully.")
        return

    if args.sample:
        run_command(
            [sys.executable, "main.py", args.sample, "--dump"],
            "Sample Extraction",
        )

    print("\n✅ All development checks passed successfully.")


if __name__ == "__main__":
    main()
