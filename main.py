"""Entry point for extracting documentation from a source tree.

Usage: python main.py [--dev] FILE [extract_docs options...]
"""

import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path

from tagdoc.extract_docs import main as extract_main


def run_command(cmd_list: Sequence[str | Path], cwd: Path | str | None = None) -> None:
    """Run a command and exit if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        subprocess.run(cmd_list, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def main() -> int:
    """Optionally run the development checks, then the extraction."""
    root_dir = Path(__file__).parent
    if "--dev" in sys.argv[1:]:
        sys.argv.remove("--dev")
        print("--- Running Development Checks ---")
        run_command([sys.executable, str(root_dir / "dev.py"), "--ci"], cwd=root_dir)
        print("\n✅ Development checks passed. Proceeding with extraction.\n")
    return extract_main()


if __name__ == "__main__":
    raise SystemExit(main())
