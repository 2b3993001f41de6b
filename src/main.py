"""Run script.

Why it exists:
- Runs the CLI with `python -m main` during development.
- Keeps a plain entrypoint next to the installed `drink-machines` script.
"""

from __future__ import annotations

import sys

# Rich banner uses non-ASCII glyphs; cp1252 Windows terminals reject them.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
