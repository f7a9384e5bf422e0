"""Module entrypoint for ``python -m homeyscript_kit``."""

from homeyscript_kit.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
