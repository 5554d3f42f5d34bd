"""Module entrypoint for ``python -m weathersearch``.

All argument parsing and runtime setup happen in ``weathersearch.cli``.
"""

from .cli import main


if __name__ == "__main__":
    raise SystemExit(main())
