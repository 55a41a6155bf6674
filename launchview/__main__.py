"""Module entrypoint for ``python -m launchview``.

This keeps module-mode execution behavior identical to the console script.
All argument parsing and command dispatch happen in ``launchview.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
