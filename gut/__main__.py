"""Module entrypoint for ``python -m gut``.

All argument parsing and listing happen in ``gut.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
