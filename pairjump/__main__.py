"""Module entrypoint for ``python -m pairjump``.

All argument parsing happens in ``pairjump.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
