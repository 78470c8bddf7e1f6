"""
Allows running the CLI via `python -m formhelpers`.
"""

from .cli import main


if __name__ == "__main__":  # pragma: no cover
    main()
