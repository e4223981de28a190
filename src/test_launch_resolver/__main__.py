"""Module entry point for `python -m test_launch_resolver`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
