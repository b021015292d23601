"""Allow ``python -m vite3``."""

from vite3.cli import main

main()
