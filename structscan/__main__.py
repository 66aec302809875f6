"""Allow ``python -m structscan``."""

from .cli import main

main()
