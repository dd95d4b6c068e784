"""Allow ``python -m ach_transactions``."""

from .cli import main

main()
