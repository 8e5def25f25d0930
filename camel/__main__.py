"""Allow ``python -m camel``."""

from .cli.main import main

main()
