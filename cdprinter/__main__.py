"""Allow running as ``python -m cdprinter``."""

from cdprinter.cli import main

main()
