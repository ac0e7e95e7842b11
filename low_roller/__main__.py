"""Entry point for ``python -m low_roller``."""

from low_roller.console.app import main

raise SystemExit(main())
