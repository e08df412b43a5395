"""Allow ``python -m fsf``."""

from fsf.cli import main

raise SystemExit(main())
