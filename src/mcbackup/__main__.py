"""Allow ``python -m mcbackup``."""

from mcbackup.cli.main import main

raise SystemExit(main())
