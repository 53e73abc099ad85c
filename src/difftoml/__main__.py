"""Allow ``python -m difftoml``."""

from difftoml.cli import main

raise SystemExit(main())
