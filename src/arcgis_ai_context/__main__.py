"""Allow ``python -m arcgis_ai_context``."""

from arcgis_ai_context.cli.main import main

raise SystemExit(main())
