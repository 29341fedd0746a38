"""Allow running the server with ``python -m hubitat_mcp``."""

from .cli import main

if __name__ == "__main__":
    raise SystemExit(main())
