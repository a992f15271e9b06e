"""Entry point for ``python -m hostenv_mcp``."""

from .server import main

if __name__ == "__main__":
    main()
