"""Allow ``python -m postindex``."""

from postindex.cli.main import app

if __name__ == "__main__":
    app()
