"""Entry point for ``python -m logreader``."""

from logreader.cli.app import app

if __name__ == "__main__":
    app()
