"""
vatview CLI entrypoint.

Executed via:
  python -m vatview

Assumes dependencies are installed in an isolated environment.
"""

from vatview.cli.app import app

if __name__ == "__main__":
    app()
