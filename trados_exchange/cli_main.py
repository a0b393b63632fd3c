"""Console entry point kept for ``python -m trados_exchange.cli_main``."""

from .cli import app

__all__ = ["app"]

if __name__ == "__main__":  # pragma: no cover
    app()
