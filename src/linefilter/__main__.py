"""Allow ``python -m linefilter``."""

from .cli.main import cli

if __name__ == "__main__":
    cli()
