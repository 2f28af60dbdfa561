"""Entry point for 'python -m ceramic_catalog' command."""

from ceramic_catalog.cli import main

if __name__ == "__main__":
    main()
