"""Allow running the CLI with ``python -m ipnetwork``."""

from ipnetwork.cli import main

if __name__ == "__main__":
    main()
