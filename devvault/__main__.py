"""Allow ``python -m devvault``."""

from devvault.cli.main import main

if __name__ == "__main__":
    main()
