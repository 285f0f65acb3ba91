"""Allow ``python -m threshold``."""

from threshold.cli import main

if __name__ == "__main__":
    main()
