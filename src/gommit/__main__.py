"""Allow running Gommit as ``python -m gommit``."""
from gommit.cli import main

if __name__ == "__main__":
    main()
