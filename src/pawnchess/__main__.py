"""Allow ``python -m pawnchess``."""

from pawnchess.app import main

if __name__ == "__main__":
    main()
