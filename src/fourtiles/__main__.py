"""Main entry point for the Fourtiles game generator."""

from fourtiles import main

# Guarded so that spawned worker processes can re-import this module safely
if __name__ == "__main__":
    main()
