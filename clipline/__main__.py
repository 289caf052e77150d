"""Package entry point for ``python -m clipline``."""

from clipline.cli import main

if __name__ == "__main__":
    main()
