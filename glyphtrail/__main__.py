"""Allow ``python -m glyphtrail``."""
from glyphtrail.app import main

if __name__ == "__main__":
    main()
