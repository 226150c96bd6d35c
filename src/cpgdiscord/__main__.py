"""Allow ``python -m cpgdiscord``."""

import sys

from cpgdiscord.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
