import sys

from passguard.passguard_cli import main

if __name__ == "__main__":
    sys.exit(main())
