import sys

from q3serverlist.cli import main


if __name__ == "__main__":
    sys.exit(main())
