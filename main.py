import sys

from triorigin_cli.cli import main


if __name__ == "__main__":
    sys.exit(main())
