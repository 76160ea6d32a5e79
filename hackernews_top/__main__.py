import sys

from hackernews_top.cli import main

if __name__ == "__main__":
    sys.exit(main())
