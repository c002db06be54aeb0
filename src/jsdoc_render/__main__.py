import sys

from .cli import main

# No error handling here. cli.main() is the only error boundary, so
# `python -m jsdoc_render` and the installed script behave the same.
if __name__ == "__main__":
    sys.exit(main())
