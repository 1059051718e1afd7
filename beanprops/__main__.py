"""Module entry point for running beanprops as a package.

Allows: python -m beanprops <command>
"""

from beanprops.cli import main
import sys

if __name__ == '__main__':
    sys.exit(main())
