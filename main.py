import sys

from morseconverter.core.bootstrap import run


if __name__ == '__main__':
    sys.exit(run())
