import sys

from hfspaths.app import main


if __name__ == '__main__':
    sys.exit(main(sys.argv))
