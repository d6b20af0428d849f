import sys

from qoicodec.converter import main

if __name__ == "__main__":
    sys.exit(main())
