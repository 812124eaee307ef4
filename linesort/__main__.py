"""
usage:  python3 -m linesort [-h] ... [FILE ...]
"""

from linesort.sort import console_main


if __name__ == "__main__":
    console_main()
