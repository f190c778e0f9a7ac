"""Usage: python -m dewpoint [OPTIONS] TEMPERATURE HUMIDITY"""

from dewpoint.cli.core import run

if __name__ == "__main__":
    run()
