"""Allow running as: python -m hvac_quote"""

from hvac_quote.main import run, serve
import sys

if __name__ == "__main__":
    if "--serve" in sys.argv:
        serve()
    else:
        run()
