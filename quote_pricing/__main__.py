"""Allow running as: python -m quote_pricing"""

import sys

from quote_pricing.main import run, serve

if __name__ == "__main__":
    if "--serve" in sys.argv:
        serve()
    elif len(sys.argv) > 1:
        run(sys.argv[1])
    else:
        print("usage: python -m quote_pricing <quote.json> | --serve")
        sys.exit(2)
