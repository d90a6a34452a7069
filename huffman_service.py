
# // filename: huffman_service.py

import argparse
import logging
import sys
from collections import Counter

from huffman_core import HuffmanError, HuffmanLogic

logger = logging.getLogger(__name__)

REPORT_HEADER = "SYMBOL\tWEIGHT\tHUFFMAN CODE"
DEMO_TEXT = "abcde"


def count_frequencies(data):
    # str tallies characters, bytes tallies int byte values
    return Counter(data)


class HuffmanService:
    def __init__(self):
        self.logic = HuffmanLogic()

    def codes(self, data):
        return self.codes_for_frequencies(count_frequencies(data))

    def codes_for_frequencies(self, freqs):
        # An empty tally is rejected by build_tree with EmptyInputError
        tree = self.logic.build_tree(freqs)
        return self.logic.generate_codes(tree)

    def report_rows(self, data):
        """Return ``(symbol, weight, code)`` rows sorted by symbol."""
        freqs = count_frequencies(data)
        codes = self.codes_for_frequencies(freqs)
        logger.debug("report over %d symbols, %d input elements", len(codes), len(data))
        return [(symbol, freqs[symbol], codes[symbol]) for symbol in sorted(codes)]

    def render_report(self, data):
        lines = [REPORT_HEADER]
        for symbol, weight, code in self.report_rows(data):
            lines.append(f"{symbol}\t{weight}\t{code}")
        return "\n".join(lines)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Print the Huffman code table for a piece of text")
    parser.add_argument("text", nargs="?", default=DEMO_TEXT, help=f"input text (default: {DEMO_TEXT!r})")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging level (default: WARNING)",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        report = HuffmanService().render_report(args.text)
    except HuffmanError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    print(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
