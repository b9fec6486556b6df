"""Command-line entry point: ``dic <query>``."""

import logging
import sys

import httpx

from adapter.external.dictionary_api import DictionaryApiAdapter
from adapter.terminal.rich_terminal import RichTerminal
from domain.model.errors import DictionaryLookupError
from port.dictionary import DictionaryPort
from port.terminal import TerminalPort
from services.word_renderer import WordRenderer
from utils.logging import setup_structured_logging

logger = logging.getLogger(__name__)

USAGE = """dic

Usage: dic <query>"""


def main(
    argv: list[str] | None = None,
    dictionary: DictionaryPort | None = None,
    terminal: TerminalPort | None = None,
) -> int:
    """Look up the first argument and print it.

    Args:
        argv: Command-line arguments without the program name.
        dictionary: Lookup client; an API adapter over a fresh httpx
            client when omitted.
        terminal: Output target; a rich console on stdout when omitted.

    Returns:
        Process exit code.
    """
    if argv is None:
        argv = sys.argv[1:]

    # Only the first argument is used, verbatim, even if it starts with "-".
    if not argv:
        print(USAGE)
        return 0

    query = argv[0]
    terminal = terminal or RichTerminal()

    try:
        if dictionary is None:
            with httpx.Client(follow_redirects=True) as client:
                entries = DictionaryApiAdapter(client).lookup(query)
        else:
            entries = dictionary.lookup(query)
    except DictionaryLookupError as e:
        logger.debug("Lookup failed", extra={"query": query, "error_type": type(e).__name__})
        print(e.message)
        return 1

    WordRenderer(terminal).render(entries)
    return 0


def run():
    """Console script entry point."""
    setup_structured_logging()
    sys.exit(main())


if __name__ == "__main__":
    run()
