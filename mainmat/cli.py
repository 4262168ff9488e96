# cli.py

"""
Entry point: ``mainmat`` console script and ``python -m mainmat``.

Reads commands from stdin until ``stop`` (exit status 0) or the end of the input
(exit status 1).
"""

import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from mainmat.config import ReplSettings, parse_args
from mainmat.line_reader import PromptLineReader, StreamLineReader
from mainmat.logging_config import configure_logging
from mainmat.repl import MatrixRepl

logger = logging.getLogger(__name__)


def build_reader(settings: ReplSettings):
    interactive = settings.interactive
    if interactive is None:
        interactive = sys.stdin.isatty()
    if interactive:
        logger.debug("Using the terminal reader")
        return PromptLineReader(prompt=settings.prompt)
    return StreamLineReader(sys.stdin)


def main(argv: Optional[List[str]] = None) -> int:
    try:
        settings = parse_args(argv)
    except ValidationError as e:
        for error in e.errors():
            print(f"mainmat: {error['msg']}", file=sys.stderr)
        return 2

    configure_logging(settings.log_level)
    logger.info(f"Starting with {settings!r}")

    repl = MatrixRepl(build_reader(settings), echo_input=settings.echo_input)
    return repl.run()


if __name__ == '__main__':
    sys.exit(main())
