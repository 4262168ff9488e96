# config.py

"""
Runtime settings and command-line parsing.
"""

import argparse
import os
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

LOG_LEVEL_ENV = "MAINMAT_LOG_LEVEL"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ReplSettings(BaseModel):
    """Settings for one interpreter session."""
    echo_input: bool = True
    interactive: Optional[bool] = Field(
        default=None,
        description="Use the terminal reader; None picks it when stdin is a TTY",
    )
    prompt: str = "> "
    log_level: str = "WARNING"

    @field_validator('prompt')
    @classmethod
    def prompt_must_not_be_empty(cls, v: str) -> str:
        if not v:
            raise ValueError('Prompt cannot be empty')
        return v

    @field_validator('log_level')
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mainmat",
        description="Interactive interpreter for 4x4 matrix commands on registers MAT_A to MAT_F.",
    )
    parser.add_argument(
        "--no-echo",
        dest="echo_input",
        action="store_false",
        help="Do not repeat each input line before processing it",
    )
    parser.add_argument(
        "--interactive",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Force (or disable) the terminal reader with history and completion",
    )
    parser.add_argument(
        "--prompt",
        default="> ",
        help="Prompt shown by the terminal reader (default: '> ')",
    )
    parser.add_argument(
        "--log-level",
        default=os.getenv(LOG_LEVEL_ENV, "WARNING"),
        help=f"Logging level (default: ${LOG_LEVEL_ENV} or WARNING)",
    )
    return parser


def parse_args(argv: Optional[List[str]] = None) -> ReplSettings:
    """Parses command-line arguments into validated settings."""
    args = build_parser().parse_args(argv)
    return ReplSettings(
        echo_input=args.echo_input,
        interactive=args.interactive,
        prompt=args.prompt,
        log_level=args.log_level,
    )
