"""
Parsers that turn raw command-line tokens into an Argument chain.

Provides an abstract interface so the CLI does not depend on one token
grammar, and the token parser the CLI uses.
"""

import logging
from abc import ABC, abstractmethod
from typing import Sequence

from .models import Argument, Output, Source

logger = logging.getLogger(__name__)


class ParseError(Exception):
    """Base exception for malformed command-line input."""

    def __init__(self, message: str, token: str | None = None, position: int | None = None):
        self.message = message
        self.token = token
        self.position = position
        super().__init__(message)


class ArgumentsParser(ABC):
    """
    Abstract interface for command-line parsers.

    Implementations must always return a chain terminated by End.
    """

    @abstractmethod
    def parse(self, tokens: Sequence[str]) -> Argument:
        """
        Parse raw tokens into an Argument chain.

        Args:
            tokens: Command-line strings in the order they were supplied

        Returns:
            Head of the parsed chain

        Raises:
            ParseError: If the tokens are malformed
        """
        pass


class TokenParser(ArgumentsParser):
    """
    Parser for the diff tool's positional grammar.

    Files and output flags may be interleaved in any order. "--" ends option
    processing and "-" alone names stdin.
    """

    FLAGS: dict[str, Output] = {
        "-u": Output.UNIFIED,
        "--unified": Output.UNIFIED,
        "-s": Output.SPLIT,
        "--split": Output.SPLIT,
    }

    def parse(self, tokens: Sequence[str]) -> Argument:
        payloads: list[Source | Output] = []
        options_done = False

        for position, token in enumerate(tokens):
            if not token:
                raise ParseError(
                    f"Empty argument at position {position}", token=token, position=position
                )

            if options_done or token == "-" or not token.startswith("-"):
                payloads.append(Source(token))
            elif token == "--":
                options_done = True
            elif token in self.FLAGS:
                payloads.append(self.FLAGS[token])
            else:
                raise ParseError(
                    f"Unknown option '{token}' at position {position}",
                    token=token,
                    position=position,
                )

        chain = Argument.from_tokens(payloads)
        logger.debug(
            "Parsed %d tokens into %d files and %d output flags",
            len(tokens),
            len(chain.files()),
            len(chain.output_flags()),
        )
        return chain
