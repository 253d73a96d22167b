"""
Output-mode selection and the request handed to a diff engine.

A chain may carry any number of output flags; the conflict policy decides
which one wins when they disagree.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from .models import Argument, Output, Source
from .parser import ParseError

logger = logging.getLogger(__name__)


class ConflictPolicy(str, Enum):
    """How to resolve output flags that name different modes."""

    REJECT = "reject"
    FIRST = "first"
    LAST = "last"


class OutputConflictError(ParseError):
    """Raised when output flags disagree and the policy is REJECT."""

    def __init__(self, modes: list[Output]):
        self.modes = modes
        names = ", ".join(f"--{mode.value}" for mode in modes)
        super().__init__(f"Conflicting output modes: {names}")


class InvalidRequestError(ParseError):
    """Raised when a chain cannot be turned into a diff request."""

    pass


def select_output(
    chain: Argument,
    policy: ConflictPolicy = ConflictPolicy.REJECT,
    default: Output = Output.UNIFIED,
) -> Output:
    """
    Choose the output mode for a chain.

    Args:
        chain: Parsed arguments
        policy: Resolution rule when flags name different modes
        default: Mode used when the chain has no output flags

    Returns:
        The selected output mode

    Raises:
        OutputConflictError: If flags disagree and policy is REJECT
    """
    flags = chain.output_flags()
    if not flags:
        return default

    distinct = list(dict.fromkeys(flags))
    if len(distinct) == 1:
        return distinct[0]

    if policy is ConflictPolicy.REJECT:
        raise OutputConflictError(distinct)

    chosen = flags[0] if policy is ConflictPolicy.FIRST else flags[-1]
    logger.warning(
        "Output flags disagree (%s); using %s per '%s' policy",
        ", ".join(mode.value for mode in flags),
        chosen.value,
        policy.value,
    )
    return chosen


@dataclass(frozen=True)
class DiffRequest:
    """
    Everything a diff engine needs to run one comparison.

    Built from a parsed chain; the chain itself can be discarded afterwards.
    """

    left: Source
    right: Source
    output: Output

    @property
    def sources(self) -> list[Source]:
        """Both inputs, left first."""
        return [self.left, self.right]

    @classmethod
    def from_chain(
        cls,
        chain: Argument,
        policy: ConflictPolicy = ConflictPolicy.REJECT,
        default: Output = Output.UNIFIED,
    ) -> "DiffRequest":
        """
        Build a request from a parsed chain.

        Raises:
            InvalidRequestError: If the chain does not name exactly two files
            OutputConflictError: If output flags disagree and policy is REJECT
        """
        files = chain.files()
        if len(files) != 2:
            raise InvalidRequestError(f"Expected exactly two files to compare, got {len(files)}")

        output = select_output(chain, policy=policy, default=default)
        logger.debug("Diff request: %s vs %s (%s)", files[0], files[1], output.value)
        return cls(left=files[0], right=files[1], output=output)

    def to_dict(self) -> dict:
        """Convert request to dictionary for serialization."""
        return {
            "left": self.left.path,
            "right": self.right.path,
            "output": self.output.value,
        }
