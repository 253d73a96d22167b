"""
Core data models for the doubt diff tool.

An invocation is parsed into an Argument chain: an immutable, ordered list of
file and output-flag tokens that always ends in an End marker. The chain is
consumed by the request builder and never mutated.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator


class Output(str, Enum):
    """Diff rendering style selected on the command line."""

    UNIFIED = "unified"
    SPLIT = "split"


@dataclass(frozen=True)
class Source:
    """
    Reference to one input of the diff.

    Frozen to ensure immutability once created. The path "-" means stdin.
    """

    path: str

    def __post_init__(self):
        """Validate path."""
        if not self.path or not isinstance(self.path, str):
            raise ValueError(f"Source path must be a non-empty string: {self.path!r}")

    @property
    def is_stdin(self) -> bool:
        """Check if this source reads from standard input."""
        return self.path == "-"

    def __str__(self) -> str:
        return self.path


class Argument:
    """
    Base class for nodes of an Argument chain.

    Concrete nodes are File, OutputFlag and End. Every chain built through
    these classes is finite and terminated by exactly one End.
    """

    __slots__ = ()

    def __new__(cls, *args, **kwargs):
        if cls is Argument:
            raise TypeError("Argument is abstract; build chains from File, OutputFlag and End")
        return super().__new__(cls)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Argument):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        if isinstance(self, End):
            return "End()"
        return f"{type(self).__name__}(tokens={self.tokens()!r})"

    def _key(self) -> tuple:
        # Flat (node type, payload) pairs, End included; compared without recursing
        return tuple((type(node), _payload(node)) for node in self.nodes())

    @property
    def rest(self) -> "Argument | None":
        """Remainder of the chain after this node, None past the End marker."""
        return None

    def nodes(self) -> Iterator["Argument"]:
        """Iterate over every node from this one to End, inclusive."""
        node: Argument | None = self
        while node is not None:
            yield node
            node = node.rest

    def files(self) -> list[Source]:
        """
        Get every file source in the chain, head to tail.

        Output flags are skipped. Returns a new list on each call.
        """
        return [node.source for node in self.nodes() if isinstance(node, File)]

    def output_flags(self) -> list[Output]:
        """Get every output mode in the chain, head to tail."""
        return [node.mode for node in self.nodes() if isinstance(node, OutputFlag)]

    def tokens(self) -> list["Source | Output"]:
        """Get the payload of every node except End, in order."""
        payloads: list[Source | Output] = []
        for node in self.nodes():
            if isinstance(node, File):
                payloads.append(node.source)
            elif isinstance(node, OutputFlag):
                payloads.append(node.mode)
        return payloads

    def to_dict(self) -> dict:
        """
        Convert chain to dictionary for serialization.

        Used for JSON output.
        """
        return {
            "files": [source.path for source in self.files()],
            "output_flags": [mode.value for mode in self.output_flags()],
        }

    @classmethod
    def from_tokens(cls, tokens: Iterable["Source | Output | str"]) -> "Argument":
        """
        Build a chain from payloads, always terminated by End.

        Args:
            tokens: Sources, output modes, or plain path strings in command-line order

        Returns:
            Head of the chain (End when tokens is empty)

        Raises:
            TypeError: If a token is not a Source, Output or str
            ValueError: If a path string is empty
        """
        chain: Argument = End()
        for token in reversed(list(tokens)):
            # Output is a str subclass, check it first
            if isinstance(token, Output):
                chain = OutputFlag(token, chain)
            elif isinstance(token, Source):
                chain = File(token, chain)
            elif isinstance(token, str):
                chain = File(Source(token), chain)
            else:
                raise TypeError(f"Cannot build an argument from {type(token).__name__}: {token!r}")
        return chain


def _payload(node: Argument) -> "Source | Output | None":
    if isinstance(node, File):
        return node.source
    if isinstance(node, OutputFlag):
        return node.mode
    return None


def _check_tail(tail: object) -> None:
    """Only File, OutputFlag or End may follow a node."""
    if type(tail) not in (File, OutputFlag, End):
        raise TypeError(
            f"Chain tail must be a File, OutputFlag or End, got {type(tail).__name__}"
        )


@dataclass(frozen=True, eq=False, repr=False)
class File(Argument):
    """One input source followed by the rest of the chain."""

    source: Source
    tail: Argument

    def __post_init__(self):
        if not isinstance(self.source, Source):
            raise TypeError(f"File source must be a Source, got {type(self.source).__name__}")
        _check_tail(self.tail)

    @property
    def rest(self) -> Argument:
        return self.tail


@dataclass(frozen=True, eq=False, repr=False)
class OutputFlag(Argument):
    """One output-mode flag followed by the rest of the chain."""

    mode: Output
    tail: Argument

    def __post_init__(self):
        if not isinstance(self.mode, Output):
            raise TypeError(f"OutputFlag mode must be an Output, got {type(self.mode).__name__}")
        _check_tail(self.tail)

    @property
    def rest(self) -> Argument:
        return self.tail


@dataclass(frozen=True, eq=False, repr=False)
class End(Argument):
    """Terminal marker of a chain. Carries no payload."""
