"""
doubt argument model.

Parsed command-line representation for the doubt diff tool. Designed to be
reusable by the CLI and by any diff engine that consumes a DiffRequest.
"""

# Core models
from .models import Argument, End, File, Output, OutputFlag, Source

# Parsing and request building
from .parser import ArgumentsParser, ParseError, TokenParser
from .request import (
    ConflictPolicy,
    DiffRequest,
    InvalidRequestError,
    OutputConflictError,
    select_output,
)

__all__ = [
    # Models
    "Argument",
    "File",
    "OutputFlag",
    "End",
    "Output",
    "Source",
    # Parsing
    "ArgumentsParser",
    "TokenParser",
    "ParseError",
    # Requests
    "ConflictPolicy",
    "DiffRequest",
    "InvalidRequestError",
    "OutputConflictError",
    "select_output",
]
