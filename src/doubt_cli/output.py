"""
Terminal output formatter for CLI.

Handles all display logic - no business logic, just presentation.
"""

import json

from doubt.models import Argument
from doubt.request import DiffRequest


def print_request_summary(request: DiffRequest, chain: Argument) -> None:
    """
    Print a human-readable summary of a diff request to terminal.

    Args:
        request: Resolved request
        chain: Chain the request was built from, used to report the flags seen
    """
    print("=" * 60)
    print("DIFF REQUEST")
    print("=" * 60)
    print(f"Left:   {_describe(request.left.path, request.left.is_stdin)}")
    print(f"Right:  {_describe(request.right.path, request.right.is_stdin)}")
    print(f"Output: {request.output.value}")

    flags = chain.output_flags()
    if len(flags) > 1:
        print(f"\nOutput flags given: {', '.join(mode.value for mode in flags)}")


def print_request_json(request: DiffRequest, chain: Argument) -> None:
    """
    Print a diff request as a JSON document.

    Args:
        request: Resolved request
        chain: Chain the request was built from
    """
    payload = {
        "request": request.to_dict(),
        "arguments": chain.to_dict(),
    }
    print(json.dumps(payload, indent=2))


def _describe(path: str, is_stdin: bool) -> str:
    return "<stdin>" if is_stdin else path
