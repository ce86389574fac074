# printdiff/errors.py
"""Custom exceptions for printdiff.

Budget truncation is never reported through these: it shows up as a
marker row in the output instead.
"""


class PrintDiffError(Exception):
    """Base exception for printdiff errors."""

    pass


class DiffContractError(PrintDiffError, ValueError):
    """Raised when a change stream is structurally inconsistent.

    The stream comes from an external differ; rendering it anyway would
    show lines that do not exist in the first operand.
    """

    def __init__(self, reason: str, line: int = -1):
        self.reason = reason
        self.line = line

        message = f"Inconsistent change stream: {reason}"
        if line >= 0:
            message += f" (line {line + 1})"
        super().__init__(message)


class StructureTooDeepError(PrintDiffError):
    """Raised when structural operands nest deeper than the walker allows."""

    def __init__(self, path: str, max_depth: int):
        self.path = path
        self.max_depth = max_depth
        super().__init__(
            f"Structure nested deeper than {max_depth} levels at {path or '<root>'}"
        )
