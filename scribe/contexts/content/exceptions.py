"""Custom exceptions for the content context."""

from pathlib import Path
from typing import Optional


class FrontMatterError(ValueError):
    """
    Exception raised when a content file's front matter cannot be parsed.

    Attributes:
        message: Error description
        source_path: File the front matter was read from, when known
        snippet: The front matter block that failed to parse
    """

    def __init__(
        self,
        message: str,
        source_path: Optional[Path] = None,
        snippet: Optional[str] = None,
    ):
        self.message = message
        self.source_path = source_path
        self.snippet = snippet

        parts = [message]

        if source_path:
            parts.append(f"File: {source_path}")

        if snippet:
            # Truncate snippet if too long
            snippet = snippet[:200] + "..." if len(snippet) > 200 else snippet
            parts.append(f"\nFront matter:\n{snippet}")

        super().__init__("\n".join(parts))
