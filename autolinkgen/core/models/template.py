"""
Generated file model — returned by every generator.
"""

from __future__ import annotations

from pydantic import BaseModel


class GeneratedFile(BaseModel):
    """A file produced by the generate phase.

    Attributes:
        path:      Path relative to the output directory.
        content:   Full file content.
        overwrite: Whether to overwrite if it already exists.
        reason:    Why this file was generated.
    """

    path: str
    content: str
    overwrite: bool = True
    reason: str = ""
