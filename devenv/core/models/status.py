"""
Tool status model — what detection found on disk for one tool.
"""

from __future__ import annotations

from pydantic import BaseModel


class ToolStatus(BaseModel):
    """Installation state of a tool on this machine."""

    binary_installed: bool = False
    config_applied: bool = False
    version: str = ""
    path: str = ""
