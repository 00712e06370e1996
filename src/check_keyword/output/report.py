"""
Report Generator - Renders conversion results.

This module handles:
- Plain text listings (one name per line)
- Fixed-width text reports with a summary block
- JSON reports
"""

import json
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, List

from check_keyword import __version__
from check_keyword.core.status import KeywordKind
from check_keyword.main import ConversionResult, SafeName


def format_name_line(name: SafeName) -> str:
    """Format one name as 'original -> safe (category)'."""
    return f"{name.original} -> {name.safe} ({name.status.category})"


@dataclass
class ConversionReport:
    """Report over one batch conversion."""

    result: ConversionResult
    changed_only: bool = False
    generated_at: str = field(default_factory=lambda: datetime.now().isoformat())
    tool_version: str = __version__

    @property
    def listed_names(self) -> List[SafeName]:
        if self.changed_only:
            return self.result.changed_names
        return self.result.names

    def to_lines(self) -> List[str]:
        """One 'original -> safe (category)' line per listed name."""
        return [format_name_line(name) for name in self.listed_names]

    def to_dict(self) -> dict[str, Any]:
        """Convert report to dictionary."""
        data = self.result.to_dict()
        data["names"] = [name.to_dict() for name in self.listed_names]
        return {
            "metadata": {
                "generated_at": self.generated_at,
                "tool_version": self.tool_version,
                "changed_only": self.changed_only,
            },
            **data,
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert report to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def save_json(self, path: Path) -> None:
        """Save report as JSON file."""
        path.write_text(self.to_json())

    def save_text(self, path: Path) -> None:
        """Save report as text file."""
        path.write_text(self.to_text())

    def to_text(self) -> str:
        """Convert report to readable text format."""
        counts = self.result.count_by_category()
        lines = [
            "=" * 70,
            "RUST KEYWORD REPORT",
            "=" * 70,
            "",
            f"Generated: {self.generated_at}",
            f"Tool Version: {self.tool_version}",
            f"Edition: {self.result.edition.value}",
            "",
            "-" * 70,
            "SUMMARY",
            "-" * 70,
            f"Total Names: {len(self.result.names)}",
            f"Changed: {len(self.result.changed_names)}",
        ]
        for kind in KeywordKind:
            lines.append(f"  {kind.name}: {counts[kind.value]}")
        lines.append("")

        lines.append("-" * 70)
        lines.append(f"{'ORIGINAL':<30} {'SAFE':<30} STATUS")
        lines.append("-" * 70)
        for name in self.listed_names:
            lines.append(f"{name.original:<30} {name.safe:<30} {name.status}")
        lines.append("")

        lines.append("=" * 70)
        lines.append("END OF REPORT")
        lines.append("=" * 70)

        return "\n".join(lines)
