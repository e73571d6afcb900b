"""Bar chart, report assembly, and rich/JSON previews."""

from __future__ import annotations

import json
import math
from dataclasses import asdict

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from .errors import EmptyReportError
from .models import BUCKETS, BucketCounts, Report, ReportLine

BAR_WIDTH = 21
FILLED = "█"
EMPTY = "░"

EARLY_RISER_TITLE = "I'm an early \U0001f424"
NIGHT_OWL_TITLE = "I'm a night \U0001f989"

_LABELS = {
    "dawn": "\U0001f319 dawn",
    "daybreak": "\U0001f31e daybreak",
    "morning": "\U0001f307 morning",
    "daytime": "\U0001f3d9 daytime",
    "evening": "\U0001f303 evening",
    "night": "\U0001f30c night",
}


def make_bar(percentage: float, width: int = BAR_WIDTH) -> str:
    """Fixed-width bar; filled cells are rounded half-up."""
    filled = math.floor(percentage / 100 * width + 0.5)
    filled = max(0, min(width, filled))
    return FILLED * filled + EMPTY * (width - filled)


def select_title(counts: BucketCounts) -> str:
    early = counts.daybreak + counts.morning + counts.daytime
    late = counts.evening + counts.night + counts.dawn
    return EARLY_RISER_TITLE if early > late else NIGHT_OWL_TITLE


def build_report(counts: BucketCounts, width: int = BAR_WIDTH) -> Report:
    """Assemble the report for *counts*.

    Raises EmptyReportError when there are no commits between 08:00 and
    midnight; in that case nothing should be published.
    """
    if not counts.active_total:
        raise EmptyReportError("No commits in active hours")

    total = counts.total
    lines = []
    for bucket in BUCKETS:
        commits = getattr(counts, bucket)
        percent = commits / total * 100
        lines.append(ReportLine(
            label=_LABELS[bucket],
            commits=commits,
            bar=make_bar(percent, width),
            percent=percent,
        ))
    return Report(title=select_title(counts), counts=counts, lines=lines)


def _write_to_file(content: str, output_file: str) -> None:
    """Write content to a file and print confirmation."""
    with open(output_file, "w", encoding="utf-8") as f:
        f.write(content)
    Console().print(f"Saved to {output_file}")


def render_preview(report: Report, output_file: str | None = None) -> None:
    """Print the report the way it will look in the gist."""
    if output_file:
        _write_to_file(f"{report.title}\n{report.content}\n", output_file)
        return

    console = Console()
    console.print(Panel(
        Text(report.content, no_wrap=True),
        title=report.title,
        style="bold cyan",
        expand=False,
    ))
    console.print(f"Total commits: {report.counts.total:,}", style="dim")


def render_json(report: Report, output_file: str | None = None) -> None:
    payload = {
        "title": report.title,
        "counts": report.counts.as_dict(),
        "lines": [asdict(line) for line in report.lines],
        "content": report.content,
    }
    content = json.dumps(payload, indent=2, ensure_ascii=False)
    if output_file:
        _write_to_file(content, output_file)
    else:
        print(content)
