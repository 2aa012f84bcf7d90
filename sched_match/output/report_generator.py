# Path: sched_match/output/report_generator.py
"""
Report Generator

Turns a batch of MatchResults into a JSON report and a console summary.

Report layout:
    {
        "generated_at": "...",
        "summary": {"total": N, "by_status": {"assigned": n, ...}},
        "results": [MatchResult.to_dict(), ...]
    }

Usage:
    from sched_match.output import ReportGenerator

    generator = ReportGenerator(config)
    report = generator.generate(results)
    path = generator.write(report)
    print(generator.to_console(report))
"""

import json
from collections import Counter
from datetime import datetime
from pathlib import Path
from typing import Optional, Sequence

from sched_match.config_loader import ConfigLoader
from sched_match.constants import (
    DEFAULT_REPORT_FILE,
    MENU_HEADER,
    MENU_SEPARATOR,
)
from sched_match.core.logger import get_output_logger
from sched_match.process.matcher.models import MatchResult, MatchStatus


# Console column widths
PROGRAM_WIDTH = 32
STATUS_WIDTH = 10
MEETING_WIDTH = 14


class ReportGenerator:
    """
    Generates match reports from MatchResults.

    Example:
        generator = ReportGenerator()
        report = generator.generate(service.match_all(queries))
        generator.write(report, Path('out/report.json'))
    """

    def __init__(self, config: Optional[ConfigLoader] = None):
        """
        Initialize report generator.

        Args:
            config: ConfigLoader instance (creates one if not provided)
        """
        self.config = config or ConfigLoader()
        self.logger = get_output_logger('report_generator')

    def generate(self, results: Sequence[MatchResult]) -> dict:
        """
        Build the report structure.

        Args:
            results: Match results, in query order

        Returns:
            JSON-serializable report dictionary
        """
        counts = Counter(r.status.value for r in results)

        report = {
            'generated_at': datetime.now().isoformat(timespec='seconds'),
            'summary': {
                'total': len(results),
                'by_status': {status.value: counts.get(status.value, 0) for status in MatchStatus},
            },
            'results': [r.to_dict() for r in results],
        }

        self.logger.info(f"Generated report for {len(results)} queries")
        return report

    def to_json(self, report: dict) -> str:
        """Render report as a JSON string."""
        return json.dumps(
            report,
            indent=self.config.get('json_indent', 2),
            ensure_ascii=False,
        )

    def write(self, report: dict, output_path: Optional[Path] = None) -> Path:
        """
        Write report to a JSON file.

        Args:
            report: Report from generate()
            output_path: Target file (default: output_dir / match_report.json,
                         or the current directory when output_dir is unset)

        Returns:
            Path of the written file
        """
        if output_path is None:
            output_dir = self.config.get('output_dir', Path.cwd())
            output_path = Path(output_dir) / DEFAULT_REPORT_FILE

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(self.to_json(report))

        self.logger.info(f"Wrote report: {output_path}")
        return output_path

    def to_console(self, report: dict) -> str:
        """
        Render report as console-friendly text.

        Args:
            report: Report from generate()

        Returns:
            ASCII table followed by a status summary
        """
        lines = [
            MENU_HEADER,
            f"  {'Program':<{PROGRAM_WIDTH}} {'Status':<{STATUS_WIDTH}} "
            f"{'Meeting':<{MEETING_WIDTH}} Reason",
            f"  {MENU_SEPARATOR}",
        ]

        for entry in report['results']:
            program = entry['query']['program'][:PROGRAM_WIDTH]
            meeting = entry['meeting_id'] or '-'
            lines.append(
                f"  {program:<{PROGRAM_WIDTH}} {entry['status']:<{STATUS_WIDTH}} "
                f"{meeting:<{MEETING_WIDTH}} {entry['reason']}"
            )

        summary = report['summary']
        counts = ', '.join(
            f"{status}: {count}" for status, count in summary['by_status'].items() if count
        )
        lines.append(f"  {MENU_SEPARATOR}")
        lines.append(f"  Total: {summary['total']}" + (f" ({counts})" if counts else ''))
        lines.append(MENU_HEADER)

        return '\n'.join(lines)


__all__ = ['ReportGenerator']
