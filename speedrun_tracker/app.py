from __future__ import annotations

import argparse
import sys
from datetime import datetime
from pathlib import Path
from typing import Sequence

from core.analysis.analysis_worker import AnalysisWorker
from core.analysis.engine import AnalysisEngine
from core.analysis.models import Statistics
from core.config import AppConfig
from core.export.csv_export import default_export_filename, export_statistics_csv
from core.export.formatting import format_optional_duration
from core.export.report import render_detailed_report
from core.logging import setup_logging
from core.paths import ensure_runtime_directories


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="speedrun-tracker",
        description="Analyze Minecraft worlds and report played vs. reset statistics.",
    )
    parser.add_argument("--root", type=Path, help="Worlds directory (defaults to the configured root)")
    parser.add_argument("--export", action="store_true", help="Write a CSV export after the scan")
    parser.add_argument("--export-dir", type=Path, help="Directory for CSV exports")
    parser.add_argument("--debug", action="store_true", help="Log at debug level")
    return parser


def print_summary(statistics: Statistics) -> None:
    print(f"Total worlds:     {statistics.total_worlds}")
    print(f"Played:           {statistics.worlds_played}")
    print(f"Abandoned:        {statistics.worlds_abandoned}")
    print(f"Reset ratio:      {statistics.reset_ratio:.1%}")
    print(f"Today's resets:   {statistics.today_resets}")
    print(f"Week's resets:    {statistics.week_resets}")
    print(f"Fastest reset:    {format_optional_duration(statistics.fastest_reset)}")
    print(f"Longest session:  {format_optional_duration(statistics.longest_session)}")


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    ensure_runtime_directories()

    config = AppConfig()
    logger, _log_emitter = setup_logging(debug=args.debug)

    root = args.root or Path(config.get_worlds_root())
    engine = AnalysisEngine(thresholds=config.get_thresholds(), logger=logger.getChild("analysis"))
    worker = AnalysisWorker(engine, root)

    results: list[Statistics] = []
    errors: list[str] = []
    worker.finished.connect(results.append)
    worker.failed.connect(errors.append)

    logger.info("Starting world analysis...")
    worker.run()

    if errors or not results:
        message = errors[0] if errors else "Analysis produced no result"
        logger.error("Analysis failed: %s", message)
        print(f"Error: {message}", file=sys.stderr)
        return 1

    statistics = results[0]
    logger.info("Analysis complete. Found %s worlds.", statistics.total_worlds)
    logger.info("%s", render_detailed_report(statistics))
    print_summary(statistics)

    if args.export:
        export_dir = args.export_dir or Path(config.get_export_dir())
        target = export_dir / default_export_filename(datetime.now())
        try:
            export_statistics_csv(statistics, target)
        except OSError as exc:
            logger.error("Export failed: %s", exc)
            print(f"Export failed: {exc}", file=sys.stderr)
            return 1
        print(f"Data exported to {target}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
