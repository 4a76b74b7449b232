# smithchart/cli.py
import argparse
import logging
from typing import List, Optional

from smithchart.core.exceptions import SmithChartError
from smithchart.core.options import ChartOptions
from smithchart.inout.options_yaml import load_chart_options
from smithchart.utils.logging_config import setup_logging, get_logger

logger = get_logger(__name__)

def main(argv: Optional[List[str]] = None) -> None:
    """
    Open a window showing a Smith chart.

    Command-line arguments:
      --options: Optional path to a YAML chart options file.
      --size: Chart size in pixels.
      --log-file: Optional path for a copy of the log.
      --verbose: Enable DEBUG logging.
    """
    parser = argparse.ArgumentParser(description="Display a Smith chart.")
    parser.add_argument("--options", help="Path to a YAML chart options file.", default=None)
    parser.add_argument("--size", type=int, default=800, help="Chart size in pixels.")
    parser.add_argument("--log-file", help="Also write the log to this file.", default=None)
    parser.add_argument("--verbose", action="store_true", help="Enable DEBUG logging.")
    args = parser.parse_args(argv)

    setup_logging(level=logging.DEBUG if args.verbose else logging.INFO, log_file=args.log_file)

    options = ChartOptions()
    if args.options:
        try:
            options = load_chart_options(args.options)
        except (SmithChartError, OSError) as e:
            logger.error("Could not load chart options: %s", e)
            return

    # imported late so option errors are reported without starting a GUI
    from smithchart.ui.smith import SmithViewer
    SmithViewer(options, size=args.size).run()

if __name__ == "__main__":
    main()
