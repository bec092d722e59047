"""Command-line entry point: load the dataset and print or write the ranking table."""

from dotenv import load_dotenv
load_dotenv()

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from director_benefits.config.environment import EnvironmentConfig
from director_benefits.config.exceptions import ConfigurationError
from director_benefits.config.loader import load_config
from director_benefits.config.models import AppConfig
from director_benefits.logging import get_logger
from director_benefits.logging.config import configure_logging
from director_benefits.pipeline import RankingController
from director_benefits.presentation.rendering import TableRenderer

logger = get_logger(__name__, component="cli")

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_FALLBACK = 2


def load_runtime_config(
    config_path: Optional[Path], log_level_override: Optional[str]
) -> Tuple[AppConfig, EnvironmentConfig]:
    """
    Load configuration and apply overrides.

    Priority for the log level: CLI > LOG_LEVEL > config file > INFO.
    BENEFITS_API_URL, when set, replaces the configured endpoint.

    Raises:
        ConfigurationError: If configuration is invalid
    """
    app_config, env_config = load_config(config_path)

    if env_config.api_url:
        app_config = app_config.model_copy(
            update={"api": app_config.api.model_copy(update={"url": env_config.api_url})}
        )

    if log_level_override:
        env_config.log_level = log_level_override
    elif env_config.log_level:
        pass
    elif app_config.logging and app_config.logging.level:
        env_config.log_level = app_config.logging.level
    else:
        env_config.log_level = "INFO"

    return app_config, env_config


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Rank company directors by total benefits from HMRC data"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to configuration file (default: config.yaml if present)",
    )
    parser.add_argument(
        "--dimension",
        default=None,
        help="Field shown in the dimension column (e.g. displayName, role)",
    )
    parser.add_argument(
        "--sort",
        default=None,
        help="Field to sort by (default: totalBenefits)",
    )
    parser.add_argument(
        "--format",
        choices=["text", "html"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the table to this file instead of stdout",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (overrides config and environment)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        0 when live data was shown, 2 when the example dataset was shown,
        1 on configuration or usage errors.
    """
    args = build_parser().parse_args(argv)

    try:
        app_config, env_config = load_runtime_config(args.config, args.log_level)
    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    configure_logging(
        level=env_config.log_level,
        format_type=app_config.logging.format,
        environment=env_config.environment,
    )

    controller = RankingController.from_config(app_config)
    result = controller.load_data()

    try:
        if args.dimension:
            controller.select_dimension(args.dimension)
        if args.sort:
            controller.select_sort(args.sort)
    except ValueError as e:
        logger.error(str(e), extra={"event": "cli.selection.invalid"})
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    renderer = TableRenderer()
    view = controller.build_view()
    output = renderer.render_html(view) if args.format == "html" else renderer.render_text(view)

    if args.output:
        args.output.write_text(output, encoding="utf-8")
        logger.info(
            f"Wrote {len(view.rows)} rows to {args.output}",
            extra={"event": "cli.output.written", "path": str(args.output), "format": args.format},
        )
    else:
        print(output)

    return EXIT_FALLBACK if result.used_fallback else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
