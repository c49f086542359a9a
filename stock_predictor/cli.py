"""
CLI entry point for the stock predictor.

Usage:
    # List the built-in symbols
    python -m stock_predictor symbols

    # Generate a synthetic series and export it
    python -m stock_predictor generate --symbol AAPL --days 180 --output aapl.csv

    # Run a full analysis pass
    python -m stock_predictor analyze --symbol AAPL --days 180 --horizon 30

    # Compare linear, polynomial and moving-average fits
    python -m stock_predictor compare --symbol AAPL --seed 42
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from stock_predictor.errors import PredictionError
from stock_predictor.settings import settings
from stock_predictor.utils.logging import configure_logging

logger = logging.getLogger(__name__)


def _service(args: argparse.Namespace):
    from stock_predictor.analysis import AnalysisService
    from stock_predictor.data.synthetic import SyntheticSeriesGenerator

    return AnalysisService(generator=SyntheticSeriesGenerator(seed=args.seed))


def cmd_symbols(args: argparse.Namespace) -> None:
    """List the popular symbols."""
    from stock_predictor.config import config

    for symbol in config.popular_symbols:
        logger.info("%s", symbol)


def cmd_generate(args: argparse.Namespace) -> None:
    """Generate a synthetic series, optionally writing it to CSV."""
    from stock_predictor.data.synthetic import SyntheticSeriesGenerator, series_to_frame

    series = SyntheticSeriesGenerator(seed=args.seed).generate_series(
        args.symbol, days=args.days
    )
    frame = series_to_frame(series)

    if args.output:
        frame.to_csv(args.output, index=False)
        logger.info(
            "Wrote %d rows for %s to %s", len(frame), args.symbol, args.output
        )
        return

    for obs in series:
        logger.info(
            "%s | %s | Price=%.2f | Volume=%d",
            args.symbol, obs.date, obs.price, obs.volume,
        )


def cmd_analyze(args: argparse.Namespace) -> None:
    """Run one analysis pass and log the prediction summary."""
    service = _service(args)
    series = service.load_series(args.symbol, days=args.days)
    bundle = service.analyze(args.symbol, series, horizon=args.horizon)

    logger.info(
        "%s | Model=%s | Trend=%s | Risk=%s",
        bundle.symbol, bundle.model_name, bundle.trend.value, bundle.risk_level.value,
    )
    logger.info(
        "Current=%.2f | %d-Day Target=%.2f | Change=%+.2f (%+.1f%%)",
        bundle.current_price,
        len(bundle.predictions),
        bundle.target_price,
        bundle.expected_change,
        bundle.expected_change_pct,
    )
    logger.info("Metrics: %s", bundle.metrics)

    for p in bundle.predictions:
        logger.info(
            "%s | %s | Price=%.3f | CI=[%.3f, %.3f]",
            bundle.symbol,
            p.date,
            p.predicted_price,
            p.confidence_interval.lower,
            p.confidence_interval.upper,
        )


def cmd_compare(args: argparse.Namespace) -> None:
    """Score every model on the same series and name the best one."""
    from stock_predictor.analysis import best_model

    service = _service(args)
    series = service.load_series(args.symbol, days=args.days)
    comparisons = service.compare_models(series)

    for row in comparisons:
        logger.info("%-22s %s", row.name, row.metrics)

    best = best_model(comparisons)
    logger.info(
        "Best performing model: %s (R²=%.1f%%)",
        best.name, best.metrics.r_squared * 100,
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    configure_logging(settings.log_level)

    parser = argparse.ArgumentParser(
        description=f"{settings.project_name} CLI v{settings.version}"
    )
    parser.add_argument(
        "--version", action="version",
        version=f"%(prog)s {settings.version}",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # Symbols
    symbols_parser = subparsers.add_parser("symbols", help="List popular symbols")
    symbols_parser.set_defaults(func=cmd_symbols)

    # Shared series options
    series_opts = argparse.ArgumentParser(add_help=False)
    series_opts.add_argument("--symbol", required=True, help="Ticker symbol")
    series_opts.add_argument(
        "--days", type=int, default=settings.history_days,
        help=f"Days of history to generate (default {settings.history_days})",
    )
    series_opts.add_argument(
        "--seed", type=int, default=settings.random_seed,
        help="Random seed for reproducible series",
    )

    # Generate
    gen_parser = subparsers.add_parser(
        "generate", parents=[series_opts], help="Generate a synthetic series"
    )
    gen_parser.add_argument(
        "--output", default=None, help="Write the series to this CSV file"
    )
    gen_parser.set_defaults(func=cmd_generate)

    # Analyze
    analyze_parser = subparsers.add_parser(
        "analyze", parents=[series_opts], help="Fit models and predict"
    )
    analyze_parser.add_argument(
        "--horizon", type=int, default=settings.horizon_days,
        help=f"Days to predict (default {settings.horizon_days})",
    )
    analyze_parser.set_defaults(func=cmd_analyze)

    # Compare
    compare_parser = subparsers.add_parser(
        "compare", parents=[series_opts], help="Compare model fits"
    )
    compare_parser.set_defaults(func=cmd_compare)

    args = parser.parse_args(argv)
    try:
        args.func(args)
    except PredictionError as exc:
        logger.error("%s", exc.message)
        sys.exit(1)


if __name__ == "__main__":
    main()
