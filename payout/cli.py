"""Command-line payout comparison.

Usage:
    # Text report
    payout 4000

    # JSON payload, same shape as the /calculate endpoint
    payout 4000 --json
"""

import argparse
import logging
import sys

import structlog

from payout.fees.calculator import calculate_all_platforms
from payout.fees.result import CalculationResult
from payout.formatting import format_fee, format_price
from payout.models.calculation import CalculationResponse
from payout.price import validate_price_range
from payout.ranking import get_platform_display_name, rank_by_net_amount

logger = structlog.get_logger()


def configure_logging(verbose: bool = False) -> None:
    """Configure structlog for console output."""
    log_level = logging.DEBUG if verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def render_report(result: CalculationResult) -> str:
    """Render a plain-text comparison of every platform's payout."""
    note, tips, brain, coconala = result.note, result.tips, result.brain, result.coconala

    lines = [
        f"{format_price(result.price)}で販売した際の手取り額",
        "=" * 40,
    ]
    for rank, entry in enumerate(rank_by_net_amount(result), start=1):
        lines.append(f"{rank}. {entry.display_name}: {format_price(entry.net_amount)}")

    lines += [
        "",
        f"{get_platform_display_name('note')}: "
        f"{format_price(note.min_amount)}～{format_price(note.max_amount)}",
        f"  プラットフォーム利用料: {format_fee(note.platform_fee)}",
    ]
    for method in note.payment_methods:
        lines.append(
            f"  {method.label} {format_fee(method.service_fee)}: "
            f"{format_price(method.final_net_amount)}"
        )

    lines += [
        "",
        f"{get_platform_display_name('tips')}: {format_price(tips.net_amount)}",
        f"  コンテンツ販売料: {format_fee(tips.content_fee)}",
        f"  通常会員: {format_price(tips.net_amount_normal)}",
        f"  プラス会員: {format_price(tips.net_amount_plus)}",
        "",
        f"{get_platform_display_name('brain')}: {format_price(brain.net_amount)}",
        f"  コンテンツ販売料: {format_fee(brain.content_fee)}",
        f"  出金手数料: {format_fee(brain.withdrawal_fee)}",
        "",
        f"{get_platform_display_name('coconala')}: {format_price(coconala.net_amount)}",
        f"  コンテンツ販売料: {format_fee(coconala.sales_fee)}",
        f"  振込手数料: {format_fee(coconala.actual_transfer_fee)}",
    ]
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``payout`` command."""
    parser = argparse.ArgumentParser(
        description="Compare creator payouts on note, tips, Brain and Coconala",
    )
    parser.add_argument("price", help="Sale price in yen")
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the JSON payload instead of a text report",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    validation = validate_price_range(args.price)
    if not validation.is_valid:
        logger.warning("price_rejected", price=args.price, reason=validation.message)
        print(f"Error: {validation.message}", file=sys.stderr)
        return 1

    result = calculate_all_platforms(args.price)
    if result is None:
        logger.error("calculation_unavailable", price=args.price)
        print("Error: calculation failed", file=sys.stderr)
        return 1

    if args.json:
        print(CalculationResponse.from_result(result).model_dump_json(by_alias=True, indent=2))
    else:
        print(render_report(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
