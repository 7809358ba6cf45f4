#!/usr/bin/env python3
"""
Computer Shop CLI — unified interface for the shop operations.

Usage:
  python cli.py                      # Same as `demo`
  python cli.py demo                 # Catalog, gaming order, office order
  python cli.py catalog              # List warehouse items
  python cli.py buy gaming           # Assemble one computer
  python cli.py buy office --json    # ...as JSON
  python cli.py stats                # Run the demo, print metrics JSON
"""
import argparse
import json
import sys
from dataclasses import asdict
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from computer_shop.config import CONFIG
from computer_shop.errors import ShopError
from computer_shop.facade import ComputerShopFacade
from computer_shop.logger import ShopLogger
from computer_shop.types import BuilderVariant


def run_demo(shop: ComputerShopFacade):
    shop.show_catalog()
    shop.buy_gaming_pc()
    shop.buy_office_pc()


def cmd_demo(args):
    """Run the fixed three-step demo."""
    run_demo(ComputerShopFacade())


def cmd_catalog(args):
    """List the warehouse."""
    ComputerShopFacade().show_catalog()


def cmd_buy(args):
    """Buy a single computer."""
    if args.json:
        # Keep stdout machine-readable: send the order transcript to stderr.
        pc = ComputerShopFacade(stream=sys.stderr).buy(args.variant)
        print(json.dumps(asdict(pc), indent=2))
    else:
        ComputerShopFacade().buy(args.variant)


def cmd_stats(args):
    """Run the demo and print shop metrics."""
    shop = ComputerShopFacade(stream=sys.stderr)
    run_demo(shop)
    print(json.dumps(shop.metrics.snapshot(), indent=2))


COMMANDS = {"demo": cmd_demo, "catalog": cmd_catalog, "buy": cmd_buy, "stats": cmd_stats}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=f"{CONFIG.shop_name} — builder, iterator and facade demo",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("demo", help="Show catalog, buy gaming and office PCs")
    sub.add_parser("catalog", help="List warehouse items")

    p_buy = sub.add_parser("buy", help="Assemble one computer")
    p_buy.add_argument("variant", choices=[v.value for v in BuilderVariant])
    p_buy.add_argument("--json", action="store_true", help="Output JSON")

    sub.add_parser("stats", help="Run the demo and print metrics")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    command = args.command or "demo"
    try:
        COMMANDS[command](args)
    except ShopError as e:
        ShopLogger().shop_error(command, e)
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
