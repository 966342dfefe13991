import argparse
from pathlib import Path

from . import __version__
from .balancing import run_balancing
from .env import load_env
from .logger import get_logger
from .scenario import ScenarioError, load_scenario, read_scenario_json
from .schema import validate_scenario


def _print_errors(errors) -> None:
    print("Invalid:")
    for err in errors:
        print(f" - {err}")


def _load_or_exit(input_path: Path):
    try:
        return load_scenario(input_path)
    except ScenarioError as e:
        get_logger().error(str(e), input=str(input_path), errors=e.errors)
        if e.errors:
            _print_errors(e.errors)
            raise SystemExit(2)
        raise SystemExit(str(e))


def cmd_balance(args: argparse.Namespace) -> None:
    scenario = _load_or_exit(Path(args.input))

    winner_id, pool = run_balancing(
        scenario.customer_success,
        scenario.customers,
        scenario.customer_success_away,
    )
    print(f"Customer Success: {winner_id}")

    if args.report:
        print(f"Available: {len(pool)} of {len(scenario.customer_success)}")
        for cs in pool:
            print(f"  {cs.id} (score {cs.score}): {cs.customer_count} customers")
        get_logger().log_metrics_summary()


def cmd_validate(args: argparse.Namespace) -> None:
    input_path = Path(args.input)
    logger = get_logger()
    try:
        data = read_scenario_json(input_path)
    except ScenarioError as e:
        logger.error(str(e), input=str(input_path))
        raise SystemExit(str(e))
    errors = validate_scenario(data)
    if errors:
        logger.warning("Scenario failed validation", input=str(input_path), errors=errors)
        _print_errors(errors)
        raise SystemExit(2)
    print("Valid")


def main(argv=None):
    # Load .env if present (CSB_LOG_LEVEL, CSB_LOG_DIR, ...)
    load_env()
    parser = argparse.ArgumentParser(prog="csbalancing", description="Customer Success balancing")
    parser.add_argument("--version", action="store_true", help="Show version")

    subparsers = parser.add_subparsers(dest="command")
    bal = subparsers.add_parser("balance", help="Run a scenario JSON and print the busiest Customer Success id")
    bal.add_argument("--input", required=True, help="Path to scenario JSON")
    bal.add_argument("--report", action="store_true", help="Also print customer counts per available Customer Success")
    bal.set_defaults(func=cmd_balance)

    val = subparsers.add_parser("validate", help="Validate a scenario JSON")
    val.add_argument("--input", required=True, help="Path to scenario JSON")
    val.set_defaults(func=cmd_validate)

    args = parser.parse_args(argv)

    if args.version:
        print(__version__)
        return

    if hasattr(args, "func"):
        args.func(args)
        return

    parser.print_help()


if __name__ == "__main__":
    main()
