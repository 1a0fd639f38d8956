import argparse
import json
import sys

from backend.auth import create_access_token
from backend.settings import get_settings
from domain.exceptions import ValidationError
from domain.services.one_rep_max import (
    OneRepMaxFormula,
    compare_formulas,
    estimate_one_rep_max,
    percentage_for_reps,
    recommended_weight,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="One-rep-max calculator and API helpers")
    subparsers = parser.add_subparsers(dest="command", required=True)

    estimate = subparsers.add_parser("estimate", help="Estimate a 1RM from a set")
    estimate.add_argument("weight", type=float, help="Weight lifted")
    estimate.add_argument("reps", type=int, help="Repetitions performed")
    estimate.add_argument(
        "-f",
        "--formula",
        choices=[f.value for f in OneRepMaxFormula],
        default=OneRepMaxFormula.AVERAGE.value,
        help="Estimation formula (default: average)",
    )

    compare = subparsers.add_parser("compare", help="Estimate a set with every formula")
    compare.add_argument("weight", type=float, help="Weight lifted")
    compare.add_argument("reps", type=int, help="Repetitions performed")

    recommend = subparsers.add_parser("recommend", help="Working weight for a rep target")
    recommend.add_argument("one_rep_max", type=float, help="Known or estimated 1RM")
    recommend.add_argument("reps", type=int, help="Target repetitions")

    token = subparsers.add_parser("token", help="Issue a bearer token for a profile")
    token.add_argument("profile_id", help="Profile ID to put in the 'sub' claim")

    return parser


def run(args: argparse.Namespace) -> dict:
    if args.command == "estimate":
        value = estimate_one_rep_max(args.weight, args.reps, args.formula)
        return {
            "weight": args.weight,
            "reps": args.reps,
            "formula": args.formula,
            "estimated_1rm": round(value, 2),
        }

    if args.command == "compare":
        return {
            "weight": args.weight,
            "reps": args.reps,
            "estimates": [
                {
                    "formula": e.formula.value,
                    "estimate": round(e.estimate, 2),
                    "confidence": e.confidence,
                }
                for e in compare_formulas(args.weight, args.reps)
            ],
        }

    if args.command == "recommend":
        return {
            "one_rep_max": args.one_rep_max,
            "target_reps": args.reps,
            "percentage": percentage_for_reps(args.reps),
            "weight": round(recommended_weight(args.reps, args.one_rep_max), 2),
        }

    return {"token": create_access_token(args.profile_id, get_settings())}


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        result = run(args)
    except ValidationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        for error in e.errors:
            print(f"  - {error}", file=sys.stderr)
        sys.exit(1)

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
