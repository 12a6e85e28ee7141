"""Compute a termination settlement and print it as JSON.

Usage:
    python scripts/calculate_settlement.py --hire 2023-01-01 --termination 2025-03-15 \
        --salary 3000 --notice worked
"""

from __future__ import annotations

import argparse
import sys

from rescisao.core.config import AppSettings
from rescisao.core.exceptions import InvalidDateRange, InvalidInput
from rescisao.core.log import configure_logging
from rescisao.engine import create_workbench
from rescisao.models.contract import NoticeModality


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Brazilian termination settlement calculator")
    parser.add_argument("--hire", required=True, help="Hire date (YYYY-MM-DD)")
    parser.add_argument("--termination", required=True, help="Termination date (YYYY-MM-DD)")
    parser.add_argument("--salary", required=True, help="Monthly base salary")
    parser.add_argument("--allowance", default="0", help="Health/hazard allowance")
    parser.add_argument(
        "--notice", default=NoticeModality.WORKED.value,
        choices=[m.value for m in NoticeModality], help="Notice modality",
    )
    parser.add_argument("--overdue-vacations", default="0", help="Full overdue vacation periods")
    fund = parser.add_mutually_exclusive_group()
    fund.add_argument("--fund-balance", type=float, default=None, help="Fund statement balance")
    fund.add_argument(
        "--fill-minimum-wage", action="store_true",
        help="Estimate the fund from the minimum wage of every month worked",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = AppSettings()
    configure_logging(settings)
    workbench = create_workbench(settings)

    try:
        workbench.calculate({
            "hire_date": args.hire,
            "termination_date": args.termination,
            "base_salary": args.salary,
            "allowance": args.allowance,
            "notice": args.notice,
            "overdue_vacation_periods": args.overdue_vacations,
        })
        if args.fund_balance is not None:
            workbench.override_fund(workbench.manual_fund_balance(args.fund_balance))
        elif args.fill_minimum_wage:
            workbench.override_fund(workbench.minimum_wage_history())
    except (InvalidInput, InvalidDateRange) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print(workbench.settlement.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
