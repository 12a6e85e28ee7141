"""Tests for settlement composition and general edits."""

from __future__ import annotations

from datetime import date

import pytest

from rescisao.core.config import AppSettings, FundConfig
from rescisao.core.exceptions import InvalidDateRange, InvalidInput
from rescisao.engine.composer import compose_settlement, edit_settlement, validate_contract
from rescisao.engine.notice import notice_terms, years_of_service
from rescisao.models.contract import NoticeModality
from rescisao.models.settlement import PAYABLE_FIELDS
from tests.fakes import make_contract


@pytest.fixture
def settings():
    return AppSettings()


class TestValidation:
    def test_termination_before_hire_is_rejected(self, settings):
        with pytest.raises(InvalidDateRange) as excinfo:
            compose_settlement(
                make_contract(hire_date="2025-03-15", termination_date="2025-03-14"), settings
            )
        assert excinfo.value.hire_date == date(2025, 3, 15)
        assert excinfo.value.termination_date == date(2025, 3, 14)

    def test_malformed_date_in_mapping(self, settings):
        with pytest.raises(InvalidInput):
            compose_settlement({
                "base_salary": 3000, "hire_date": "not-a-date",
                "termination_date": "2025-03-15",
            }, settings)

    def test_non_numeric_salary_in_mapping(self, settings):
        with pytest.raises(InvalidInput):
            compose_settlement({
                "base_salary": "three thousand", "hire_date": "2023-01-01",
                "termination_date": "2025-03-15",
            }, settings)

    def test_infinite_salary_in_mapping(self):
        with pytest.raises(InvalidInput):
            validate_contract({
                "base_salary": "inf", "hire_date": "2023-01-01",
                "termination_date": "2025-03-15",
            })
        with pytest.raises(InvalidInput):
            validate_contract({
                "base_salary": 3000, "allowance": float("nan"), "hire_date": "2023-01-01",
                "termination_date": "2025-03-15",
            })

    def test_negative_allowance_in_mapping(self):
        with pytest.raises(InvalidInput):
            validate_contract({
                "base_salary": 3000, "allowance": -1, "hire_date": "2023-01-01",
                "termination_date": "2025-03-15",
            })

    def test_same_day_hire_and_termination_is_valid(self, settings):
        result = compose_settlement(
            make_contract(hire_date="2025-03-15", termination_date="2025-03-15"), settings
        )
        assert result.thirteenth_twelfths == 0
        assert result.vacation_twelfths == 0
        assert result.notice_days == 30


class TestNotice:
    def test_years_of_service_uses_julian_year(self):
        assert years_of_service(date(2023, 1, 1), date(2025, 3, 15)) == 2
        assert years_of_service(date(2023, 1, 1), date(2024, 12, 31)) == 1

    def test_worked_notice_pays_only_excess(self):
        terms = notice_terms(make_contract())
        assert terms.days == 36
        assert terms.paid_days == 6
        assert terms.projected_date == date(2025, 3, 21)

    def test_indemnified_notice_pays_everything(self):
        terms = notice_terms(make_contract(notice=NoticeModality.INDEMNIFIED))
        assert terms.paid_days == 36
        assert terms.projected_date == date(2025, 4, 20)

    def test_notice_is_capped_at_ninety_days(self):
        terms = notice_terms(make_contract(hire_date="1990-01-01"))
        assert terms.days == 90
        assert terms.paid_days == 60


class TestWorkedNoticeScenario:
    @pytest.fixture
    def result(self, settings):
        return compose_settlement(make_contract(), settings)

    def test_salary_balance(self, result):
        assert result.days_worked_in_month == 15
        assert result.salary_balance == pytest.approx(1500.00)

    def test_notice(self, result):
        assert result.notice_days == 36
        assert result.notice_pay == pytest.approx(600.00)
        assert result.projected_termination_date == date(2025, 3, 21)

    def test_thirteenth(self, result):
        assert result.thirteenth_twelfths == 3
        assert result.thirteenth_salary == pytest.approx(750.00)
        assert result.thirteenth_indemnified == 0

    def test_vacation(self, result):
        assert result.vacation_twelfths == 3
        assert result.proportional_vacation == pytest.approx(750.00)
        assert result.proportional_vacation_bonus == pytest.approx(250.00)
        assert result.overdue_vacation == 0
        assert result.indemnified_vacation == 0

    def test_withholding(self, result):
        assert result.withholding_base == pytest.approx(2250.00)
        assert result.withholding == pytest.approx(179.73)

    def test_net_settlement(self, result):
        assert result.total_earnings == pytest.approx(3850.00)
        assert result.net_settlement == pytest.approx(3670.27)

    def test_fund_estimate(self, result):
        # 26 months x 240 accumulated + 8% of (1500 + 750 + 600)
        assert result.fund.balance == pytest.approx(6468.00)
        assert result.fund.penalty == pytest.approx(2587.20)
        assert result.fund.total == pytest.approx(9055.20)
        assert result.combined_payout == pytest.approx(3670.27 + 9055.20)


class TestIndemnifiedNoticeScenario:
    @pytest.fixture
    def result(self, settings):
        return compose_settlement(
            make_contract(notice=NoticeModality.INDEMNIFIED, overdue_vacation_periods=1), settings
        )

    def test_notice_pay_covers_all_days(self, result):
        assert result.notice_pay == pytest.approx(3600.00)
        assert result.projected_termination_date == date(2025, 4, 20)

    def test_projection_adds_thirteenth_twelfth(self, result):
        assert result.thirteenth_twelfths == 3
        assert result.thirteenth_indemnified_twelfths == 1
        assert result.thirteenth_indemnified == pytest.approx(250.00)

    def test_projection_adds_vacation_twelfth(self, result):
        assert result.vacation_indemnified_twelfths == 1
        assert result.indemnified_vacation == pytest.approx(250.00)
        assert result.indemnified_vacation_bonus == pytest.approx(250.00 / 3)

    def test_overdue_vacation(self, result):
        assert result.overdue_vacation == pytest.approx(3000.00)
        assert result.overdue_vacation_bonus == pytest.approx(1000.00)

    def test_withholding_base_excludes_notice_and_vacation(self, result):
        assert result.withholding_base == pytest.approx(2250.00)

    def test_fund_contribution_includes_indemnified_thirteenth(self, result):
        assert result.fund_contribution_base == pytest.approx(1500 + 750 + 3600 + 250)


class TestComposerProperties:
    def test_allowance_joins_salary_total(self, settings):
        result = compose_settlement(make_contract(base_salary=2500, allowance=500), settings)
        assert result.salary_balance == pytest.approx(1500.00)

    def test_day_31_is_capped_at_thirty(self, settings):
        result = compose_settlement(make_contract(termination_date="2025-01-31"), settings)
        assert result.days_worked_in_month == 31
        assert result.salary_balance == pytest.approx(3000.00)

    def test_net_equals_payables_minus_withholding(self, settings):
        result = compose_settlement(
            make_contract(notice=NoticeModality.INDEMNIFIED, overdue_vacation_periods=2, allowance=300),
            settings,
        )
        payables = sum(getattr(result, name) for name in PAYABLE_FIELDS)
        assert result.net_settlement == pytest.approx(payables - result.withholding)

    def test_recomputation_is_identical(self, settings):
        first = compose_settlement(make_contract(), settings)
        second = compose_settlement(make_contract(), settings)
        assert first == second
        assert first.model_dump() == second.model_dump()

    def test_decades_of_tenure_stay_within_bounds(self, settings):
        result = compose_settlement(
            make_contract(hire_date="1985-01-01", termination_date="2025-12-20",
                          notice=NoticeModality.INDEMNIFIED),
            settings,
        )
        assert 0 <= result.thirteenth_twelfths <= 12
        assert 0 <= result.vacation_twelfths <= 12
        assert result.thirteenth_twelfths + result.thirteenth_indemnified_twelfths <= 12

    def test_fund_rates_come_from_settings(self):
        settings = AppSettings(fund=FundConfig(contribution_rate=0.02, penalty_rate=0.2))
        result = compose_settlement(make_contract(), settings)
        assert result.fund.penalty == pytest.approx(result.fund.balance * 0.2)

    def test_serialization_includes_totals(self, settings):
        dumped = compose_settlement(make_contract(), settings).model_dump()
        assert "net_settlement" in dumped
        assert "total" in dumped["fund"]


class TestEditSettlement:
    @pytest.fixture
    def result(self, settings):
        return compose_settlement(make_contract(), settings)

    def test_edit_recomputes_net(self, result, settings):
        edited = edit_settlement(result, {"notice_pay": 900, "withholding": "200.50"}, settings)
        assert edited.notice_pay == 900
        assert edited.net_settlement == pytest.approx(result.total_earnings + 300 - 200.50)
        assert result.notice_pay == pytest.approx(600.00)

    def test_fund_balance_edit_resets_penalty(self, result, settings):
        edited = edit_settlement(result, {"fund_balance": 1000}, settings)
        assert edited.fund.penalty == pytest.approx(400.00)
        assert edited.fund.total == pytest.approx(1400.00)

    def test_explicit_penalty_is_kept(self, result, settings):
        edited = edit_settlement(result, {"fund_balance": 1000, "fund_penalty": 123}, settings)
        assert edited.fund.penalty == 123
        assert edited.fund.total == pytest.approx(1123.00)

    def test_rejects_unknown_fields(self, result, settings):
        with pytest.raises(InvalidInput):
            edit_settlement(result, {"net_settlement": 1}, settings)

    def test_rejects_non_numeric_values(self, result, settings):
        with pytest.raises(InvalidInput):
            edit_settlement(result, {"salary_balance": "abc"}, settings)

    @pytest.mark.parametrize("raw", ["nan", "inf", float("-inf")])
    def test_rejects_non_finite_values(self, result, settings, raw):
        with pytest.raises(InvalidInput):
            edit_settlement(result, {"withholding": raw}, settings)
