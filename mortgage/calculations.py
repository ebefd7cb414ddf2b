from __future__ import annotations

from dataclasses import dataclass

import pandas as pd


@dataclass(frozen=True)
class PaymentSplit:
    payment: float
    interest: float
    principal: float


def monthly_pi_payment(principal: float, annual_rate_pct: float, term_years: int) -> float:
    """
    Standard fixed-rate amortization payment:
      M = P * [ r(1+r)^n / ((1+r)^n - 1) ]
    where r = annual_rate/12, n = years*12.

    A zero rate falls back to straight-line repayment P / n.
    """
    if principal <= 0:
        return 0.0
    n = term_years * 12
    r = (annual_rate_pct / 100.0) / 12.0
    if r == 0:
        return principal / n
    num = r * (1 + r) ** n
    den = (1 + r) ** n - 1
    return principal * (num / den)


def first_month_split(principal: float, annual_rate_pct: float, term_years: int) -> PaymentSplit:
    """
    Interest/principal split of the first payment.

    The projection applies this split to every year, so the principal share
    stays at its first-month level instead of growing as the balance falls.
    """
    payment = monthly_pi_payment(principal, annual_rate_pct, term_years)
    interest = principal * (annual_rate_pct / 100.0) / 12.0
    return PaymentSplit(payment=payment, interest=interest, principal=payment - interest)


def amortization_schedule(
    principal: float,
    annual_rate_pct: float,
    term_years: int,
    payment: float,
    years: int | None = None,
) -> pd.DataFrame:
    """
    Yearly totals of a compounding schedule: the interest share of each
    payment is recomputed from the balance left after the previous month.

    ``years`` cuts the schedule off after the intended length of stay. Rows
    stop early once the loan is repaid.
    """
    horizon = term_years if years is None else min(term_years, years)
    monthly_rate = (annual_rate_pct / 100.0) / 12.0

    rows = []
    balance = principal
    for year in range(1, horizon + 1):
        if balance <= 0:
            break
        interest_paid = 0.0
        principal_repaid = 0.0
        for _ in range(12):
            interest = balance * monthly_rate
            repaid = min(payment - interest, balance)
            balance -= repaid
            interest_paid += interest
            principal_repaid += repaid
            if balance <= 0:
                break
        rows.append({
            "Year": year,
            "Interest": interest_paid,
            "Principal": principal_repaid,
            "Ending Balance": max(balance, 0.0),
        })

    return pd.DataFrame(rows, columns=["Year", "Interest", "Principal", "Ending Balance"])
