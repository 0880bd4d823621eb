"""Display formatting shared by the calculation breakdowns"""

import math


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_number(value: float) -> str:
    """Rounded, comma-grouped integer: 1234567.6 -> '1,234,568'"""
    return f"{round_half_up(value):,}"


def format_currency(value: float) -> str:
    return f"{format_number(value)} đồng"


def format_decimal(value: float) -> str:
    """Shortest round-tripping rendering of a factor or rate: 1.0 -> '1', 1.16 -> '1.16'"""
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def format_period(from_month: int, from_year: int, to_month: int, to_year: int) -> str:
    return f"T{from_month}/{from_year} - T{to_month}/{to_year}"


def format_months_vn(months: int) -> str:
    """12 -> '1 năm', 15 -> '1 năm 3 tháng', 0 -> '0 tháng'"""
    years, remaining = divmod(months, 12)
    parts = []
    if years > 0:
        parts.append(f"{years} năm")
    if remaining > 0:
        parts.append(f"{remaining} tháng")
    return " ".join(parts) if parts else "0 tháng"


def format_years_vn(years: float) -> str:
    """Benefit years with a decimal comma: 0.5 -> '0,5 năm', 2.0 -> '2 năm'"""
    if years % 1 == 0.5:
        return f"{int(math.floor(years))},5 năm"
    return f"{format_decimal(years)} năm"
