"""Records for engineering-economics cash flows and alternatives."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class CashFlowSeries:
    cash_flows: list[float] = field(default_factory=list)

    @property
    def number_of_cash_flows(self) -> int:
        return len(self.cash_flows)


@dataclass
class SinglePaymentFutureAmount:
    """A single payment compounded at ``interest_rate`` for ``payment_period`` periods."""

    principal: float
    interest_rate: float
    payment_period: float

    def __post_init__(self) -> None:
        if self.interest_rate <= -1:
            raise ValueError("interest_rate must be greater than -1.")
        if self.payment_period < 0:
            raise ValueError("payment_period must not be negative.")

    def future_amount(self) -> float:
        """P * (1 + i) ** n."""
        return self.principal * (1 + self.interest_rate) ** self.payment_period


@dataclass
class UniformAnnualPayments:
    principal: float = 0.0
    cash_flows: list[float] = field(default_factory=list)
    interest_rate: float = 0.0
    payment_period: float = 0.0
    future_amount: float = 0.0

    def __post_init__(self) -> None:
        if self.payment_period < 0:
            raise ValueError("payment_period must not be negative.")

    @property
    def number_of_cash_flows(self) -> int:
        return len(self.cash_flows)


@dataclass
class ArithmeticSeries:
    arithmetic_factor: float = 0.0
    cash_flows: list[float] = field(default_factory=list)

    @property
    def number_of_cash_flows(self) -> int:
        return len(self.cash_flows)


@dataclass
class GeometricSeries:
    geometric_factor: float = 0.0
    cash_flows: list[float] = field(default_factory=list)

    @property
    def number_of_cash_flows(self) -> int:
        return len(self.cash_flows)


@dataclass
class RateOfReturn:
    rate_of_return_1: float = 0.0
    rate_of_return_2: float = 0.0
    present_worth_1: float = 0.0
    present_worth_2: float = 0.0


@dataclass
class Alternative:
    """An economic alternative: one row of costs per type of cost."""

    costs_matrix: list[list[float]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.costs_matrix and any(
            len(row) != len(self.costs_matrix[0]) for row in self.costs_matrix
        ):
            raise ValueError("Every type of cost must have the same number of costs.")

    @property
    def number_of_types_of_costs(self) -> int:
        return len(self.costs_matrix)

    @property
    def number_of_costs(self) -> int:
        return len(self.costs_matrix[0]) if self.costs_matrix else 0