import logging
from collections.abc import Hashable, Sequence
from decimal import Decimal
from typing import List

import pandas as pd

from suite_money.domain.monetary.money import Money, MoneyWithoutCurrency
from suite_money.utils.numeric_tools import Operand

logger = logging.getLogger(__name__)

MoneyLike = Money | MoneyWithoutCurrency


class AllocationReport:
    """
    Usage:
        shares = invoice.allocate(ratios)
        AllocationReport(invoice, ratios, shares).print_report()

        or

        df = AllocationReport(invoice, ratios, shares, labels=["alice", "bob"]).to_frame()

    Parameters:
        original: Money | MoneyWithoutCurrency
            the amount that was split
        ratios: Sequence[int | Decimal]
            the ratios passed to `allocate` (use `[1] * n` for `allocate_to(n)`)
        shares: Sequence[Money | MoneyWithoutCurrency]
            the result of the allocation
        labels: Sequence[Hashable] | None
            optional names of the recipients, used as DataFrame index
        custom_logger: logging.Logger
            custom logger for printing the report
    """

    def __init__(
        self,
        original: MoneyLike,
        ratios: Sequence[Operand],
        shares: Sequence[MoneyLike],
        labels: Sequence[Hashable] | None = None,
        custom_logger: logging.Logger = None,
    ):
        self.custom_logger = custom_logger
        if not isinstance(original, (Money, MoneyWithoutCurrency)):
            raise ValueError(f"original must be Money or MoneyWithoutCurrency, but is {type(original)}")
        if len(shares) != len(ratios):
            raise ValueError(f"shares and ratios must have the same length, but are {len(shares)} and {len(ratios)}")
        for share in shares:
            if type(share) is not type(original):
                raise ValueError(f"every share must be {type(original).__name__}, but got {type(share)}")
            if isinstance(original, Money) and not original.is_same_currency(share):
                raise ValueError(f"every share must be in {original.currency}, but got {share.currency}")
        if labels is not None and len(labels) != len(shares):
            raise ValueError(f"labels must have the same length as shares, but are {len(labels)} and {len(shares)}")

        self.original = original
        self.ratios = list(ratios)
        self.shares = list(shares)
        self.labels = list(labels) if labels is not None else list(range(len(shares)))

    def total(self) -> MoneyLike:
        result = Money.zero(self.original.currency) if isinstance(self.original, Money) else MoneyWithoutCurrency.zero()
        for share in self.shares:
            result = result.add(share)
        return result

    def to_frame(self) -> pd.DataFrame:
        df = pd.DataFrame(
            {
                "ratio": [Decimal(r) for r in self.ratios],
                "share": [str(s.amount) for s in self.shares],
                "units": [s.amount.units for s in self.shares],
            },
            index=pd.Index(self.labels, name="recipient"),
        )
        return df

    def create_report(self) -> List[str]:
        self.log().debug("start calculating allocation report")
        total = self.total()
        df = self.to_frame()
        report = [f"Original: {self.original}     Shares : {len(self.shares)}"]
        for label, row in df.iterrows():
            report.append(f"{label!s:<10}: {row['share']:>14}   ratio {row['ratio']}")
        report.append(f"Total   : {total}     Balanced: {'yes' if total.equals(self.original) else 'NO'}")
        spread = (df["units"].max() - df["units"].min()) if len(df) > 0 else 0
        report.append(f"Spread  : {spread} unit(s)")
        self.log().debug("end calculating allocation report")
        return report

    def print_report(self):
        r = self.create_report()
        self.log().debug("+-------------- Allocation start -----------")
        for l in r:
            self.log().debug(f"| {l}")
        self.log().debug("+-------------- Allocation end -------------")

    def log(self) -> logging.Logger:
        if self.custom_logger is not None:
            return self.custom_logger
        else:
            return logger
