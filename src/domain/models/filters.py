"""Filter values shared by the financial reads."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class FinancialFilters:
    """Optional restrictions applied to every financial read.

    A field that is None or an empty string imposes no restriction.

    Attributes:
        company_id: Restrict to one company.
        user_id: Restrict to one user (ledger owner, seller or invoice
            creator depending on the source).
        start_date: Inclusive lower bound.
        end_date: Inclusive upper bound.
    """

    company_id: str | None = None
    user_id: str | None = None
    start_date: date | None = None
    end_date: date | None = None

    def normalized(self) -> "FinancialFilters":
        """Return a copy where blank identifiers are replaced by None."""
        return FinancialFilters(
            company_id=_blank_to_none(self.company_id),
            user_id=_blank_to_none(self.user_id),
            start_date=self.start_date,
            end_date=self.end_date,
        )


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    cleaned = str(value).strip()
    return cleaned or None


__all__ = ["FinancialFilters"]
