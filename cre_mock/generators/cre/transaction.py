"""Transaction generator for commercial real estate."""

from __future__ import annotations

import random
from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Sequence

from cre_mock.generators.base import BaseGenerator
from cre_mock.generators.pool import FakerPool
from cre_mock.models.cre import Financing, HistoricalPricing, Transaction, TransactionType


class TransactionGenerator(BaseGenerator):
    """Generate synthetic CRE transactions.

    The generator only decides the transaction's own attributes; the
    caller picks which property, parties, brokers and documents it links
    to, so referential validity stays with whoever owns the store.
    """

    TRANSACTION_TYPES = list(TransactionType)

    START_DATE = date(1980, 1, 1)
    END_DATE = date(2025, 12, 31)
    EARLIEST_CREATED_AT = datetime(1970, 1, 1)

    MIN_PRICE = 50_000
    MAX_PRICE = 100_000_000
    CURRENCY = "USD"

    FINANCING_PROBABILITY = 0.7
    INTEREST_RATE_PROBABILITY = 0.9
    LOAN_TYPES = ["CMBS", "Portfolio", "Bridge", "Construction"]

    HISTORY_SOURCES = ["Previous Sale", "Appraisal", "Tax Assessment"]
    MAX_HISTORY = 3
    HISTORY_PRICE_FLOOR = 10_000

    MORTGAGEE_CONDITIONS = [
        "Sold As-Is via foreclosure auction.",
        "Sold As-Is by court-appointed receiver.",
        "Sold As-Is via trustee sale, no warranties.",
    ]

    def __init__(self, seed: int | None = None, pool: FakerPool | None = None) -> None:
        super().__init__(seed, pool=pool)

    def generate(
        self,
        property_id: str,
        buyer_id: str,
        seller_id: str,
        broker_ids: Sequence[str],
        document_ids: Sequence[str] = (),
        now: datetime | None = None,
    ) -> Transaction:
        """Generate a single transaction linking the given entities.

        Parameters
        ----------
        property_id : str
            Property the transaction is about.
        buyer_id, seller_id : str
            Party ids; must differ.
        broker_ids : Sequence[str]
            Brokers involved (1-3).
        document_ids : Sequence[str]
            Documents attached to the transaction.
        now : datetime | None
            Upper bound for ``updated_at`` (defaults to the current time).

        Returns
        -------
        Transaction
            Generated transaction.
        """
        now = now or datetime.now()
        transaction_date = self._random_date(self.START_DATE, self.END_DATE)
        transaction_type = random.choice(self.TRANSACTION_TYPES)
        price = Decimal(random.randint(self.MIN_PRICE, self.MAX_PRICE))

        lease_terms = None
        if transaction_type.is_lease:
            lease_terms = (
                f"Term: {random.randint(1, 10)} years, "
                f"Rate: ${random.uniform(10, 100):.2f}/sqft/yr"
            )

        mortgagee_conditions = None
        if transaction_type == TransactionType.MORTGAGEE_SALE:
            mortgagee_conditions = random.choice(self.MORTGAGEE_CONDITIONS)

        start_of_day = datetime.combine(transaction_date, time.min)
        # Typically before the transaction date; not enforced downstream
        created_at = self._random_datetime(self.EARLIEST_CREATED_AT, start_of_day)
        updated_at = self._random_datetime(start_of_day, max(now, start_of_day))

        return Transaction(
            transaction_id=self.pool.uuid(),
            transaction_date=transaction_date,
            transaction_type=transaction_type,
            price=price,
            currency=self.CURRENCY,
            property_id=property_id,
            buyer_id=buyer_id,
            seller_id=seller_id,
            broker_ids=tuple(broker_ids),
            created_at=created_at,
            updated_at=updated_at,
            lease_terms=lease_terms,
            mortgagee_conditions=mortgagee_conditions,
            financing=self.generate_financing(price),
            document_ids=tuple(document_ids),
            historical_pricing=self.generate_historical_pricing(transaction_date, price),
        )

    def generate_financing(self, price: Decimal) -> Financing | None:
        """Generate financing for roughly 70% of transactions."""
        if random.random() >= self.FINANCING_PROBABILITY:
            return None

        loan_amount = Decimal(random.randint(int(price * Decimal("0.3")), int(price * Decimal("0.9"))))
        interest_rate = None
        if random.random() < self.INTEREST_RATE_PROBABILITY:
            interest_rate = Decimal(str(round(random.uniform(3.5, 8.5), 2)))

        return Financing(
            loan_amount=loan_amount,
            lender=self.pool.lender(),
            loan_type=random.choice(self.LOAN_TYPES),
            interest_rate=interest_rate,
            loan_to_value_ratio=Financing.ltv(loan_amount, price),
        )

    def generate_historical_pricing(
        self, transaction_date: date, price: Decimal
    ) -> tuple[HistoricalPricing, ...]:
        """Generate up to three earlier price points, oldest first.

        Each point lies a whole number of years before the transaction
        (never before 1980) and walks the price back by a random factor.
        """
        max_years_ago = max(1, transaction_date.year - self.START_DATE.year)
        if transaction_date.year == self.START_DATE.year:
            return ()

        history: list[HistoricalPricing] = []
        last_price = int(price)
        for _ in range(random.randint(0, self.MAX_HISTORY)):
            years_ago = random.randint(1, max_years_ago)
            fluctuation = round(random.uniform(0.7, 1.3), 2)
            last_price = max(self.HISTORY_PRICE_FLOOR, int(last_price / fluctuation))
            history.append(
                HistoricalPricing(
                    date=_years_before(transaction_date, years_ago),
                    price=Decimal(last_price),
                    source=random.choice(self.HISTORY_SOURCES),
                )
            )

        return tuple(sorted(history, key=lambda entry: entry.date))

    @staticmethod
    def _random_date(start: date, end: date) -> date:
        """Uniform random date in [start, end]."""
        return start + timedelta(days=random.randint(0, (end - start).days))

    @staticmethod
    def _random_datetime(start: datetime, end: datetime) -> datetime:
        """Uniform random datetime in [start, end], whole seconds."""
        span = int((end - start).total_seconds())
        return start + timedelta(seconds=random.randint(0, max(span, 0)))


def _years_before(day: date, years: int) -> date:
    """Same calendar day ``years`` earlier (Feb 29 falls back to Feb 28)."""
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        return day.replace(year=day.year - years, day=28)
