"""Spending analytics over parsed transaction candidates."""
from typing import Dict, List

import pandas as pd

from ..models.transaction import (
    UNCATEGORIZED,
    TransactionCandidate,
    TransactionDirection,
)

VALID_PERIODS = ("daily", "weekly", "monthly")
MAX_TREND_POINTS = 30


class TransactionAnalyzer:
    """
    Summaries, trends and breakdowns for a set of candidates.

    Amounts are summed per direction; breakdowns cover expenses only and
    report each label's share of total expense.
    """

    def __init__(self, candidates: List[TransactionCandidate]):
        """Initialize analyzer with candidate list."""
        self.candidates = candidates
        self.df = self._to_dataframe()

    def _to_dataframe(self) -> pd.DataFrame:
        """Convert candidates to pandas DataFrame."""
        data = []
        for txn in self.candidates:
            data.append({
                'date': txn.occurred_at,
                'amount': float(txn.amount),
                'direction': txn.direction.value,
                'category': txn.category or UNCATEGORIZED,
                'source': txn.source,
                'merchant': txn.merchant,
            })

        df = pd.DataFrame(
            data,
            columns=['date', 'amount', 'direction', 'category', 'source', 'merchant']
        )
        df['date'] = pd.to_datetime(df['date'], utc=True)
        df['amount'] = df['amount'].astype(float)
        return df.sort_values('date')

    @property
    def expenses(self) -> pd.DataFrame:
        return self.df[self.df['direction'] == TransactionDirection.EXPENSE.value]

    @property
    def income(self) -> pd.DataFrame:
        return self.df[self.df['direction'] == TransactionDirection.INCOME.value]

    def get_summary(self) -> Dict:
        """Total income, total expense, balance and count."""
        total_income = float(self.income['amount'].sum())
        total_expense = float(self.expenses['amount'].sum())
        return {
            'total_income': total_income,
            'total_expense': total_expense,
            'current_balance': total_income - total_expense,
            'transaction_count': int(len(self.df)),
        }

    def get_trends(self, period: str = "daily") -> Dict:
        """
        Income/expense per period bucket, newest first.

        Args:
            period: daily, weekly or monthly (anything else falls back to daily)

        Returns:
            Dict with the period used and up to 30 data points
        """
        if period not in VALID_PERIODS:
            period = "daily"

        if self.df.empty:
            return {'period': period, 'data': []}

        dates = self.df['date']
        if period == "daily":
            labels = dates.dt.strftime('%Y-%m-%d')
        elif period == "weekly":
            iso = dates.dt.isocalendar()
            labels = iso['year'].astype(str) + "-W" + iso['week'].astype(int).map('{:02d}'.format)
        else:
            labels = dates.dt.strftime('%Y-%m')

        frame = self.df.assign(label=labels.values)
        grouped = frame.pivot_table(
            index='label',
            columns='direction',
            values='amount',
            aggfunc='sum',
            fill_value=0.0
        )

        data = []
        for label in sorted(grouped.index, reverse=True)[:MAX_TREND_POINTS]:
            income = float(grouped.loc[label].get(TransactionDirection.INCOME.value, 0.0))
            expense = float(grouped.loc[label].get(TransactionDirection.EXPENSE.value, 0.0))
            data.append({
                'date': label,
                'income': income,
                'expense': expense,
                'net': income - expense,
            })

        return {'period': period, 'data': data}

    def _breakdown(self, column: str) -> List[Dict]:
        expenses = self.expenses
        total_expense = float(expenses['amount'].sum())
        if expenses.empty:
            return []

        grouped = expenses.groupby(column)['amount'].agg(['sum', 'count'])
        grouped = grouped.sort_values('sum', ascending=False)

        results = []
        for label, row in grouped.iterrows():
            amount = float(row['sum'])
            results.append({
                'label': label,
                'amount': amount,
                'percentage': (amount / total_expense) * 100 if total_expense > 0 else 0.0,
                'count': int(row['count']),
            })
        return results

    def get_breakdown_by_source(self) -> List[Dict]:
        """Expense totals per bank/wallet source."""
        return self._breakdown('source')

    def get_breakdown_by_category(self) -> List[Dict]:
        """Expense totals per category (missing category counts as Uncategorized)."""
        return self._breakdown('category')
