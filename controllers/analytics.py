# controllers/analytics.py

import asyncio

from controllers.base import CancellationToken, log
from core.errors import GatewayError
from repositories import Repositories


def revenue(payments) -> float:
    total = 0.0
    for payment in payments:
        amount = payment.get("amount")
        if isinstance(amount, (int, float)) and not isinstance(amount, bool):
            total += amount
    return total


class AnalyticsController:
    """Totals across the four core collections, fetched concurrently."""

    def __init__(self, repositories: Repositories):
        self.repositories = repositories
        self.token = CancellationToken()
        self.stats = None

    def close(self):
        self.token.cancel()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        self.close()

    async def _fetch(self, fn):
        self.token.raise_if_cancelled()
        result = await asyncio.to_thread(fn)
        self.token.raise_if_cancelled()
        return result

    async def load(self) -> dict:
        if self.stats is not None:
            return self.stats

        repos = self.repositories
        try:
            properties, units, tickets, payments = await asyncio.gather(
                self._fetch(repos.properties.list_all),
                self._fetch(repos.units.list_all),
                self._fetch(repos.tickets.list_all),
                self._fetch(repos.payments.list_all),
            )
        except GatewayError as e:
            log.error(f"Error fetching analytics: {e}")
            raise

        self.stats = {
            "totalProperties": len(properties),
            "totalUnits": len(units),
            "totalTickets": len(tickets),
            "totalPayments": len(payments),
            "totalRevenue": revenue(payments),
        }
        return self.stats
