"""
Daily Terms.

Five random glossary labels per calendar day. The selection is persisted in
local storage together with its date, so repeated requests on the same day
return the same terms and the first request of a new day draws a fresh set.
"""

from __future__ import annotations

import logging
import random
from datetime import date

from dayboard.backend.core.glossary.terms import TERMS
from dayboard.backend.core.utils.storage import LocalStorage

logger = logging.getLogger(__name__)

TERMS_KEY = "randomTerms"
DATE_KEY = "termsDate"
DAILY_COUNT = 5


class DailyTerms:
    def __init__(
        self,
        storage: LocalStorage,
        count: int = DAILY_COUNT,
        rng: random.Random | None = None,
    ) -> None:
        self.storage = storage
        self.count = count
        self.rng = rng or random.Random()

    def today(self, day: date | None = None) -> list[str]:
        day = day or date.today()
        saved = self.storage.get(TERMS_KEY)
        if self.storage.get(DATE_KEY) == day.isoformat() and saved:
            return list(saved)
        return self.reshuffle(day)

    def reshuffle(self, day: date | None = None) -> list[str]:
        day = day or date.today()
        picked = [label for _, label in self.rng.sample(TERMS, min(self.count, len(TERMS)))]
        self.storage.set(TERMS_KEY, picked)
        self.storage.set(DATE_KEY, day.isoformat())
        logger.debug("Drew %d terms for %s", len(picked), day)
        return picked
