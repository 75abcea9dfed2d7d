"""Glossary subpackage – static IT terms and the daily selection."""

from __future__ import annotations

from dayboard.backend.core.glossary.daily import DailyTerms
from dayboard.backend.core.glossary.terms import TERMS, find_term, search_terms

__all__ = ["TERMS", "DailyTerms", "find_term", "search_terms"]
