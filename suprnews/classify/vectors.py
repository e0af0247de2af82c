"""Keyword weight tables for the topic categorizer.

Each category maps lowercase keywords to a relevance weight in ``[0, 1]``.
The tables are wrapped in :class:`types.MappingProxyType` at import time and
are safe to read from any number of threads.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

OTHER = "other"

# Tie-break order: an equal top score goes to the earliest category here.
CATEGORY_PRIORITY = (
    "technology",
    "politics",
    "sports",
    "business",
    "entertainment",
    "health",
    "science",
)

_VECTORS = {
    "technology": {
        "tech": 1.0, "technology": 1.0, "software": 0.9, "hardware": 0.9, "programming": 0.8,
        "developer": 0.8, "code": 0.7, "app": 0.5, "application": 0.6, "digital": 0.6, "ai": 0.9,
        "artificial intelligence": 1.0, "machine learning": 0.9, "data": 0.5, "computer": 0.8,
        "internet": 0.8, "cyber": 0.8, "algorithm": 0.8, "robot": 0.8, "automation": 0.8,
    },
    "politics": {
        "politic": 1.0, "government": 0.9, "election": 0.9, "vote": 0.8, "democracy": 0.9,
        "congress": 0.9, "senate": 0.9, "parliament": 0.9, "legislation": 0.9,
        "president": 0.9, "minister": 0.9, "governor": 0.8, "democrat": 0.9, "republican": 0.9,
        "policy": 0.8, "candidate": 0.8, "campaign": 0.8, "constitution": 0.9, "diplomatic": 0.9,
        "law": 0.6, "party": 0.7, "administration": 0.8, "foreign affairs": 0.9,
        "domestic policy": 0.9, "senator": 0.9, "congressman": 0.9, "ballot": 0.9,
        "lobbying": 0.9, "bipartisan": 0.9, "filibuster": 0.9, "geopolitical": 0.9,
        "diplomat": 0.9, "referendum": 0.9, "constituency": 0.9, "impeachment": 0.9,
        "veto": 0.9,
    },
    "sports": {
        "sport": 1.0, "game": 0.8, "match": 0.9, "player": 0.9, "team": 0.9, "athlete": 0.9,
        "championship": 0.9, "tournament": 0.9, "league": 0.9, "football": 1.0, "soccer": 1.0,
        "basketball": 1.0, "baseball": 1.0, "tennis": 1.0, "cricket": 1.0, "hockey": 1.0,
        "olympic": 1.0, "coach": 0.9, "score": 0.9, "win": 0.7, "loss": 0.7, "ipl": 1.0,
        "goal": 0.8, "stadium": 0.9, "referee": 0.9, "umpire": 0.9, "nba": 1.0,
        "nfl": 1.0, "mlb": 1.0, "fifa": 1.0, "nhl": 1.0, "pga": 1.0, "ufc": 1.0,
        "medal": 0.8, "competition": 0.7, "trophy": 0.9, "shot": 0.6,
        "fan": 0.7, "spectator": 0.8, "goalkeeper": 1.0, "runner": 0.9, "batter": 1.0,
        "wicket": 1.0, "bowl": 0.7, "draft": 0.7, "rookie": 0.9, "playoff": 1.0,
        "penalty": 0.7, "offside": 1.0, "batting": 1.0, "bowling": 0.9, "fielding": 0.9,
        "defense": 0.6, "offense": 0.6, "quarter": 0.6, "inning": 1.0, "pitch": 0.7,
        "grand slam": 1.0, "formula one": 1.0, "f1": 1.0, "boxing": 1.0, "racing": 0.8,
        "marathon": 0.9, "touchdown": 1.0, "home run": 1.0, "slam dunk": 1.0,
        "free throw": 1.0, "hat trick": 1.0, "athletics": 0.9, "gymnastics": 1.0,
        "swimming": 0.8,
    },
    "business": {
        "business": 1.0, "economy": 1.0, "market": 0.9, "finance": 0.9, "stock": 0.9,
        "investment": 0.9, "company": 0.8, "industry": 0.9, "trade": 0.9, "commercial": 0.9,
        "corporate": 0.9, "entrepreneur": 0.9, "startup": 0.9, "profit": 0.9, "revenue": 0.9,
        "economic": 0.9, "financial": 0.9, "banking": 0.9, "investor": 0.9, "ceo": 0.8,
    },
    "entertainment": {
        "entertain": 1.0, "movie": 1.0, "film": 1.0, "music": 1.0, "concert": 0.9,
        "celebrity": 0.9, "actor": 0.9, "actress": 0.9, "director": 0.8, "tv": 0.9,
        "television": 0.9, "show": 0.6, "drama": 0.9, "comedy": 0.9, "hollywood": 1.0,
        "bollywood": 1.0, "star": 0.8, "singer": 0.9, "album": 0.9, "release": 0.7,
    },
    "health": {
        "health": 1.0, "medical": 1.0, "medicine": 1.0, "doctor": 0.9, "hospital": 0.9,
        "disease": 0.9, "treatment": 0.9, "cure": 0.9, "patient": 0.9, "therapy": 0.9,
        "diet": 0.9, "fitness": 0.9, "wellness": 0.9, "virus": 0.9, "pandemic": 0.9,
        "vaccine": 0.9, "symptom": 0.9, "diagnosis": 0.9, "surgery": 0.9, "prescription": 0.9,
    },
    "science": {
        "science": 1.0, "research": 0.9, "study": 0.8, "discover": 0.9, "experiment": 0.9,
        "scientist": 1.0, "laboratory": 0.9, "physics": 1.0, "chemistry": 1.0, "biology": 1.0,
        "astronomy": 1.0, "space": 0.9, "theory": 0.8, "hypothesis": 0.9, "scientific": 1.0,
        "molecule": 0.9, "atom": 0.9, "quantum": 1.0, "genetic": 0.9, "evolution": 0.9,
    },
}

CATEGORY_VECTORS: Mapping[str, Mapping[str, float]] = MappingProxyType(
    {category: MappingProxyType(dict(weights)) for category, weights in _VECTORS.items()}
)

CATEGORIES = CATEGORY_PRIORITY + (OTHER,)

del _VECTORS
