"""Ring number conflict detection using fuzzy matching."""

from typing import List, Tuple, Optional
from uuid import UUID
import re

from fuzzywuzzy import fuzz

from apps.accounts.models import User
from apps.common.ids import as_uuid
from ..models import Bird


EXACT_MATCH_THRESHOLD = 100
SIMILARITY_THRESHOLD = 85


def normalize_ring_number(ring_number: str) -> str:
    """
    Normalize a ring number for comparison.

    Case, whitespace and separators are ignored: 'NL-2024 / 017' and
    'nl2024017' compare equal.
    """
    return re.sub(r'[\s\-_/.]+', '', ring_number.lower().strip())


def find_ring_number_conflicts(
    *,
    owner: User,
    ring_number: str,
    exclude_bird_id: Optional[UUID] = None,
    threshold: int = SIMILARITY_THRESHOLD
) -> List[Tuple[Bird, int, str]]:
    """
    Find the account's birds whose ring number equals or nearly equals the
    given one.

    Ring numbers are not unique in storage; this lets a client warn before
    saving a bird.

    Args:
        owner: Account to search
        ring_number: Ring number to check
        exclude_bird_id: Bird being edited, left out of the result
        threshold: Minimum similarity score (0-100) for a fuzzy match

    Returns:
        List of (bird, similarity_score, match_type) tuples, best first.
        match_type is 'exact' or 'similar'.
    """
    target = normalize_ring_number(ring_number or '')
    if not target:
        return []

    queryset = Bird.objects.filter(owner=owner)
    exclude_bird_id = as_uuid(exclude_bird_id)
    if exclude_bird_id:
        queryset = queryset.exclude(id=exclude_bird_id)

    matches = []
    for bird in queryset:
        candidate = normalize_ring_number(bird.ring_number)
        if candidate == target:
            matches.append((bird, EXACT_MATCH_THRESHOLD, 'exact'))
            continue

        score = fuzz.ratio(target, candidate)
        if score >= threshold:
            matches.append((bird, score, 'similar'))

    matches.sort(key=lambda x: x[1], reverse=True)
    return matches[:10]
