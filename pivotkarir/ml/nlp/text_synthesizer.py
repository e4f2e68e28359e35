"""
Profile to text rendering for the embedding model.

Renders a ProfileRecord as a sequence of short sentences in a fixed field
order, so the same profile always produces the same model input.
"""

from typing import Callable, Optional

from pivotkarir.data.models import ProfileRecord


def _join(values: list[str]) -> str:
    return ", ".join(values)


# (accessor, template) in output order
_CLAUSES: tuple[tuple[Callable[[ProfileRecord], Optional[object]], str], ...] = (
    (lambda p: p.name, "{}"),
    (lambda p: p.display_title, "{}"),
    (lambda p: p.target_position, "Looking for {}"),
    (lambda p: p.target_industry, "Interested in {}"),
    (lambda p: p.industry, "Works in {}"),
    (lambda p: p.company, "At {}"),
    (lambda p: p.bio, "{}"),
    (lambda p: p.skills, "Skills: {}"),
    (lambda p: p.specialization, "Specializes in: {}"),
)


def create_profile_text(profile: ProfileRecord) -> str:
    """
    Render a profile as descriptive text.

    Each present field becomes a clause terminated by ". ". Absent or
    empty fields are skipped, so a profile with no recognized fields
    renders as the empty string.

    Args:
        profile: Parsed profile record.

    Returns:
        Text used as embedding model input.
    """
    parts = []
    for accessor, template in _CLAUSES:
        value = accessor(profile)
        if not value:
            continue
        if isinstance(value, list):
            value = _join(value)
        parts.append(template.format(value) + ". ")
    return "".join(parts)
