"""Training-impact classification of section changes.

Every function here is a pure, deterministic keyword heuristic. Each
cascade is an ordered rule list evaluated with ``first_match``; only the
first rule that fires contributes its label.
"""

from typing import Iterable, List, Optional

from ..extractors.patterns import contains_any, first_match
from ..models.enums import ChangeType
from ..models.impact import ChangeCategorization, DocumentChange, TrainingIndicators
from .vocabulary import (
    BADGE_DOCUMENTATION_TERMS,
    BADGE_FREQUENCY_TERMS,
    BADGE_PROCEDURE_TERMS,
    BADGE_ROLE_TERMS,
    DESCRIPTOR_DOCUMENTATION_TERMS,
    DESCRIPTOR_FREQUENCY_TERMS,
    DESCRIPTOR_LIMIT_TERMS,
    DESCRIPTOR_ROLE_TERMS,
    DESCRIPTOR_SAFETY_TERMS,
    DOCUMENTATION_TERMS,
    FREQUENCY_TERMS,
    LIMIT_TERMS,
    ROLE_TERMS,
    SAFETY_TERMS,
)


FREQUENCY_CHANGE = "Frequency change"
DOCUMENTATION_REQUIREMENT = "Documentation requirement"
SAFETY_RELATED = "Safety-related"
LIMIT_SPECIFICATION_CHANGE = "Limit/specification change"
ROLE_RESPONSIBILITY_CHANGE = "Role/responsibility change"
PROCEDURAL_CHANGE = "Procedural change"
NEW_CONTENT = "New content"
CONTENT_REMOVED = "Content removed"


def _in_either(terms: List[str]):
    return lambda old, new: contains_any(old, terms) or contains_any(new, terms)


def _newly_present(terms: List[str]):
    return lambda old, new: any(term in new and term not in old for term in terms)


def _differs_and_in_either(terms: List[str]):
    return lambda old, new: old != new and (contains_any(old, terms) or contains_any(new, terms))


TRAINING_FLAG_RULES = [
    (_differs_and_in_either(FREQUENCY_TERMS), FREQUENCY_CHANGE),
    (_newly_present(DOCUMENTATION_TERMS), DOCUMENTATION_REQUIREMENT),
    (_in_either(SAFETY_TERMS), SAFETY_RELATED),
    (_in_either(LIMIT_TERMS), LIMIT_SPECIFICATION_CHANGE),
    (_differs_and_in_either(ROLE_TERMS), ROLE_RESPONSIBILITY_CHANGE),
]


def detect_training_flag(old_text: str, new_text: str) -> str:
    """
    Assign a single training flag to a modified section.

    Rules are tried in order (frequency, documentation, safety, limits,
    role) and the first that fires wins; otherwise "Procedural change".
    """
    return first_match(
        TRAINING_FLAG_RULES,
        (old_text or "").lower(),
        (new_text or "").lower(),
        default=PROCEDURAL_CHANGE,
    )


def categorize_change(old_text: str, new_text: str) -> ChangeCategorization:
    """
    Derive change type and training flag from a section's two contents.

    Blank old text means the section was added; blank new text means it
    was removed.
    """
    if not (old_text or "").strip():
        return ChangeCategorization(change_type=ChangeType.ADDED, training_flag=NEW_CONTENT)
    if not (new_text or "").strip():
        return ChangeCategorization(change_type=ChangeType.REMOVED, training_flag=CONTENT_REMOVED)
    return ChangeCategorization(
        change_type=ChangeType.MODIFIED,
        training_flag=detect_training_flag(old_text, new_text),
    )


def detect_training_indicators(changes: Iterable[DocumentChange]) -> TrainingIndicators:
    """
    Aggregate training relevance indicators over a set of changes.

    Tests each change's training flag text, not the section content.
    """
    indicators = TrainingIndicators()
    for change in changes:
        flag = (change.training_flag or "").lower()
        if "procedural" in flag:
            indicators.procedural_steps = True
        if "safety" in flag:
            indicators.safety_warnings = True
        if "limit" in flag or "specification" in flag:
            indicators.limits_specifications = True
        if "frequency" in flag:
            indicators.frequency_timing = True
        if "documentation" in flag:
            indicators.required_documentation = True
        if "role" in flag or "responsibility" in flag:
            indicators.role_responsibilities = True
    return indicators


BADGE_RULES = [
    ("documentation", BADGE_DOCUMENTATION_TERMS),
    ("roles", BADGE_ROLE_TERMS),
    ("frequency", BADGE_FREQUENCY_TERMS),
]


def detect_change_badges(old_text: str, new_text: str) -> List[str]:
    """
    List every change category badge that applies to a section.

    Unlike the training flag this is multi-label. "procedure" is added
    when procedural vocabulary appears or no other badge applied.
    """
    combined = f"{(old_text or '').lower()} {(new_text or '').lower()}"
    badges = [badge for badge, terms in BADGE_RULES if contains_any(combined, terms)]
    if contains_any(combined, BADGE_PROCEDURE_TERMS) or not badges:
        badges.append("procedure")
    return badges


def _first_term(text: str, terms: List[str]) -> Optional[str]:
    return next((term for term in terms if term in text), None)


def _frequency_shift(old: str, new: str) -> Optional[str]:
    old_freq = _first_term(old, DESCRIPTOR_FREQUENCY_TERMS)
    new_freq = _first_term(new, DESCRIPTOR_FREQUENCY_TERMS)
    if old_freq and new_freq and old_freq != new_freq:
        return f"Frequency wording modified ({old_freq} → {new_freq})"
    return None


DESCRIPTOR_RULES = [
    (
        lambda old, new: any((term in old) != (term in new) for term in DESCRIPTOR_ROLE_TERMS),
        "Role or responsibility wording updated",
    ),
    (_newly_present(DESCRIPTOR_DOCUMENTATION_TERMS), "Wording updated related to documentation requirements"),
    (_in_either(DESCRIPTOR_DOCUMENTATION_TERMS), "Documentation wording revised"),
    (_in_either(DESCRIPTOR_SAFETY_TERMS), "Safety-related wording updated"),
    (_in_either(DESCRIPTOR_LIMIT_TERMS), "Limit or specification wording modified"),
]


def generate_change_descriptor(old_text: str, new_text: str, change_type: ChangeType) -> str:
    """Produce a one-line mechanical description of a change."""
    if change_type == ChangeType.ADDED:
        return "New content added to this section"
    if change_type == ChangeType.REMOVED:
        return "Content retired from this section"

    old = (old_text or "").lower()
    new = (new_text or "").lower()
    return (
        _frequency_shift(old, new)
        or first_match(DESCRIPTOR_RULES, old, new, default="Section wording revised")
    )
