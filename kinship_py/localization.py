"""Render a canonical identity into a language-specific KinshipResponse.

API:
    build(identity, language, speaker_gender, chain) -> KinshipResponse
    title_for(identity, language) -> str
    colloquial_for(identity, language) -> str
    emoji_for(identity) -> str
    describe(chain, language) -> str
    step_labels(language) -> Dict[str, str]
"""
from __future__ import annotations
from typing import Dict, Iterable, Optional, Sequence

from .algebra import reciprocal, relation_path
from .models import (
    CanonicalIdentity,
    Category,
    Gender,
    KinshipResponse,
    Language,
    RelationStep,
    TargetGender,
)
from .templating import render_description
from .terms import COLLOQUIAL, SELF_DESCRIPTION, STEP_LABELS, TITLES, UNKNOWN_RELATION, Table


def _lookup(table: Table, identity: CanonicalIdentity) -> Optional[str]:
    """Return the most specific entry matching identity, or None.

    A key field of None matches anything; on equal specificity the entry
    listed first in the table wins.
    """
    fields = (identity.category, identity.lineage, identity.relative_age, identity.target_gender)
    best = None
    best_score = -1
    for key, value in table.items():
        if key[0] is not fields[0]:
            continue
        score = 0
        for want, have in zip(key[1:], fields[1:]):
            if want is None:
                continue
            if want is not have:
                break
            score += 1
        else:
            if score > best_score:
                best, best_score = value, score
    return best


def title_for(identity: CanonicalIdentity, language: Language) -> str:
    title = _lookup(TITLES[language], identity)
    return title if title else UNKNOWN_RELATION[language]


def colloquial_for(identity: CanonicalIdentity, language: Language) -> str:
    colloquial = _lookup(COLLOQUIAL[language], identity)
    return colloquial if colloquial else title_for(identity, language)


_GENDERED_EMOJI = {
    Category.PARENT: ("👴", "👵", "🧓"),
    Category.GRANDPARENT: ("👴", "👵", "🧓"),
    Category.UNCLE_AUNT: ("👨", "👩", "🧑"),
    Category.CHILD: ("👦", "👧", "🧒"),
    Category.NEPHEW_NIECE: ("👦", "👧", "🧒"),
    Category.SIBLING: ("👱‍♂️", "👱‍♀️", "🧑"),
    Category.COUSIN: ("👱‍♂️", "👱‍♀️", "🧑"),
    Category.SPOUSE: ("🤵", "👰", "💍"),
}

_FIXED_EMOJI = {
    Category.SELF: "🙂",
    Category.GRANDCHILD: "👶",
    Category.UNRESOLVED: "❓",
}


def emoji_for(identity: CanonicalIdentity) -> str:
    if identity.category in _FIXED_EMOJI:
        return _FIXED_EMOJI[identity.category]
    male, female, neutral = _GENDERED_EMOJI[identity.category]
    if identity.target_gender is TargetGender.MALE:
        return male
    if identity.target_gender is TargetGender.FEMALE:
        return female
    return neutral


def describe(chain: Sequence[RelationStep], language: Language) -> str:
    if not chain:
        return SELF_DESCRIPTION[language]
    labels = STEP_LABELS[language]
    return render_description(language, [labels[step] for step in chain])


def step_labels(language: Language) -> Dict[str, str]:
    return {step.value: label for step, label in STEP_LABELS[language].items()}


def build(
    identity: CanonicalIdentity,
    language: Language,
    speaker_gender: Gender,
    chain: Iterable[RelationStep],
) -> KinshipResponse:
    steps = tuple(chain)
    return KinshipResponse(
        title=title_for(identity, language),
        colloquial=colloquial_for(identity, language),
        description=describe(steps, language),
        emoji=emoji_for(identity),
        relation_path=relation_path(steps),
        reciprocal=title_for(reciprocal(identity, speaker_gender), language),
    )
