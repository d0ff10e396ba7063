"""Kinship algebra: reduce a chain of elementary steps to one identity.

A chain is a path walked from the speaker: ``[mother, younger_brother,
daughter]`` reads "my mother's younger brother's daughter". Each step is
lifted into a *term* (a partially resolved relative) and the term list is
rewritten until a single term is left or no rule applies:

    - at each pass the highest-priority rule matching any contiguous window
      wins; ties go to the earliest window;
    - the window is replaced by the rule's result (zero or one term);
    - the sum of generation deltas is invariant under every rewrite.

When more than one term survives, the identity falls back to generational
arithmetic over the whole chain.

API:
    reduce(chain, speaker_gender) -> CanonicalIdentity
    reduce_with_trace(chain, speaker_gender) -> (CanonicalIdentity, [rule names])
    reciprocal(identity, speaker_gender) -> CanonicalIdentity
    parse_step(value) -> RelationStep
    parse_chain(values) -> Tuple[RelationStep, ...]
    parse_path(path) -> Tuple[RelationStep, ...]
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, Union
import logging

from .models import (
    Category,
    CanonicalIdentity,
    Gender,
    Lineage,
    RelationStep,
    RelativeAge,
    SELF_IDENTITY,
    TargetGender,
)

PATH_SEPARATOR = ">"

# identifiers emitted by the original keypad
LEGACY_ALIASES = {
    "elder_bro": RelationStep.ELDER_BROTHER,
    "younger_bro": RelationStep.YOUNGER_BROTHER,
    "elder_sis": RelationStep.ELDER_SISTER,
    "younger_sis": RelationStep.YOUNGER_SISTER,
    "cousin_elder_male": RelationStep.PATERNAL_COUSIN_MALE,
    "cousin_elder_female": RelationStep.PATERNAL_COUSIN_FEMALE,
}


class UnknownRelationError(ValueError):
    """Raised at the input boundary for identifiers outside RelationStep."""

    def __init__(self, value) -> None:
        super().__init__(f"unknown relation step: {value!r}")
        self.value = value


@dataclass(frozen=True)
class Term:
    category: Category
    delta: int
    gender: TargetGender
    age: RelativeAge = RelativeAge.UNSPECIFIED
    lineage: Lineage = Lineage.UNSPECIFIED

    @staticmethod
    def from_step(step: RelationStep) -> "Term":
        t = step.traits
        return Term(t.kind, t.generation_delta, TargetGender.of(t.gender), t.age, t.lineage)


# (window, gender of the person the window hangs off) -> replacement or None
Rewrite = Callable[[Sequence[Term], TargetGender], Optional[List[Term]]]


@dataclass(frozen=True)
class Rule:
    name: str
    pattern: Tuple[Category, ...]
    apply: Rewrite


def _side(gender: TargetGender) -> Lineage:
    if gender is TargetGender.MALE:
        return Lineage.PATERNAL
    if gender is TargetGender.FEMALE:
        return Lineage.MATERNAL
    return Lineage.UNSPECIFIED


def _sibling_collapse(w, _anchor):
    first, second = w
    return [Term(Category.SIBLING, 0, second.gender, first.age)]


def _cousin(w, _anchor):
    parent, sibling, child = w
    return [Term(Category.COUSIN, 0, child.gender, sibling.age, _side(parent.gender))]


def _nephew_niece(w, _anchor):
    sibling, child = w
    return [Term(Category.NEPHEW_NIECE, -1, child.gender, lineage=_side(sibling.gender))]


def _parent_reconstruction(w, _anchor):
    _sibling, parent = w
    return [parent]


def _uncle_aunt_from_cousin(w, _anchor):
    cousin, parent = w
    return [Term(Category.UNCLE_AUNT, 1, parent.gender, lineage=cousin.lineage)]


def _uncle_aunt_from_parent(w, _anchor):
    parent, sibling = w
    return [Term(Category.UNCLE_AUNT, 1, sibling.gender, sibling.age, _side(parent.gender))]


def _uncle_aunt_child(w, _anchor):
    uncle, child = w
    return [Term(Category.COUSIN, 0, child.gender, uncle.age, uncle.lineage)]


def _parents_cousin(w, _anchor):
    parent, cousin = w
    return [Term(Category.UNCLE_AUNT, 1, cousin.gender, lineage=_side(parent.gender))]


def _cousin_sibling(w, _anchor):
    cousin, sibling = w
    return [Term(Category.COUSIN, 0, sibling.gender, lineage=cousin.lineage)]


def _cousin_child(w, _anchor):
    cousin, child = w
    return [Term(Category.NEPHEW_NIECE, -1, child.gender, lineage=cousin.lineage)]


def _grandparent(w, _anchor):
    first, second = w
    return [Term(Category.GRANDPARENT, first.delta + second.delta, second.gender, lineage=_side(first.gender))]


def _grandchild(w, _anchor):
    first, second = w
    return [Term(Category.GRANDCHILD, first.delta + second.delta, second.gender, lineage=_side(first.gender))]


def _parents_spouse(w, _anchor):
    parent, spouse = w
    return [Term(Category.PARENT, parent.delta, spouse.gender, lineage=parent.lineage)]


def _spouses_child(w, _anchor):
    _spouse, child = w
    return [child]


def _childs_sibling(w, _anchor):
    child, sibling = w
    return [Term(Category.CHILD, child.delta, sibling.gender)]


def _parents_child(w, _anchor):
    _parent, child = w
    return [Term(Category.SIBLING, 0, child.gender)]


def _childs_parent(w, anchor):
    _child, parent = w
    if parent.gender is anchor:
        return []
    return [Term(Category.SPOUSE, 0, parent.gender)]


def _spouses_spouse(w, anchor):
    _first, second = w
    if second.gender is anchor:
        return []
    return None


_P = Category.PARENT
_S = Category.SIBLING
_C = Category.CHILD
_CO = Category.COUSIN
_SP = Category.SPOUSE
_UA = Category.UNCLE_AUNT

# priority order: first rule with a matching window wins
RULES: Tuple[Rule, ...] = (
    Rule("sibling_collapse", (_S, _S), _sibling_collapse),
    Rule("cousin", (_P, _S, _C), _cousin),
    Rule("nephew_niece", (_S, _C), _nephew_niece),
    Rule("parent_reconstruction", (_S, _P), _parent_reconstruction),
    Rule("uncle_aunt_from_cousin", (_CO, _P), _uncle_aunt_from_cousin),
    Rule("uncle_aunt_from_parent", (_P, _S), _uncle_aunt_from_parent),
    Rule("uncle_aunt_child", (_UA, _C), _uncle_aunt_child),
    Rule("parents_cousin", (_P, _CO), _parents_cousin),
    Rule("cousin_sibling", (_CO, _S), _cousin_sibling),
    Rule("cousin_child", (_CO, _C), _cousin_child),
    # net-zero pairs collapse before generations are stacked
    Rule("parents_child", (_P, _C), _parents_child),
    Rule("childs_parent", (_C, _P), _childs_parent),
    Rule("spouses_spouse", (_SP, _SP), _spouses_spouse),
    Rule("parents_spouse", (_P, _SP), _parents_spouse),
    Rule("spouses_child", (_SP, _C), _spouses_child),
    Rule("childs_sibling", (_C, _S), _childs_sibling),
    Rule("grandparent", (_P, _P), _grandparent),
    Rule("grandchild", (_C, _C), _grandchild),
)


def _match(rule: Rule, terms: List[Term], speaker_gender: Gender) -> Optional[Tuple[int, List[Term]]]:
    n = len(rule.pattern)
    for i in range(len(terms) - n + 1):
        window = terms[i:i + n]
        if tuple(t.category for t in window) != rule.pattern:
            continue
        anchor = TargetGender.of(speaker_gender) if i == 0 else terms[i - 1].gender
        out = rule.apply(window, anchor)
        if out is not None:
            return i, out
    return None


def _rewrite(terms: List[Term], speaker_gender: Gender, trace: List[str]) -> List[Term]:
    while len(terms) > 1:
        for rule in RULES:
            hit = _match(rule, terms, speaker_gender)
            if hit is None:
                continue
            i, out = hit
            terms = terms[:i] + out + terms[i + len(rule.pattern):]
            trace.append(rule.name)
            logging.debug("kinship rewrite %s at %d -> %d terms", rule.name, i, len(terms))
            break
        else:
            break
    return terms


def _fallback(chain: Sequence[RelationStep], terms: List[Term]) -> CanonicalIdentity:
    net = sum(step.generation_delta for step in chain)
    gender = TargetGender.of(chain[-1].gender)
    if net == 0:
        if all(t.delta == 0 for t in terms):
            category = Category.SIBLING
        elif _goes_up_then_down(terms):
            category = Category.COUSIN
        else:
            category = Category.SIBLING
    elif net == 1:
        category = Category.PARENT
    elif net == -1:
        has_sibling = any(step.traits.kind is Category.SIBLING for step in chain)
        category = Category.NEPHEW_NIECE if has_sibling else Category.CHILD
    elif net == 2:
        category = Category.GRANDPARENT
    elif net == -2:
        category = Category.GRANDCHILD
    else:
        category = Category.UNRESOLVED
    return CanonicalIdentity(net, category, target_gender=gender)


def _goes_up_then_down(terms: List[Term]) -> bool:
    seen_up = False
    for t in terms:
        if t.delta > 0:
            seen_up = True
        elif t.delta < 0 and seen_up:
            return True
    return False


def reduce_with_trace(chain: Iterable[RelationStep], speaker_gender: Gender) -> Tuple[CanonicalIdentity, List[str]]:
    """Reduce `chain` and also return the names of the rules applied, in order."""
    steps = tuple(chain)
    trace: List[str] = []
    if not steps:
        return SELF_IDENTITY, trace

    terms = _rewrite([Term.from_step(s) for s in steps], speaker_gender, trace)
    net = sum(step.generation_delta for step in steps)

    if not terms:
        return SELF_IDENTITY, trace
    if len(terms) == 1:
        t = terms[0]
        return CanonicalIdentity(net, t.category, t.lineage, t.age, t.gender), trace

    trace.append("generational_fallback")
    return _fallback(steps, terms), trace


def reduce(chain: Iterable[RelationStep], speaker_gender: Gender) -> CanonicalIdentity:
    """Reduce a relation chain to its canonical identity.

    Total for every chain of RelationStep members: the empty chain is Self and
    chains no rule can classify come back as Unresolved.
    """
    identity, _trace = reduce_with_trace(chain, speaker_gender)
    return identity


_SWAP_AGE = {
    RelativeAge.ELDER: RelativeAge.YOUNGER,
    RelativeAge.YOUNGER: RelativeAge.ELDER,
    RelativeAge.UNSPECIFIED: RelativeAge.UNSPECIFIED,
}

_RECIPROCAL_CATEGORY = {
    Category.PARENT: Category.CHILD,
    Category.CHILD: Category.PARENT,
    Category.GRANDPARENT: Category.GRANDCHILD,
    Category.GRANDCHILD: Category.GRANDPARENT,
    Category.UNCLE_AUNT: Category.NEPHEW_NIECE,
    Category.NEPHEW_NIECE: Category.UNCLE_AUNT,
    Category.SIBLING: Category.SIBLING,
    Category.COUSIN: Category.COUSIN,
    Category.SPOUSE: Category.SPOUSE,
}


def reciprocal(identity: CanonicalIdentity, speaker_gender: Gender) -> CanonicalIdentity:
    """Return the speaker's identity as seen from the resolved relative.

    Lineage is kept: a paternal uncle (father's sibling) sees the speaker as a
    nephew/niece through a brother, which is the paternal side.
    """
    category = _RECIPROCAL_CATEGORY.get(identity.category)
    if category is None:
        return CanonicalIdentity(-identity.net_generation, identity.category)
    age = RelativeAge.UNSPECIFIED
    if category in (Category.SIBLING, Category.COUSIN):
        age = _SWAP_AGE[identity.relative_age]
    return CanonicalIdentity(
        -identity.net_generation,
        category,
        identity.lineage,
        age,
        TargetGender.of(speaker_gender),
    )


def parse_step(value: Union[RelationStep, str]) -> RelationStep:
    if isinstance(value, RelationStep):
        return value
    if not isinstance(value, str):
        raise UnknownRelationError(value)
    key = value.strip().lower().replace("-", "_").replace(" ", "_")
    if key in LEGACY_ALIASES:
        return LEGACY_ALIASES[key]
    try:
        return RelationStep(key)
    except ValueError:
        raise UnknownRelationError(value) from None


def parse_chain(values: Iterable[Union[RelationStep, str]]) -> Tuple[RelationStep, ...]:
    return tuple(parse_step(v) for v in values)


def parse_path(path: str, sep: str = PATH_SEPARATOR) -> Tuple[RelationStep, ...]:
    """Parse a `>`-joined path (the form produced by relation_path)."""
    if not path:
        return ()
    return parse_chain(p for p in path.split(sep) if p.strip())


def relation_path(chain: Iterable[RelationStep]) -> str:
    return PATH_SEPARATOR.join(step.value for step in chain)
