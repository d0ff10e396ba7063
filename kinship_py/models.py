from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class Language(str, Enum):
    ZH = "zh"
    EN = "en"
    TH = "th"
    ID = "id"
    MS = "ms"


class Category(str, Enum):
    SELF = "self"
    PARENT = "parent"
    SIBLING = "sibling"
    COUSIN = "cousin"
    CHILD = "child"
    NEPHEW_NIECE = "nephew_niece"
    SPOUSE = "spouse"
    UNCLE_AUNT = "uncle_aunt"
    GRANDPARENT = "grandparent"
    GRANDCHILD = "grandchild"
    UNRESOLVED = "unresolved"


class Lineage(str, Enum):
    PATERNAL = "paternal"
    MATERNAL = "maternal"
    UNSPECIFIED = "unspecified"


class RelativeAge(str, Enum):
    ELDER = "elder"
    YOUNGER = "younger"
    UNSPECIFIED = "unspecified"


class TargetGender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    UNSPECIFIED = "unspecified"

    @staticmethod
    def of(gender: Gender) -> "TargetGender":
        return TargetGender(gender.value)


class RelationStep(str, Enum):
    FATHER = "father"
    MOTHER = "mother"
    HUSBAND = "husband"
    WIFE = "wife"
    ELDER_BROTHER = "elder_brother"
    YOUNGER_BROTHER = "younger_brother"
    ELDER_SISTER = "elder_sister"
    YOUNGER_SISTER = "younger_sister"
    SON = "son"
    DAUGHTER = "daughter"
    PATERNAL_COUSIN_MALE = "paternal_cousin_male"
    PATERNAL_COUSIN_FEMALE = "paternal_cousin_female"
    MATERNAL_COUSIN_MALE = "maternal_cousin_male"
    MATERNAL_COUSIN_FEMALE = "maternal_cousin_female"

    @property
    def traits(self) -> "StepTraits":
        return STEP_TRAITS[self]

    @property
    def generation_delta(self) -> int:
        return STEP_TRAITS[self].generation_delta

    @property
    def gender(self) -> Gender:
        return STEP_TRAITS[self].gender


@dataclass(frozen=True)
class StepTraits:
    """Fixed semantic attributes of one elementary step.

    `kind` reuses Category: a single step is always a parent, spouse,
    sibling, cousin or child of the person before it in the chain.
    """
    kind: Category
    generation_delta: int
    gender: Gender
    age: RelativeAge = RelativeAge.UNSPECIFIED
    lineage: Lineage = Lineage.UNSPECIFIED


_M = Gender.MALE
_F = Gender.FEMALE

STEP_TRAITS: Dict[RelationStep, StepTraits] = {
    RelationStep.FATHER: StepTraits(Category.PARENT, 1, _M),
    RelationStep.MOTHER: StepTraits(Category.PARENT, 1, _F),
    RelationStep.HUSBAND: StepTraits(Category.SPOUSE, 0, _M),
    RelationStep.WIFE: StepTraits(Category.SPOUSE, 0, _F),
    RelationStep.ELDER_BROTHER: StepTraits(Category.SIBLING, 0, _M, RelativeAge.ELDER),
    RelationStep.YOUNGER_BROTHER: StepTraits(Category.SIBLING, 0, _M, RelativeAge.YOUNGER),
    RelationStep.ELDER_SISTER: StepTraits(Category.SIBLING, 0, _F, RelativeAge.ELDER),
    RelationStep.YOUNGER_SISTER: StepTraits(Category.SIBLING, 0, _F, RelativeAge.YOUNGER),
    RelationStep.SON: StepTraits(Category.CHILD, -1, _M),
    RelationStep.DAUGHTER: StepTraits(Category.CHILD, -1, _F),
    RelationStep.PATERNAL_COUSIN_MALE: StepTraits(Category.COUSIN, 0, _M, lineage=Lineage.PATERNAL),
    RelationStep.PATERNAL_COUSIN_FEMALE: StepTraits(Category.COUSIN, 0, _F, lineage=Lineage.PATERNAL),
    RelationStep.MATERNAL_COUSIN_MALE: StepTraits(Category.COUSIN, 0, _M, lineage=Lineage.MATERNAL),
    RelationStep.MATERNAL_COUSIN_FEMALE: StepTraits(Category.COUSIN, 0, _F, lineage=Lineage.MATERNAL),
}


@dataclass(frozen=True)
class CanonicalIdentity:
    net_generation: int
    category: Category
    lineage: Lineage = Lineage.UNSPECIFIED
    relative_age: RelativeAge = RelativeAge.UNSPECIFIED
    target_gender: TargetGender = TargetGender.UNSPECIFIED

    def to_dict(self) -> Dict[str, Any]:
        return {
            "netGeneration": self.net_generation,
            "category": self.category.value,
            "lineageSide": self.lineage.value,
            "relativeAge": self.relative_age.value,
            "targetGender": self.target_gender.value,
        }


SELF_IDENTITY = CanonicalIdentity(0, Category.SELF)


@dataclass(frozen=True)
class KinshipResponse:
    title: str
    colloquial: str
    description: str
    emoji: str
    relation_path: str
    reciprocal: str = ""

    def to_dict(self) -> Dict[str, Any]:
        # `relationPath` keeps the key name of the original JSON response
        return {
            "title": self.title,
            "colloquial": self.colloquial,
            "description": self.description,
            "emoji": self.emoji,
            "relationPath": self.relation_path,
            "reciprocal": self.reciprocal,
        }

    @staticmethod
    def from_dict(d: Optional[Dict[str, Any]]) -> Optional["KinshipResponse"]:
        if not d:
            return None
        return KinshipResponse(
            title=d.get("title", ""),
            colloquial=d.get("colloquial", ""),
            description=d.get("description", ""),
            emoji=d.get("emoji", ""),
            relation_path=d.get("relationPath", ""),
            reciprocal=d.get("reciprocal", ""),
        )
