import pytest

from kinship_py.models import (
    STEP_TRAITS,
    CanonicalIdentity,
    Category,
    Gender,
    KinshipResponse,
    Lineage,
    RelationStep,
    RelativeAge,
    SELF_IDENTITY,
    TargetGender,
)


def test_every_step_has_traits():
    assert set(STEP_TRAITS) == set(RelationStep)


@pytest.mark.parametrize(
    "step,delta",
    [
        (RelationStep.FATHER, 1),
        (RelationStep.MOTHER, 1),
        (RelationStep.SON, -1),
        (RelationStep.DAUGHTER, -1),
        (RelationStep.WIFE, 0),
        (RelationStep.ELDER_SISTER, 0),
        (RelationStep.MATERNAL_COUSIN_MALE, 0),
    ],
)
def test_generation_delta(step, delta):
    assert step.generation_delta == delta


def test_cousin_steps_carry_lineage():
    assert RelationStep.PATERNAL_COUSIN_FEMALE.traits.lineage is Lineage.PATERNAL
    assert RelationStep.MATERNAL_COUSIN_MALE.traits.lineage is Lineage.MATERNAL
    assert RelationStep.MATERNAL_COUSIN_MALE.gender is Gender.MALE


def test_sibling_steps_carry_age():
    assert RelationStep.ELDER_BROTHER.traits.age is RelativeAge.ELDER
    assert RelationStep.YOUNGER_SISTER.traits.age is RelativeAge.YOUNGER
    assert RelationStep.SON.traits.age is RelativeAge.UNSPECIFIED


def test_target_gender_of():
    assert TargetGender.of(Gender.MALE) is TargetGender.MALE
    assert TargetGender.of(Gender.FEMALE) is TargetGender.FEMALE


def test_identity_to_dict():
    ident = CanonicalIdentity(1, Category.UNCLE_AUNT, Lineage.MATERNAL, RelativeAge.YOUNGER, TargetGender.MALE)
    assert ident.to_dict() == {
        "netGeneration": 1,
        "category": "uncle_aunt",
        "lineageSide": "maternal",
        "relativeAge": "younger",
        "targetGender": "male",
    }


def test_self_identity_defaults():
    assert SELF_IDENTITY.net_generation == 0
    assert SELF_IDENTITY.lineage is Lineage.UNSPECIFIED
    assert SELF_IDENTITY.target_gender is TargetGender.UNSPECIFIED


def test_response_to_from_dict():
    r = KinshipResponse("伯父", "伯伯", "父亲的哥哥", "👨", "father>elder_brother", "侄子")
    d = r.to_dict()
    assert d["relationPath"] == "father>elder_brother"
    assert KinshipResponse.from_dict(d) == r
    assert KinshipResponse.from_dict(None) is None


def test_identities_are_hashable_and_frozen():
    a = CanonicalIdentity(0, Category.SIBLING)
    assert {a: 1}[CanonicalIdentity(0, Category.SIBLING)] == 1
    with pytest.raises(Exception):
        a.net_generation = 2
