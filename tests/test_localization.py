import itertools

import pytest

from kinship_py.algebra import reduce
from kinship_py.localization import (
    build,
    colloquial_for,
    describe,
    emoji_for,
    step_labels,
    title_for,
)
from kinship_py.models import (
    CanonicalIdentity,
    Category,
    Gender,
    Language,
    Lineage,
    RelationStep as R,
    RelativeAge,
    SELF_IDENTITY,
    TargetGender,
)
from kinship_py.terms import UNKNOWN_RELATION


def _resolve(chain, gender=Gender.MALE, language=Language.ZH):
    return build(reduce(chain, gender), language, gender, chain)


def test_paternal_elder_uncle_zh():
    resp = _resolve([R.FATHER, R.ELDER_BROTHER])
    assert resp.title == "伯父"
    assert resp.colloquial == "伯伯"
    assert resp.description == "父亲的哥哥"
    assert resp.relation_path == "father>elder_brother"


def test_maternal_cousin_descriptions():
    chain = [R.MOTHER, R.YOUNGER_BROTHER, R.DAUGHTER]
    assert _resolve(chain, language=Language.ZH).description == "母亲的弟弟的女儿"
    assert _resolve(chain, language=Language.EN).description == "Mother's younger brother's daughter"
    assert _resolve(chain, language=Language.TH).description == "ลูกสาวของน้องชายของแม่"
    assert _resolve(chain, language=Language.ZH).title == "表妹"
    assert _resolve(chain, language=Language.EN).title == "Maternal Cousin"


def test_nephew_title_follows_sibling_side():
    assert _resolve([R.ELDER_SISTER, R.SON]).title == "外甥"
    assert _resolve([R.YOUNGER_BROTHER, R.SON]).title == "侄子"
    assert _resolve([R.ELDER_SISTER, R.DAUGHTER], language=Language.EN).title == "Niece"


def test_grandparents_zh_titles():
    assert _resolve([R.FATHER, R.FATHER]).colloquial == "爷爷"
    assert _resolve([R.MOTHER, R.MOTHER]).title == "外祖母"
    assert _resolve([R.MOTHER, R.MOTHER]).colloquial == "外婆"


def test_empty_chain_response():
    resp = _resolve([], language=Language.EN)
    assert resp.title == "Yourself"
    assert resp.description == "Yourself"
    assert resp.emoji == "🙂"
    assert resp.relation_path == ""


def test_unresolved_uses_placeholder_term():
    resp = _resolve([R.FATHER, R.FATHER, R.FATHER], language=Language.EN)
    assert resp.title == "No standard term"
    assert resp.emoji == "❓"
    assert resp.description == "Father's father's father"


def test_colloquial_falls_back_to_title():
    resp = _resolve([R.SON], language=Language.EN)
    assert resp.title == "Son"
    assert resp.colloquial == "Son"


def test_unknown_identity_gets_unknown_relation():
    # no table lists a spouse without a gender
    ident = CanonicalIdentity(0, Category.SPOUSE)
    assert title_for(ident, Language.EN) == UNKNOWN_RELATION[Language.EN]
    assert colloquial_for(ident, Language.EN) == UNKNOWN_RELATION[Language.EN]


def test_most_specific_entry_wins():
    elder = CanonicalIdentity(0, Category.SIBLING, relative_age=RelativeAge.ELDER, target_gender=TargetGender.MALE)
    plain = CanonicalIdentity(0, Category.SIBLING, target_gender=TargetGender.MALE)
    assert title_for(elder, Language.ZH) == "哥哥"
    assert title_for(plain, Language.ZH) == "兄弟"


@pytest.mark.parametrize(
    "ident,emoji",
    [
        (CanonicalIdentity(1, Category.PARENT, target_gender=TargetGender.MALE), "👴"),
        (CanonicalIdentity(1, Category.UNCLE_AUNT, target_gender=TargetGender.FEMALE), "👩"),
        (CanonicalIdentity(-1, Category.CHILD, target_gender=TargetGender.UNSPECIFIED), "🧒"),
        (CanonicalIdentity(-2, Category.GRANDCHILD, target_gender=TargetGender.MALE), "👶"),
        (SELF_IDENTITY, "🙂"),
    ],
)
def test_emoji_for(ident, emoji):
    assert emoji_for(ident) == emoji


def test_reciprocal_title():
    assert _resolve([R.MOTHER], gender=Gender.FEMALE).reciprocal == "女儿"
    assert _resolve([R.FATHER, R.ELDER_BROTHER], language=Language.EN).reciprocal == "Nephew"


def test_relation_path_is_language_independent():
    chain = [R.WIFE, R.MOTHER, R.YOUNGER_SISTER]
    paths = {_resolve(chain, language=lang).relation_path for lang in Language}
    assert paths == {"wife>mother>younger_sister"}


def test_titles_never_empty():
    for lang, cat, lin, age, tg in itertools.product(Language, Category, Lineage, RelativeAge, TargetGender):
        ident = CanonicalIdentity(0, cat, lin, age, tg)
        assert title_for(ident, lang)
        assert colloquial_for(ident, lang)


def test_describe_and_labels_cover_every_step():
    for lang in Language:
        labels = step_labels(lang)
        assert set(labels) == {s.value for s in R}
        assert describe([R.PATERNAL_COUSIN_FEMALE], lang) == labels["paternal_cousin_female"]
        assert describe([], lang)
