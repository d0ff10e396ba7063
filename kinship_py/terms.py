"""Fixed per-language kinship term tables.

Title and colloquial tables are keyed by
``(category, lineage, relative_age, target_gender)``; ``None`` in a key
position matches any value. The most specific matching key wins (see
localization._lookup).
"""
from __future__ import annotations
from typing import Dict, Optional, Tuple

from .models import Category, Language, Lineage, RelationStep, RelativeAge, TargetGender

Key = Tuple[Category, Optional[Lineage], Optional[RelativeAge], Optional[TargetGender]]
Table = Dict[Key, str]

SELF = Category.SELF
PAR = Category.PARENT
SIB = Category.SIBLING
COU = Category.COUSIN
CHI = Category.CHILD
NN = Category.NEPHEW_NIECE
SPO = Category.SPOUSE
UA = Category.UNCLE_AUNT
GP = Category.GRANDPARENT
GC = Category.GRANDCHILD
UNR = Category.UNRESOLVED

PA = Lineage.PATERNAL
MA = Lineage.MATERNAL
EL = RelativeAge.ELDER
YO = RelativeAge.YOUNGER
M = TargetGender.MALE
F = TargetGender.FEMALE
_ = None


UNKNOWN_RELATION: Dict[Language, str] = {
    Language.ZH: "未知关系",
    Language.EN: "Unknown relation",
    Language.TH: "ไม่ทราบความสัมพันธ์",
    Language.ID: "Hubungan tidak diketahui",
    Language.MS: "Hubungan tidak diketahui",
}


TITLES: Dict[Language, Table] = {
    Language.ZH: {
        (SELF, _, _, _): "自己",
        (PAR, _, _, M): "父亲",
        (PAR, _, _, F): "母亲",
        (SIB, _, EL, M): "哥哥",
        (SIB, _, YO, M): "弟弟",
        (SIB, _, EL, F): "姐姐",
        (SIB, _, YO, F): "妹妹",
        (SIB, _, _, M): "兄弟",
        (SIB, _, _, F): "姐妹",
        (COU, PA, EL, M): "堂哥",
        (COU, PA, YO, M): "堂弟",
        (COU, PA, EL, F): "堂姐",
        (COU, PA, YO, F): "堂妹",
        (COU, PA, _, M): "堂兄弟",
        (COU, PA, _, F): "堂姐妹",
        (COU, MA, EL, M): "表哥",
        (COU, MA, YO, M): "表弟",
        (COU, MA, EL, F): "表姐",
        (COU, MA, YO, F): "表妹",
        (COU, _, _, M): "表兄弟",
        (COU, _, _, F): "表姐妹",
        (CHI, _, _, M): "儿子",
        (CHI, _, _, F): "女儿",
        (NN, MA, _, M): "外甥",
        (NN, MA, _, F): "外甥女",
        (NN, _, _, M): "侄子",
        (NN, _, _, F): "侄女",
        (SPO, _, _, M): "丈夫",
        (SPO, _, _, F): "妻子",
        (UA, PA, EL, M): "伯父",
        (UA, PA, YO, M): "叔父",
        (UA, PA, _, M): "伯叔",
        (UA, PA, _, F): "姑母",
        (UA, MA, _, M): "舅父",
        (UA, MA, _, F): "姨母",
        (UA, _, _, M): "叔叔",
        (UA, _, _, F): "阿姨",
        (GP, MA, _, M): "外祖父",
        (GP, MA, _, F): "外祖母",
        (GP, _, _, M): "祖父",
        (GP, _, _, F): "祖母",
        (GC, MA, _, M): "外孙",
        (GC, MA, _, F): "外孙女",
        (GC, _, _, M): "孙子",
        (GC, _, _, F): "孙女",
        (UNR, _, _, _): "无标准称谓",
    },
    Language.EN: {
        (SELF, _, _, _): "Yourself",
        (PAR, _, _, M): "Father",
        (PAR, _, _, F): "Mother",
        (SIB, _, EL, M): "Elder Brother",
        (SIB, _, YO, M): "Younger Brother",
        (SIB, _, EL, F): "Elder Sister",
        (SIB, _, YO, F): "Younger Sister",
        (SIB, _, _, M): "Brother",
        (SIB, _, _, F): "Sister",
        (COU, PA, _, _): "Paternal Cousin",
        (COU, MA, _, _): "Maternal Cousin",
        (COU, _, _, _): "Cousin",
        (CHI, _, _, M): "Son",
        (CHI, _, _, F): "Daughter",
        (NN, _, _, M): "Nephew",
        (NN, _, _, F): "Niece",
        (SPO, _, _, M): "Husband",
        (SPO, _, _, F): "Wife",
        (UA, PA, _, M): "Paternal Uncle",
        (UA, PA, _, F): "Paternal Aunt",
        (UA, MA, _, M): "Maternal Uncle",
        (UA, MA, _, F): "Maternal Aunt",
        (UA, _, _, M): "Uncle",
        (UA, _, _, F): "Aunt",
        (GP, PA, _, M): "Paternal Grandfather",
        (GP, PA, _, F): "Paternal Grandmother",
        (GP, MA, _, M): "Maternal Grandfather",
        (GP, MA, _, F): "Maternal Grandmother",
        (GP, _, _, M): "Grandfather",
        (GP, _, _, F): "Grandmother",
        (GC, _, _, M): "Grandson",
        (GC, _, _, F): "Granddaughter",
        (UNR, _, _, _): "No standard term",
    },
    Language.TH: {
        (SELF, _, _, _): "ตัวเอง",
        (PAR, _, _, M): "บิดา",
        (PAR, _, _, F): "มารดา",
        (SIB, _, EL, M): "พี่ชาย",
        (SIB, _, YO, M): "น้องชาย",
        (SIB, _, EL, F): "พี่สาว",
        (SIB, _, YO, F): "น้องสาว",
        (SIB, _, _, _): "พี่น้อง",
        (COU, _, _, _): "ลูกพี่ลูกน้อง",
        (CHI, _, _, M): "ลูกชาย",
        (CHI, _, _, F): "ลูกสาว",
        (NN, _, _, M): "หลานชาย",
        (NN, _, _, F): "หลานสาว",
        (SPO, _, _, M): "สามี",
        (SPO, _, _, F): "ภรรยา",
        (UA, _, EL, M): "ลุง",
        (UA, _, EL, F): "ป้า",
        (UA, PA, YO, _): "อา",
        (UA, MA, YO, _): "น้า",
        (UA, _, _, M): "ลุง",
        (UA, _, _, F): "ป้า",
        (GP, PA, _, M): "ปู่",
        (GP, PA, _, F): "ย่า",
        (GP, MA, _, M): "ตา",
        (GP, MA, _, F): "ยาย",
        (GP, _, _, M): "ปู่/ตา",
        (GP, _, _, F): "ย่า/ยาย",
        (GC, _, _, M): "หลานชาย",
        (GC, _, _, F): "หลานสาว",
        (UNR, _, _, _): "ไม่มีคำเรียกมาตรฐาน",
    },
    Language.ID: {
        (SELF, _, _, _): "Diri sendiri",
        (PAR, _, _, M): "Ayah",
        (PAR, _, _, F): "Ibu",
        (SIB, _, EL, M): "Kakak laki-laki",
        (SIB, _, YO, M): "Adik laki-laki",
        (SIB, _, EL, F): "Kakak perempuan",
        (SIB, _, YO, F): "Adik perempuan",
        (SIB, _, _, M): "Saudara laki-laki",
        (SIB, _, _, F): "Saudara perempuan",
        (COU, _, _, M): "Sepupu laki-laki",
        (COU, _, _, F): "Sepupu perempuan",
        (CHI, _, _, M): "Anak laki-laki",
        (CHI, _, _, F): "Anak perempuan",
        (NN, _, _, M): "Keponakan laki-laki",
        (NN, _, _, F): "Keponakan perempuan",
        (SPO, _, _, M): "Suami",
        (SPO, _, _, F): "Istri",
        (UA, _, _, M): "Paman",
        (UA, _, _, F): "Bibi",
        (GP, _, _, M): "Kakek",
        (GP, _, _, F): "Nenek",
        (GC, _, _, M): "Cucu laki-laki",
        (GC, _, _, F): "Cucu perempuan",
        (UNR, _, _, _): "Tidak ada sebutan baku",
    },
    Language.MS: {
        (SELF, _, _, _): "Diri sendiri",
        (PAR, _, _, M): "Bapa",
        (PAR, _, _, F): "Ibu",
        (SIB, _, EL, M): "Abang",
        (SIB, _, YO, M): "Adik lelaki",
        (SIB, _, EL, F): "Kakak",
        (SIB, _, YO, F): "Adik perempuan",
        (SIB, _, _, M): "Saudara lelaki",
        (SIB, _, _, F): "Saudara perempuan",
        (COU, _, _, M): "Sepupu lelaki",
        (COU, _, _, F): "Sepupu perempuan",
        (CHI, _, _, M): "Anak lelaki",
        (CHI, _, _, F): "Anak perempuan",
        (NN, _, _, M): "Anak saudara lelaki",
        (NN, _, _, F): "Anak saudara perempuan",
        (SPO, _, _, M): "Suami",
        (SPO, _, _, F): "Isteri",
        (UA, _, _, M): "Bapa saudara",
        (UA, _, _, F): "Ibu saudara",
        (GP, _, _, M): "Datuk",
        (GP, _, _, F): "Nenek",
        (GC, _, _, M): "Cucu lelaki",
        (GC, _, _, F): "Cucu perempuan",
        (UNR, _, _, _): "Tiada panggilan standard",
    },
}


# Address terms that differ from the title. No entry -> colloquial == title.
COLLOQUIAL: Dict[Language, Table] = {
    Language.ZH: {
        (SELF, _, _, _): "我",
        (PAR, _, _, M): "爸爸",
        (PAR, _, _, F): "妈妈",
        (UA, PA, EL, M): "伯伯",
        (UA, PA, YO, M): "叔叔",
        (UA, PA, _, F): "姑姑",
        (UA, MA, _, M): "舅舅",
        (UA, MA, _, F): "姨妈",
        (GP, PA, _, M): "爷爷",
        (GP, PA, _, F): "奶奶",
        (GP, MA, _, M): "外公",
        (GP, MA, _, F): "外婆",
        (SPO, _, _, M): "老公",
        (SPO, _, _, F): "老婆",
    },
    Language.EN: {
        (SELF, _, _, _): "Me",
        (PAR, _, _, M): "Dad",
        (PAR, _, _, F): "Mom",
        (COU, _, _, _): "Cousin",
        (UA, _, _, M): "Uncle",
        (UA, _, _, F): "Aunt",
        (GP, _, _, M): "Grandpa",
        (GP, _, _, F): "Grandma",
    },
    Language.TH: {
        (PAR, _, _, M): "พ่อ",
        (PAR, _, _, F): "แม่",
        (SIB, _, EL, _): "พี่",
        (SIB, _, YO, _): "น้อง",
        (COU, _, EL, _): "พี่",
        (COU, _, YO, _): "น้อง",
        (CHI, _, _, _): "ลูก",
        (NN, _, _, _): "หลาน",
        (GC, _, _, _): "หลาน",
    },
    Language.ID: {
        (PAR, _, _, M): "Bapak",
        (PAR, _, _, F): "Mama",
        (SIB, _, EL, M): "Abang",
        (SIB, _, EL, F): "Kakak",
        (SIB, _, YO, _): "Adik",
        (COU, _, EL, M): "Abang",
        (COU, _, EL, F): "Kakak",
        (COU, _, YO, _): "Adik",
        (UA, _, _, M): "Om",
        (UA, _, _, F): "Tante",
    },
    Language.MS: {
        (PAR, _, _, M): "Ayah",
        (PAR, _, _, F): "Mak",
        (SIB, _, YO, _): "Adik",
        (COU, _, EL, M): "Abang",
        (COU, _, EL, F): "Kakak",
        (COU, _, YO, _): "Adik",
        (UA, _, EL, M): "Pak Long",
        (UA, _, EL, F): "Mak Long",
        (UA, _, _, M): "Pak Cik",
        (UA, _, _, F): "Mak Cik",
        (GP, _, _, M): "Atuk",
        (GP, _, _, F): "Nenek",
    },
}


STEP_LABELS: Dict[Language, Dict[RelationStep, str]] = {
    Language.ZH: {
        RelationStep.FATHER: "父亲",
        RelationStep.MOTHER: "母亲",
        RelationStep.HUSBAND: "丈夫",
        RelationStep.WIFE: "妻子",
        RelationStep.ELDER_BROTHER: "哥哥",
        RelationStep.YOUNGER_BROTHER: "弟弟",
        RelationStep.ELDER_SISTER: "姐姐",
        RelationStep.YOUNGER_SISTER: "妹妹",
        RelationStep.SON: "儿子",
        RelationStep.DAUGHTER: "女儿",
        RelationStep.PATERNAL_COUSIN_MALE: "堂兄弟",
        RelationStep.PATERNAL_COUSIN_FEMALE: "堂姐妹",
        RelationStep.MATERNAL_COUSIN_MALE: "表兄弟",
        RelationStep.MATERNAL_COUSIN_FEMALE: "表姐妹",
    },
    Language.EN: {
        RelationStep.FATHER: "Father",
        RelationStep.MOTHER: "Mother",
        RelationStep.HUSBAND: "Husband",
        RelationStep.WIFE: "Wife",
        RelationStep.ELDER_BROTHER: "Elder brother",
        RelationStep.YOUNGER_BROTHER: "Younger brother",
        RelationStep.ELDER_SISTER: "Elder sister",
        RelationStep.YOUNGER_SISTER: "Younger sister",
        RelationStep.SON: "Son",
        RelationStep.DAUGHTER: "Daughter",
        RelationStep.PATERNAL_COUSIN_MALE: "Paternal male cousin",
        RelationStep.PATERNAL_COUSIN_FEMALE: "Paternal female cousin",
        RelationStep.MATERNAL_COUSIN_MALE: "Maternal male cousin",
        RelationStep.MATERNAL_COUSIN_FEMALE: "Maternal female cousin",
    },
    Language.TH: {
        RelationStep.FATHER: "พ่อ",
        RelationStep.MOTHER: "แม่",
        RelationStep.HUSBAND: "สามี",
        RelationStep.WIFE: "ภรรยา",
        RelationStep.ELDER_BROTHER: "พี่ชาย",
        RelationStep.YOUNGER_BROTHER: "น้องชาย",
        RelationStep.ELDER_SISTER: "พี่สาว",
        RelationStep.YOUNGER_SISTER: "น้องสาว",
        RelationStep.SON: "ลูกชาย",
        RelationStep.DAUGHTER: "ลูกสาว",
        RelationStep.PATERNAL_COUSIN_MALE: "ลูกพี่ลูกน้องชายฝ่ายพ่อ",
        RelationStep.PATERNAL_COUSIN_FEMALE: "ลูกพี่ลูกน้องหญิงฝ่ายพ่อ",
        RelationStep.MATERNAL_COUSIN_MALE: "ลูกพี่ลูกน้องชายฝ่ายแม่",
        RelationStep.MATERNAL_COUSIN_FEMALE: "ลูกพี่ลูกน้องหญิงฝ่ายแม่",
    },
    Language.ID: {
        RelationStep.FATHER: "Ayah",
        RelationStep.MOTHER: "Ibu",
        RelationStep.HUSBAND: "Suami",
        RelationStep.WIFE: "Istri",
        RelationStep.ELDER_BROTHER: "Kakak laki-laki",
        RelationStep.YOUNGER_BROTHER: "Adik laki-laki",
        RelationStep.ELDER_SISTER: "Kakak perempuan",
        RelationStep.YOUNGER_SISTER: "Adik perempuan",
        RelationStep.SON: "Anak laki-laki",
        RelationStep.DAUGHTER: "Anak perempuan",
        RelationStep.PATERNAL_COUSIN_MALE: "Sepupu laki-laki dari pihak ayah",
        RelationStep.PATERNAL_COUSIN_FEMALE: "Sepupu perempuan dari pihak ayah",
        RelationStep.MATERNAL_COUSIN_MALE: "Sepupu laki-laki dari pihak ibu",
        RelationStep.MATERNAL_COUSIN_FEMALE: "Sepupu perempuan dari pihak ibu",
    },
    Language.MS: {
        RelationStep.FATHER: "Bapa",
        RelationStep.MOTHER: "Ibu",
        RelationStep.HUSBAND: "Suami",
        RelationStep.WIFE: "Isteri",
        RelationStep.ELDER_BROTHER: "Abang",
        RelationStep.YOUNGER_BROTHER: "Adik lelaki",
        RelationStep.ELDER_SISTER: "Kakak",
        RelationStep.YOUNGER_SISTER: "Adik perempuan",
        RelationStep.SON: "Anak lelaki",
        RelationStep.DAUGHTER: "Anak perempuan",
        RelationStep.PATERNAL_COUSIN_MALE: "Sepupu lelaki sebelah bapa",
        RelationStep.PATERNAL_COUSIN_FEMALE: "Sepupu perempuan sebelah bapa",
        RelationStep.MATERNAL_COUSIN_MALE: "Sepupu lelaki sebelah ibu",
        RelationStep.MATERNAL_COUSIN_FEMALE: "Sepupu perempuan sebelah ibu",
    },
}


# Jinja2 sources for the description sentence. `labels` is the chain in
# walking order; possessed-first languages iterate it reversed.
DESCRIPTION_TEMPLATES: Dict[Language, str] = {
    Language.ZH: "{{ labels | join('的') }}",
    Language.EN: (
        "{% for label in labels %}"
        "{{ label if loop.first else label | lower }}{% if not loop.last %}'s {% endif %}"
        "{% endfor %}"
    ),
    Language.TH: "{{ labels | reverse | join('ของ') }}",
    Language.ID: (
        "{% for label in labels | reverse %}"
        "{{ label if loop.first else label | lower }}{% if not loop.last %} dari {% endif %}"
        "{% endfor %}"
    ),
    Language.MS: (
        "{% for label in labels | reverse %}"
        "{{ label if loop.first else label | lower }}{% if not loop.last %} kepada {% endif %}"
        "{% endfor %}"
    ),
}

SELF_DESCRIPTION: Dict[Language, str] = {
    Language.ZH: "你自己",
    Language.EN: "Yourself",
    Language.TH: "ตัวคุณเอง",
    Language.ID: "Diri Anda sendiri",
    Language.MS: "Diri anda sendiri",
}
