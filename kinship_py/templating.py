from functools import lru_cache
from typing import Any, Dict, Sequence

from jinja2 import DictLoader, Environment, StrictUndefined, select_autoescape

from .models import Language
from .terms import DESCRIPTION_TEMPLATES


def _template_name(language: Language) -> str:
    return f"description/{language.value}.txt"


@lru_cache(maxsize=None)
def get_env() -> Environment:
    sources = {_template_name(lang): src for lang, src in DESCRIPTION_TEMPLATES.items()}
    return Environment(
        loader=DictLoader(sources),
        # descriptions are plain text: apostrophes must not be escaped
        autoescape=select_autoescape(["html", "xml"], default_for_string=False, default=False),
        undefined=StrictUndefined,
    )


def render_template(template_name: str, ctx: Dict[str, Any]) -> str:
    tmpl = get_env().get_template(template_name)
    return tmpl.render(**ctx)


def render_description(language: Language, labels: Sequence[str]) -> str:
    return render_template(_template_name(language), {"labels": list(labels)})
