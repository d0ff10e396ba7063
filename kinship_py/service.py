"""Core entry point: resolve a relation chain into a KinshipResponse.

    resolve_kinship(chain, speaker_gender, language, cache=None) -> KinshipResponse

Inputs may be enum members or their string values; string step identifiers
go through algebra.parse_chain, so unknown identifiers raise
UnknownRelationError here and never reach the engine.
"""
from __future__ import annotations
from typing import Any, Dict, Iterable, Optional, Tuple, Union
import logging
import threading

from .algebra import parse_chain, reciprocal, reduce_with_trace, relation_path
from .cache import ResponseCache, make_key
from .config import Config, load_config
from .localization import build
from .models import Gender, KinshipResponse, Language, RelationStep

StepLike = Union[RelationStep, str]


def _coerce(chain: Iterable[StepLike], speaker_gender, language) -> Tuple[Tuple[RelationStep, ...], Gender, Language]:
    return parse_chain(chain), Gender(speaker_gender), Language(language)


class KinshipService:
    def __init__(self, cache: Optional[ResponseCache] = None) -> None:
        self.cache = cache if cache is not None else ResponseCache()

    @classmethod
    def from_config(cls, cfg: Config) -> "KinshipService":
        return cls(ResponseCache(max_entries=cfg.cache_max_entries))

    def resolve(
        self,
        chain: Iterable[StepLike],
        speaker_gender: Union[Gender, str],
        language: Union[Language, str],
    ) -> KinshipResponse:
        steps, gender, lang = _coerce(chain, speaker_gender, language)

        def _compute() -> KinshipResponse:
            identity, trace = reduce_with_trace(steps, gender)
            logging.debug("resolved %s as %s via %s", relation_path(steps), identity.category.value, trace)
            return build(identity, lang, gender, steps)

        return self.cache.get_or_build(make_key(lang, gender, steps), _compute)

    def explain(self, chain: Iterable[StepLike], speaker_gender: Union[Gender, str]) -> Dict[str, Any]:
        """Return the canonical identity and the rewrite trace, uncached."""
        steps = parse_chain(chain)
        gender = Gender(speaker_gender)
        identity, trace = reduce_with_trace(steps, gender)
        return {
            "relationPath": relation_path(steps),
            "identity": identity.to_dict(),
            "reciprocal": reciprocal(identity, gender).to_dict(),
            "trace": trace,
        }


_default_service: Optional[KinshipService] = None
_default_lock = threading.Lock()


def get_default_service() -> KinshipService:
    global _default_service
    with _default_lock:
        if _default_service is None:
            cfg = load_config()
            _default_service = KinshipService.from_config(cfg)
            logging.info("kinship service initialized (cache_max_entries=%s)", cfg.cache_max_entries)
        return _default_service


def set_default_service(service: Optional[KinshipService]) -> None:
    global _default_service
    with _default_lock:
        _default_service = service


def resolve_kinship(
    chain: Iterable[StepLike],
    speaker_gender: Union[Gender, str],
    language: Union[Language, str],
    cache: Optional[ResponseCache] = None,
) -> KinshipResponse:
    """Resolve `chain` for a speaker of `speaker_gender` in `language`.

    Always returns a well-formed response for valid inputs: the empty chain
    is "self" and chains with no standard term render the per-language
    placeholder. Pass `cache` to use a cache other than the process default.
    """
    service = KinshipService(cache) if cache is not None else get_default_service()
    return service.resolve(chain, speaker_gender, language)
