import argparse
import json
import logging
import sys
from typing import List, Optional

from .algebra import UnknownRelationError, parse_path, parse_step
from .config import load_config
from .localization import step_labels
from .models import Gender, Language
from .service import KinshipService


def _step_arg(value: str):
    try:
        return parse_step(value)
    except UnknownRelationError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    cfg = load_config()
    parser = argparse.ArgumentParser(
        prog="kinship-py",
        description="Work out what to call a relative reached through a chain of kinship steps",
    )
    parser.add_argument("steps", nargs="*", type=_step_arg, help="Relation steps starting from yourself, e.g. mother younger_brother daughter")
    parser.add_argument("--path", default=None, help="Steps as one '>'-joined string instead of positional steps")
    parser.add_argument("-g", "--gender", choices=[g.value for g in Gender], default=cfg.default_gender.value, help="Speaker gender")
    parser.add_argument("-l", "--lang", choices=[lang.value for lang in Language], default=cfg.default_language.value, help="Output language")
    parser.add_argument("--json", action="store_true", help="Print the response as JSON")
    parser.add_argument("--explain", action="store_true", help="Print the canonical identity and the rules applied")
    parser.add_argument("--list", action="store_true", help="List the relation step identifiers and labels")
    parser.add_argument("--verbose", action="store_true", help="Verbose output")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    cfg = load_config()
    level = logging.DEBUG if args.verbose else getattr(logging, cfg.log_level, logging.WARNING)
    logging.basicConfig(level=level)

    if args.list:
        for ident, label in step_labels(Language(args.lang)).items():
            print(f"{ident:<24} {label}")
        return 0

    steps = list(args.steps)
    if args.path:
        try:
            steps.extend(parse_path(args.path))
        except UnknownRelationError as e:
            parser.error(str(e))

    service = KinshipService.from_config(cfg)
    if args.explain:
        print(json.dumps(service.explain(steps, args.gender), ensure_ascii=False, indent=2))
        return 0

    resp = service.resolve(steps, args.gender, args.lang)
    if args.json:
        print(json.dumps(resp.to_dict(), ensure_ascii=False, indent=2))
        return 0

    if resp.colloquial and resp.colloquial != resp.title:
        print(f"{resp.emoji} {resp.title} ({resp.colloquial})")
    else:
        print(f"{resp.emoji} {resp.title}")
    print(resp.description)
    print(f"path: {resp.relation_path or '-'}")
    print(f"they call you: {resp.reciprocal}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
