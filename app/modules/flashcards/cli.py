from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from pydantic import ValidationError

from app.core.config import settings
from app.core.logging import setup_logging
from app.modules.flashcards.errors import GenerationFailed
from app.modules.flashcards.export import EXPORT_FORMATS, export_cards
from app.modules.flashcards.main import FlashcardsGenerator
from app.modules.flashcards.models.flashcards import Flashcard


def _load_prompt(args: argparse.Namespace) -> str:
    if args.prompt and args.prompt_file:
        raise SystemExit("Provide either --prompt or --prompt-file, not both")
    if args.prompt_file:
        return Path(args.prompt_file).read_text(encoding="utf-8")
    if args.prompt:
        return args.prompt
    if args.topic:
        return args.topic
    raise SystemExit("--prompt, --prompt-file or --topic is required")


def _load_cards(path: str) -> list[Flashcard]:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise SystemExit(f"{path}: expected a JSON array of flashcards")
    try:
        return [Flashcard.model_validate(item) for item in data]
    except ValidationError as exc:
        raise SystemExit(f"{path}: invalid flashcard: {exc}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="flashcards-gen", description="Flashcards generator CLI"
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    g = sub.add_parser("generate", help="Generate flashcards from text, a question or a topic")
    g.add_argument("--prompt", "-p", help="Input text (question, topic or passage)")
    g.add_argument("--prompt-file", help="Path to a file containing the input text")
    g.add_argument("--topic", "-t", help="Explicit topic; skips input classification")
    g.add_argument("--language", "-l", help="Answer language (default from settings)")

    e = sub.add_parser("export", help="Export a JSON array of flashcards")
    e.add_argument("--input", "-i", required=True, help="JSON file with flashcards")
    e.add_argument(
        "--format", "-f", choices=sorted(EXPORT_FORMATS), default="json", dest="fmt"
    )
    e.add_argument("--output", "-o", help="Output path (default: flashcards.<format>)")

    args = parser.parse_args(argv)
    setup_logging(settings.app.log_level)

    if args.cmd == "generate":
        text = _load_prompt(args)
        svc = FlashcardsGenerator.from_settings(settings)
        try:
            cards = svc.generate_sync(text, topic=args.topic, language=args.language)
        except GenerationFailed as exc:
            print(f"{exc}: {exc.cause}", file=sys.stderr)
            return 1
        print(json.dumps(FlashcardsGenerator.to_jsonable(cards), indent=2, ensure_ascii=False))
        return 0
    if args.cmd == "export":
        cards = _load_cards(args.input)
        out = Path(args.output or EXPORT_FORMATS[args.fmt][1])
        out.write_bytes(export_cards(cards, args.fmt))
        print(f"Exported {len(cards)} flashcards to {out}")
        return 0

    parser.print_help()
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
