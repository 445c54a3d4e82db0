"""Command line interface for the vocabulary tutor."""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from tabulate import tabulate
from tqdm import tqdm

from .config import SOURCES, TAGGERS, Settings
from .credentials import CredentialProvider, EnvironmentCredentialStore, FileCredentialStore, mask
from .models import EvaluationResult, WordAnalysis
from .resolver import EntryResolver
from .serialization import result_to_json
from .sources import MockDictionaryLookup, WordNetLookup, ensure_wordnet_data
from .tagging import NltkTagger, ensure_tagger_data
from .tutor import VocabularyTutor

LOGGER = logging.getLogger("vocab_tutor")


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Vocabulary usage tutor")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--source", choices=SOURCES, help="External dictionary source")
    parser.add_argument("--tagger", choices=TAGGERS, help="Part-of-speech tagger ('none' trusts the dictionary)")
    parser.add_argument(
        "--timeout",
        type=float,
        help="Seconds to wait for the external lookup; a WordNet read still in progress finishes in the background",
    )
    parser.add_argument("--key-file", help="Path of the stored API key")

    subparsers = parser.add_subparsers(dest="command", required=True)

    evaluate_parser = subparsers.add_parser("evaluate", help="Evaluate a sentence that should use a word")
    evaluate_parser.add_argument("word", help="Target vocabulary word")
    evaluate_parser.add_argument("sentence", help="Learner's sentence")
    evaluate_parser.add_argument("--external", action="store_true", help="Consult the external dictionary source")
    evaluate_parser.add_argument("--format", choices=["json", "table"], default="json")

    lookup_parser = subparsers.add_parser("lookup", help="Show the word analysis for a word")
    lookup_parser.add_argument("word", help="Word to inspect")
    lookup_parser.add_argument("--external", action="store_true", help="Consult the external dictionary source")

    batch_parser = subparsers.add_parser("batch", help="Evaluate word<TAB>sentence lines from a file")
    batch_parser.add_argument("path", help="Input file")
    batch_parser.add_argument("--external", action="store_true", help="Consult the external dictionary source")
    batch_parser.add_argument("--output", help="Write JSON lines to this file instead of printing a table")

    key_parser = subparsers.add_parser("key", help="Manage the external dictionary API key")
    key_subparsers = key_parser.add_subparsers(dest="key_command", required=True)
    key_set = key_subparsers.add_parser("set", help="Store an API key")
    key_set.add_argument("value")
    key_subparsers.add_parser("show", help="Show the stored key (masked)")
    key_subparsers.add_parser("clear", help="Remove the stored key")
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        env = Settings.from_env()
        settings = Settings(
            lookup_timeout=args.timeout if args.timeout is not None else env.lookup_timeout,
            source=args.source or env.source,
            tagger=args.tagger or env.tagger,
        )
    except ValueError as exc:
        parser.error(str(exc))

    key_store = FileCredentialStore(args.key_file)

    if args.command == "key":
        _run_key_command(args, key_store)
        return

    # a stored key switches the external source on, as in the app settings screen
    has_key = EnvironmentCredentialStore().get() is not None or key_store.get() is not None
    use_external = args.external or has_key
    tutor = build_tutor(settings, use_external)

    if args.command == "evaluate":
        result = tutor.evaluate_sync(args.word, args.sentence, use_external)
        if args.format == "table":
            _print_result_table(result)
        else:
            print(result_to_json(result))
    elif args.command == "lookup":
        analysis = asyncio.run(tutor.analyse_word(args.word, use_external))
        _print_analysis(args.word, analysis)
    elif args.command == "batch":
        path = Path(args.path)
        if not path.exists():
            parser.error(f"Input file {path} does not exist.")
        results = evaluate_file(tutor, path, use_external)
        if args.output:
            write_json_lines(results, Path(args.output))
            LOGGER.info("Wrote %s results to %s", len(results), args.output)
        else:
            _print_batch_table(results)


def build_tutor(settings: Settings, use_external: bool) -> VocabularyTutor:
    lookup = None
    if use_external:
        if settings.source == "wordnet":
            ensure_wordnet_data()
            lookup = WordNetLookup()
        else:
            lookup = MockDictionaryLookup()
    tagger = None
    if settings.tagger == "nltk":
        ensure_tagger_data()
        tagger = NltkTagger()
    resolver = EntryResolver(lookup=lookup, timeout=settings.lookup_timeout)
    return VocabularyTutor(resolver=resolver, tagger=tagger)


def read_pairs(path: Path) -> Iterator[Tuple[str, str]]:
    """Yield ``(word, sentence)`` from a tab separated file, skipping comments."""

    with path.open("r", encoding="utf8") as handle:
        for number, line in enumerate(handle, start=1):
            line = line.rstrip("\n")
            if not line.strip() or line.startswith("#"):
                continue
            if "\t" not in line:
                LOGGER.warning("Skipping line %s of %s: expected word<TAB>sentence", number, path)
                continue
            word, sentence = line.split("\t", 1)
            yield word, sentence


def evaluate_file(
    tutor: VocabularyTutor, path: Path, use_external: bool = False
) -> List[Tuple[str, str, EvaluationResult]]:
    pairs = list(read_pairs(path))

    async def _run() -> List[EvaluationResult]:
        return [
            await tutor.evaluate(word, sentence, use_external)
            for word, sentence in tqdm(pairs, desc="Evaluating", disable=len(pairs) < 2)
        ]

    results = asyncio.run(_run())
    return [(word, sentence, result) for (word, sentence), result in zip(pairs, results)]


def write_json_lines(results: List[Tuple[str, str, EvaluationResult]], destination: Path) -> None:
    destination.parent.mkdir(parents=True, exist_ok=True)
    with destination.open("w", encoding="utf8") as handle:
        for _, _, result in results:
            handle.write(result_to_json(result, compact=True) + "\n")


def _run_key_command(args: argparse.Namespace, store: CredentialProvider) -> None:
    if args.key_command == "set":
        if not store.set(args.value):
            print("API key was not saved.", file=sys.stderr)
            sys.exit(1)
        print("API key saved.")
    elif args.key_command == "show":
        print(mask(store.get()))
    elif args.key_command == "clear":
        store.clear()
        print("API key removed.")


def _print_result_table(result: EvaluationResult) -> None:
    analysis = result.word_analysis
    feedback = result.sentence_feedback
    rows = [
        ["Difficulty", analysis.difficulty.value],
        ["Meaning", analysis.meaning],
        ["Examples", "\n".join(analysis.examples)],
        ["Synonyms", ", ".join(analysis.synonyms)],
        ["Status", feedback.status.value],
        ["Explanation", feedback.explanation],
        ["Suggestion", feedback.corrected_sentence],
    ]
    print(tabulate(rows, tablefmt="plain"))


def _print_analysis(word: str, analysis: WordAnalysis) -> None:
    print(f"{word} ({analysis.difficulty.value})")
    print(f"  {analysis.meaning}")
    if analysis.examples:
        print("Examples:")
        for example in analysis.examples:
            print(f"  - {example}")
    if analysis.synonyms:
        print(f"Synonyms: {', '.join(analysis.synonyms)}")


def _print_batch_table(results: List[Tuple[str, str, EvaluationResult]]) -> None:
    if not results:
        print("No sentences to evaluate")
        return
    rows = [
        [word, sentence, result.sentence_feedback.status.value, result.sentence_feedback.corrected_sentence]
        for word, sentence, result in results
    ]
    print(tabulate(rows, headers=["Word", "Sentence", "Status", "Suggestion"]))


if __name__ == "__main__":  # pragma: no cover
    main()
