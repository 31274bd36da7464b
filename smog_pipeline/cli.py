"""
smog-readability: SMOG grade for one or more plain-text documents.

    smog-readability austen/emma.txt persuasion=books/pg105.txt --format csv
    smog-readability corpus_dir/ --gutenberg 1342 --output results.json
"""
import argparse
import csv
import io
import json
import os
import sys

import requests

from smog_pipeline.scripts.clean_corpus import clean_text
from smog_pipeline.scripts.compute_smog import score_corpus
from smog_pipeline.scripts.load_corpus import fetch_gutenberg, read_documents
from smog_pipeline.scripts.save_results import CSV_FIELDS
from smog_pipeline.scripts.tokenize_corpus import ensure_nltk_data, tokenize_document


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="smog-readability",
        description="Estimate the SMOG readability grade of plain-text documents",
    )
    parser.add_argument(
        "sources",
        nargs="*",
        metavar="SOURCE",
        help="A .txt file (titled by file name), TITLE=PATH, or a directory of .txt files",
    )
    parser.add_argument(
        "--gutenberg",
        type=int,
        action="append",
        default=[],
        metavar="ID",
        help="Project Gutenberg book id to download (repeatable)",
    )
    parser.add_argument(
        "--distinct-sentences",
        action="store_true",
        help="Count each distinct sentence text once",
    )
    parser.add_argument(
        "--inline-lists",
        action="store_true",
        help="Join runs of short list-like lines into one sentence (for bulleted articles, not wrapped prose)",
    )
    parser.add_argument(
        "--format",
        choices=["json", "csv"],
        default="json",
        help="Output format (default: json)",
    )
    parser.add_argument(
        "--output",
        default="-",
        help="Output path, '-' for stdout (default: -)",
    )
    args = parser.parse_args(argv)
    if not args.sources and not args.gutenberg:
        parser.error("give at least one SOURCE or --gutenberg ID")
    return args


def read_source(source: str) -> list[dict]:
    if os.path.isdir(source):
        return read_documents(source)

    title, sep, path = source.partition("=")
    if not sep:
        path = source
        title = os.path.splitext(os.path.basename(source))[0]
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return [{"title": title, "text": f.read()}]


def analyze(documents: list[dict], distinct: bool = False, inline_lists: bool = False):
    """Clean, tokenize and score ``{title, text}`` documents in-process."""
    ensure_nltk_data()
    tokenized = [
        tokenize_document({"title": d["title"], "text": clean_text(d["text"], inline_lists=inline_lists)})
        for d in documents
    ]
    return score_corpus(tokenized, distinct=distinct)


def render(results: list[dict], errors: list[dict], fmt: str) -> str:
    if fmt == "json":
        return json.dumps({"results": results, "errors": errors}, indent=2)
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=CSV_FIELDS, extrasaction="ignore", lineterminator="\n")
    writer.writeheader()
    writer.writerows(results)
    return buf.getvalue()


def main(argv=None) -> int:
    args = parse_args(argv)

    documents = []
    try:
        for source in args.sources:
            documents.extend(read_source(source))
    except OSError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    with requests.Session() as session:
        for book_id in args.gutenberg:
            try:
                documents.append(fetch_gutenberg(book_id, session=session))
            except requests.RequestException as e:
                print(f"ERROR: Could not download Gutenberg book {book_id}: {e}", file=sys.stderr)
                return 1

    results, errors = analyze(
        documents,
        distinct=args.distinct_sentences,
        inline_lists=args.inline_lists,
    )
    for e in errors:
        print(f"WARNING: '{e['title']}': {e['message']}", file=sys.stderr)

    output = render(results, errors, args.format)
    if args.output == "-":
        sys.stdout.write(output if output.endswith("\n") else output + "\n")
    else:
        with open(args.output, "w", encoding="utf-8", newline="") as f:
            f.write(output)
        print(f"Results saved to {args.output}", file=sys.stderr)

    return 0 if results else 1


if __name__ == "__main__":
    sys.exit(main())
