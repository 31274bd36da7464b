"""
SMOG grade per document.

    SMOG = 1.0430 * sqrt(30 * polysyllables / sentences) + 3.1291

The constants belong to the published formula and are not tunable.
"""
import math

from smog_pipeline.scripts.count_syllables import is_polysyllabic

SMOG_SLOPE = 1.0430
SMOG_SAMPLE_SENTENCES = 30
SMOG_INTERCEPT = 3.1291


class EmptyDocumentError(ValueError):
    """Raised when a document has no sentences to grade."""


def sentence_count(document: dict, distinct: bool = False) -> int:
    """
    Sentences in a tokenized document.

    Every occurrence counts by default. ``distinct=True`` counts each sentence
    text once, which under-counts repeated lines such as short dialogue.
    """
    if distinct:
        return len({s["text"] for s in document["sentences"]})
    return len(document["sentences"])


def polysyllable_count(document: dict) -> int:
    return sum(
        1
        for s in document["sentences"]
        for w in s["words"]
        if is_polysyllabic(w)
    )


def smog_grade(n_sentences: int, n_polysyllables: int) -> float:
    if n_sentences <= 0:
        raise EmptyDocumentError("SMOG is undefined for a document with no sentences")
    return SMOG_SLOPE * math.sqrt(SMOG_SAMPLE_SENTENCES * n_polysyllables / n_sentences) + SMOG_INTERCEPT


def smog(document: dict, distinct: bool = False) -> float:
    return smog_grade(sentence_count(document, distinct), polysyllable_count(document))


def score_document(document: dict, distinct: bool = False) -> dict:
    n_sentences = sentence_count(document, distinct)
    n_polysyllables = polysyllable_count(document)
    return {
        "title": document["title"],
        "n_sentences": n_sentences,
        "n_polysyllables": n_polysyllables,
        "SMOG": smog_grade(n_sentences, n_polysyllables),
    }


def score_corpus(documents: list[dict], distinct: bool = False) -> tuple[list[dict], list[dict]]:
    """Score every document; an empty document becomes an error record instead of stopping the batch."""
    results: list[dict] = []
    errors: list[dict] = []
    for doc in documents:
        try:
            results.append(score_document(doc, distinct))
        except EmptyDocumentError as e:
            errors.append({"title": doc["title"], "error": "EmptyDocument", "message": str(e)})
    return results, errors


def compute_smog(
        input_path: str = "/data/intermediate/corpus_tokens.json",
        output_path: str = "/data/intermediate/readability.json",
        distinct_sentences: bool = False,
):
    import json, os, sys

    with open(input_path, "r", encoding="utf-8") as f:
        documents = json.load(f)

    results, errors = score_corpus(documents, distinct=distinct_sentences)

    for r in results:
        print(f"SMOG '{r['title']}': {r['SMOG']:.2f} "
              f"({r['n_polysyllables']} polysyllables / {r['n_sentences']} sentences)")
    for e in errors:
        print(f"WARNING: '{e['title']}' skipped: {e['message']}", file=sys.stderr)

    os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump({"results": results, "errors": errors}, f, indent=2)

    print(f"Readability: {len(results)} scored, {len(errors)} failed. Written to {output_path}")
