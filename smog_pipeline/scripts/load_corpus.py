import os
import re

import requests

GUTENBERG_URL = "https://www.gutenberg.org/cache/epub/{book_id}/pg{book_id}.txt"
DEFAULT_TIMEOUT = 30

_START_MARKER_RE = re.compile(r"^\*\*\*\s*START OF (THE|THIS) PROJECT GUTENBERG.*$", re.MULTILINE | re.IGNORECASE)
_END_MARKER_RE = re.compile(r"^\*\*\*\s*END OF (THE|THIS) PROJECT GUTENBERG.*$", re.MULTILINE | re.IGNORECASE)
_TITLE_RE = re.compile(r"^Title:\s*(.+?)\s*$", re.MULTILINE)


def read_documents(input_dir: str) -> list[dict]:
    """One document per ``*.txt`` file in ``input_dir``, titled by file name."""
    documents = []
    for name in sorted(os.listdir(input_dir)):
        if not name.endswith(".txt"):
            continue
        with open(os.path.join(input_dir, name), "r", encoding="utf-8", errors="replace") as f:
            documents.append({"title": name[:-len(".txt")], "text": f.read()})
    return documents


def strip_gutenberg_boilerplate(text: str) -> str:
    start = _START_MARKER_RE.search(text)
    if start:
        text = text[start.end():]
    end = _END_MARKER_RE.search(text)
    if end:
        text = text[:end.start()]
    return text.strip()


def fetch_gutenberg(book_id: int, session=None, timeout: int = DEFAULT_TIMEOUT) -> dict:
    """Download a Project Gutenberg plain-text book as a ``{title, text}`` document."""
    http = session or requests
    resp = http.get(GUTENBERG_URL.format(book_id=book_id), timeout=timeout)
    resp.raise_for_status()
    # requests falls back to ISO-8859-1 for text/* without a charset
    if "charset" not in resp.headers.get("Content-Type", "").lower():
        resp.encoding = "utf-8"
    raw = resp.text

    match = _TITLE_RE.search(raw)
    title = match.group(1) if match else f"gutenberg-{book_id}"
    return {"title": title, "text": strip_gutenberg_boilerplate(raw)}


def load_corpus(
        input_dir: str = "/data/input",
        output_path: str = "/data/intermediate/corpus_raw.json",
        gutenberg_ids: tuple = (),
):
    import json, sys

    documents = []
    if os.path.isdir(input_dir):
        documents.extend(read_documents(input_dir))
    elif not gutenberg_ids:
        print(f"ERROR: Input directory not found at {input_dir}", file=sys.stderr)
        sys.exit(1)

    with requests.Session() as session:
        for book_id in gutenberg_ids:
            try:
                documents.append(fetch_gutenberg(book_id, session=session))
            except requests.RequestException as e:
                print(f"ERROR: Could not download Gutenberg book {book_id}: {e}", file=sys.stderr)
                sys.exit(1)

    if not documents:
        print("ERROR: No documents found.", file=sys.stderr)
        sys.exit(1)

    for doc in documents:
        if not doc["text"].strip():
            print(f"WARNING: '{doc['title']}' is empty.", file=sys.stderr)

    os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(documents, f)

    print(f"Corpus loaded: {len(documents)} documents. Written to {output_path}")
