import re
import unicodedata

TYPOGRAPHIC_CHARS = str.maketrans({
    "‘": "'", "’": "'", "‚": "'", "′": "'",
    "“": '"', "”": '"', "„": '"', "″": '"',
    "–": "-", "—": " - ", "−": "-",
    "…": "...",
    "\u00a0": " ",
})


def normalize_encoding(text: str) -> str:
    """Fold text to plain ASCII so tokenization sees one consistent encoding."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = text.translate(TYPOGRAPHIC_CHARS)
    text = unicodedata.normalize("NFKD", text)
    return text.encode("ascii", "ignore").decode("ascii")


def clean_text(raw: str, inline_lists: bool = False) -> str:
    """
    Normalizes raw document text before tokenization.

    With ``inline_lists`` short lines without closing punctuation are treated
    as list items and joined into one comma separated sentence. Only for
    list-heavy sources such as web articles: in hard-wrapped prose every
    short wrapped line would become a sentence of its own.
    """
    lines = normalize_encoding(raw).splitlines()
    processed_lines: list[str] = []
    list_buffer: list[str] = []

    def flush_list(buf: list[str]) -> None:
        if not buf:
            return
        joined = ", ".join(item.strip(" \t*-") for item in buf if item.strip())
        if joined:
            processed_lines.append(joined.rstrip(",") + ".")

    for line in lines:
        stripped = line.strip()
        is_list_item = (
                inline_lists
                and stripped
                and len(stripped) <= 60
                and stripped[-1] not in ".!?:\"'"
                and not stripped.startswith("#")
        )
        if is_list_item:
            list_buffer.append(stripped)
        else:
            flush_list(list_buffer)
            list_buffer = []
            processed_lines.append(line)

    flush_list(list_buffer)
    text = "\n".join(processed_lines)

    text = re.sub(r'\n{3,}', '\n\n', text)  # collapse blank lines
    text = re.sub(r'(?<!\n)\n(?!\n)', ' ', text)  # mid-para newlines → space
    text = re.sub(r'[ \t]+', ' ', text)  # collapse whitespace
    return text.strip()


def clean_corpus(
        input_path: str = "/data/intermediate/corpus_raw.json",
        output_path: str = "/data/intermediate/corpus_clean.json",
        inline_lists: bool = False,
):
    import json, os, sys

    with open(input_path, "r", encoding="utf-8") as f:
        documents = json.load(f)

    if not documents:
        print("ERROR: Raw corpus is empty.", file=sys.stderr)
        sys.exit(1)

    cleaned = []
    for doc in documents:
        text = clean_text(doc["text"], inline_lists=inline_lists)
        print(f"Cleaned '{doc['title']}': {len(text)} chars (was {len(doc['text'])})")
        cleaned.append({"title": doc["title"], "text": text})

    os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(cleaned, f, indent=2)

    print(f"Cleaned corpus: {len(cleaned)} documents. Written to {output_path}")
