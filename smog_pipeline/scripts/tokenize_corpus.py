import nltk
from nltk.tokenize import RegexpTokenizer, sent_tokenize

# Keeps contractions and hyphenated compounds in one token: "couldn't", "well-known".
WORD_PATTERN = r"[A-Za-z0-9]+(?:['\-][A-Za-z0-9]+)*"

_word_tokenizer = RegexpTokenizer(WORD_PATTERN)


def ensure_nltk_data() -> None:
    nltk.download('punkt', quiet=True)
    nltk.download('punkt_tab', quiet=True)


def split_sentences(text: str) -> list[str]:
    return [s.strip() for s in sent_tokenize(text) if s.strip()]


def split_words(sentence: str) -> list[str]:
    return [
        w.lower() for w in _word_tokenizer.tokenize(sentence)
        if any(c.isalpha() for c in w)
    ]


def tokenize_document(document: dict) -> dict:
    """Split a ``{title, text}`` document into sentences of words, dropping wordless sentences."""
    sentences = []
    for sent in split_sentences(document["text"]):
        words = split_words(sent)
        if words:
            sentences.append({"text": sent, "words": words})
    return {"title": document["title"], "sentences": sentences}


def tokenize_corpus(
        input_path: str = "/data/intermediate/corpus_clean.json",
        output_path: str = "/data/intermediate/corpus_tokens.json",
):
    import json, os

    ensure_nltk_data()

    with open(input_path, "r", encoding="utf-8") as f:
        documents = json.load(f)

    tokenized = [tokenize_document(doc) for doc in documents]
    for doc in tokenized:
        n_words = sum(len(s["words"]) for s in doc["sentences"])
        print(f"Tokenized '{doc['title']}': {len(doc['sentences'])} sentences, {n_words} words")

    os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(tokenized, f)

    print(f"Tokenized corpus written to {output_path}")
