import csv
import math

from smog_pipeline.scripts.compute_smog import SMOG_INTERCEPT

CSV_FIELDS = ["title", "n_sentences", "n_polysyllables", "SMOG"]

VALIDATION_RULES = {
    "title": lambda v: isinstance(v, str) and bool(v.strip()),
    "n_sentences": lambda v: isinstance(v, int) and v > 0,
    "n_polysyllables": lambda v: isinstance(v, int) and v >= 0,
    "SMOG": lambda v: isinstance(v, float) and math.isfinite(v) and v >= SMOG_INTERCEPT,
}


def validate_results(results: list[dict]) -> list[str]:
    """Returns a list of failure messages (empty = all passed)."""
    failures = []
    for i, record in enumerate(results):
        label = record.get("title") or f"#{i}"
        for field, rule in VALIDATION_RULES.items():
            value = record.get(field)
            if value is None:
                failures.append(f"  - {label}: '{field}' is None")
            elif not rule(value):
                failures.append(f"  - {label}: '{field}' failed quality check, got: {value!r}")
    return failures


def write_csv(results: list[dict], path: str) -> None:
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=CSV_FIELDS, extrasaction="ignore")
        writer.writeheader()
        writer.writerows(results)


def save_results(
        input_path: str = "/data/intermediate/readability.json",
        output_path: str = "/data/output/smog_results.json",
        csv_path: str | None = None,
):
    import json, os, sys

    try:
        with open(input_path, "r", encoding="utf-8") as f:
            readability = json.load(f)
    except FileNotFoundError as e:
        print(f"ERROR: Missing intermediate file: {e}", file=sys.stderr)
        sys.exit(1)

    results = readability.get("results", [])
    errors = readability.get("errors", [])

    if not results and not errors:
        print("ERROR: Nothing to save, no documents were scored.", file=sys.stderr)
        sys.exit(1)

    failures = validate_results(results)
    if failures:
        print("OUTPUT VALIDATION FAILED:", file=sys.stderr)
        for f in failures:
            print(f, file=sys.stderr)
        print("Aborting save to prevent writing incomplete results.", file=sys.stderr)
        sys.exit(1)

    for e in errors:
        print(f"WARNING: '{e['title']}' has no SMOG grade ({e['error']})", file=sys.stderr)

    os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump({"results": results, "errors": errors}, f, indent=2)

    if csv_path:
        os.makedirs(os.path.dirname(csv_path) or ".", exist_ok=True)
        write_csv(results, csv_path)
        print(f"Results table saved to {csv_path}")

    print(f"Results saved to {output_path}")
    print(json.dumps(results, indent=2))
