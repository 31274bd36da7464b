"""SMOG readability pipeline: syllable counting, tokenization and per-document grading."""

from smog_pipeline.scripts.compute_smog import EmptyDocumentError, score_corpus, smog, smog_grade
from smog_pipeline.scripts.count_syllables import count_syllables

__all__ = ["count_syllables", "smog", "smog_grade", "score_corpus", "EmptyDocumentError"]
