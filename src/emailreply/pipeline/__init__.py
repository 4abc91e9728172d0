"""Pipeline components for email reply parsing."""

from emailreply.pipeline.accumulator import AccumulatedFragments, FragmentAccumulator
from emailreply.pipeline.classifier import ClassifiedLine, LineClassifier
from emailreply.pipeline.fragment import Fragment
from emailreply.pipeline.preprocessor import PreprocessedText, Preprocessor
from emailreply.pipeline.visibility import VisibilityResolver

__all__ = [
    "AccumulatedFragments",
    "ClassifiedLine",
    "Fragment",
    "FragmentAccumulator",
    "LineClassifier",
    "PreprocessedText",
    "Preprocessor",
    "VisibilityResolver",
]
