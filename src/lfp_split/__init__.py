"""LFP Split - Classify package records and write them out."""
from .classify import Extraction, classify, split

__all__ = ["Extraction", "classify", "split"]
