from .base import InterestClassifier
from .rules import RuleClassifier
from .text import TextClassifier

__all__ = ["InterestClassifier", "RuleClassifier", "TextClassifier"]
