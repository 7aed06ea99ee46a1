"""NaiveBayesClassifier: inference over a pre-trained multinomial model blob."""

from __future__ import annotations

import math


class NaiveBayesClassifier:
    """Pick the most probable interest for a token set.

    Model blob::

        {
          "classes": ["sports", "cooking", ...],
          "priors": [log p(class), ...],
          "likelihoods": {"token": [log p(token | class), ...], ...}
        }

    Tokens unknown to the model are ignored. When none are known the
    classifier has no opinion and returns None.
    """

    def __init__(self, model: dict) -> None:
        try:
            self.classes: list[str] = list(model["classes"])
            self.priors: list[float] = [float(p) for p in model["priors"]]
            self.likelihoods: dict[str, list[float]] = {
                token: [float(v) for v in values]
                for token, values in model["likelihoods"].items()
            }
        except (KeyError, TypeError, AttributeError) as e:
            raise ValueError(f"Malformed classifier model: {e}") from e

        n = len(self.classes)
        if n == 0 or len(self.priors) != n:
            raise ValueError("Classifier model needs one prior per class")
        for token, values in self.likelihoods.items():
            if len(values) != n:
                raise ValueError(f"Classifier model: wrong likelihood width for {token!r}")

    def classify(self, tokens: set[str]) -> str | None:
        known = [self.likelihoods[t] for t in tokens if t in self.likelihoods]
        if not known:
            return None

        best_idx, best_score = 0, -math.inf
        for idx, prior in enumerate(self.priors):
            score = prior + sum(values[idx] for values in known)
            if score > best_score:
                best_idx, best_score = idx, score
        return self.classes[best_idx]
