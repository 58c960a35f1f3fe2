"""Interactive evaluator for a small arithmetic/text expression language."""

from exprcalc.engine.evaluator import Evaluator, evaluate

__all__ = ["Evaluator", "evaluate"]
