from lithia.evaluation.evaluator import evaluate, evaluate_sequence

__all__ = ["evaluate", "evaluate_sequence"]
