from .evaluator import PomPropertyEvaluator, parse_evaluation_output

__all__ = ["PomPropertyEvaluator", "parse_evaluation_output"]
