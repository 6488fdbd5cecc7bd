from lispy.evaluation.evaluator import evaluate
