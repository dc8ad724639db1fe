"""
A tree-walking run-time for Lox: environments, values, and the evaluator.
"""
