"""
The tree-walking evaluator proper.
"""
