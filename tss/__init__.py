# Core type aliases for the tss data model.
# Runtime values are plain Python objects (float, str, bool, None, list) plus the
# callable variants in tss.types.primitive and tss.types.lambda_fn.
#
# Naming guidance:
# - SyntaxTree: Use in reader/parser code for parsed forms (a Token leaf or a list).
# - LispValue:  Use in evaluator/runtime code to denote evaluated values.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Parsed form: a non-parenthesis Token or a list of SyntaxTree
SyntaxTree = Any

# Evaluator function type: the evaluator used inside special forms
EvaluatorFn = Callable[..., LispValue]
