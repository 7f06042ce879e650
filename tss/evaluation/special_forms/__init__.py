"""Lazy primitives of the tss evaluator.

Each handler receives the unevaluated argument trees, the Environment and the
evaluator function, and decides itself which arguments to evaluate.
"""

from tss.evaluation.special_forms.define_form import define_form, set_form
from tss.evaluation.special_forms.if_form import if_form, is_truthy
from tss.evaluation.special_forms.lambda_form import lambda_form

__all__ = ["define_form", "set_form", "if_form", "is_truthy", "lambda_form"]
