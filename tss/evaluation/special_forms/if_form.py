from tss import EvaluatorFn
from tss import SyntaxTree, LispValue
from tss.types.environment import Environment
from tss.types.errors import TssSyntaxError
from tss.types.token import first_line


def is_truthy(value: LispValue) -> bool:
    """None, False, zero, NaN and the empty string are false; all else is true."""
    if isinstance(value, float) and value != value:
        return False
    if isinstance(value, list):
        return True
    return bool(value)


def if_form(
    tail: list[SyntaxTree],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) not in (2, 3):
        raise TssSyntaxError(
            "if requires a condition, a then-expression and an optional else-expression",
            first_line(tail),
        )

    if is_truthy(evaluate_fn(tail[0], env)):
        return evaluate_fn(tail[1], env)
    elif len(tail) > 2:
        return evaluate_fn(tail[2], env)
    else:
        return None
