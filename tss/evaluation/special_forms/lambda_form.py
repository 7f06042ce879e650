from tss import EvaluatorFn
from tss import SyntaxTree, LispValue
from tss.types.environment import Environment
from tss.types.errors import TssSyntaxError
from tss.types.lambda_fn import Closure
from tss.types.token import first_line, is_identifier, to_source


def lambda_form(
    tail: list[SyntaxTree],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (lambda (params...) body)
    The closure captures a snapshot of the active scope, plus the name of the
    define in progress so that the body can call itself by that name.
    """
    if len(tail) != 2:
        raise TssSyntaxError(
            "lambda requires a parameter list and exactly one body expression",
            first_line(tail),
        )

    params, body = tail
    if not isinstance(params, list) or not all(is_identifier(p) for p in params):
        raise TssSyntaxError(
            f"lambda parameters must be a list of identifiers, found {to_source(params)}",
            first_line(params),
        )

    return Closure(
        [p.name for p in params],
        body,
        captured=env.peek(),
        self_name=env.defining,
    )
