import logging

from tss import EvaluatorFn
from tss import SyntaxTree, LispValue
from tss.types.environment import Environment
from tss.types.errors import TssInvalidSymbol, TssNameError, TssSyntaxError, TssTypeError
from tss.types.primitive import is_reserved
from tss.types.token import first_line, is_name_token, to_source

logger = logging.getLogger(__name__)


def define_form(
    tail: list[SyntaxTree],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    allow_redefinition: bool = False,
) -> LispValue:
    """
    (define name value [allow-redefinition])
    Binds `name` in the active scope. An optional third argument evaluating to
    a boolean permits overwriting an existing binding. Returns None.
    """
    if len(tail) not in (2, 3):
        raise TssSyntaxError(
            "define requires a name, a value and an optional redefinition flag",
            first_line(tail),
        )

    target, val_expr = tail[0], tail[1]
    if not is_name_token(target):
        raise TssInvalidSymbol(
            f"Define target must be an identifier or symbol, found {to_source(target)}",
            first_line(target),
        )
    name = target.name

    if len(tail) == 3:
        flag = evaluate_fn(tail[2], env)
        if not isinstance(flag, bool):
            raise TssTypeError("define redefinition flag must be #t or #f", target.line)
        allow_redefinition = allow_redefinition or flag

    if is_reserved(name):
        raise TssNameError(f"{name} is a reserved name", target.line)

    if env.has(name) and not allow_redefinition:
        raise TssNameError(
            f"{name} is already defined, use 'set' if redefinition is intentional",
            target.line,
        )

    with env.begin_define(name):
        value = evaluate_fn(val_expr, env)
        env.set(name, value)
    logger.debug("bound %s in %s scope", name, "local" if env.has_local_scope else "global")
    return None


def set_form(
    tail: list[SyntaxTree],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """(set name value): define with redefinition permitted."""
    return define_form(tail, env, evaluate_fn, allow_redefinition=True)
