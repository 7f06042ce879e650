"""Application engine for tss.

`apply` is the single dispatch point for every callable value: user closures
and the closed set of built-in primitives. Eager primitives and closures
receive evaluated values; lazy primitives receive raw argument trees.
"""

import logging

from tss import LispValue, EvaluatorFn
from tss.builtin import env_builtin
from tss.evaluation.special_forms import define_form, set_form, if_form, lambda_form
from tss.types.environment import Environment
from tss.types.errors import TssTypeError
from tss.types.lambda_fn import Closure
from tss.types.primitive import EagerPrimitive, LazyPrimitive, Op

logger = logging.getLogger(__name__)


def is_callable(value: LispValue) -> bool:
    return isinstance(value, (Closure, EagerPrimitive, LazyPrimitive))


def apply_closure(
    fn: Closure, args: list[LispValue], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """Call a closure in a fresh local scope built from its captured snapshot.

    The scope is popped again whether the body returns or raises.
    """
    logger.debug("calling %s with %d argument(s)", fn, len(args))
    with env.scope(fn.bindings(args)):
        return evaluate_fn(fn.body, env)


def apply_primitive(
    prim: EagerPrimitive | LazyPrimitive,
    args: list,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Run a built-in primitive. For lazy primitives `args` are syntax trees."""
    match prim.op:
        case Op.ADD:
            return env_builtin.add(env, args)
        case Op.SUB:
            return env_builtin.sub(env, args)
        case Op.MUL:
            return env_builtin.mul(env, args)
        case Op.DIV:
            return env_builtin.div(env, args)
        case Op.EQ:
            return env_builtin.equals(env, args)
        case Op.WRITE:
            return env_builtin.write(env, args)
        case Op.BLOCK:
            return env_builtin.block(env, args)
        case Op.LAMBDA:
            return lambda_form(args, env, evaluate_fn)
        case Op.DEFINE:
            return define_form(args, env, evaluate_fn)
        case Op.SET:
            return set_form(args, env, evaluate_fn)
        case Op.IF:
            return if_form(args, env, evaluate_fn)
    raise TssTypeError(f"Unknown primitive {prim}")


def apply(
    fn: LispValue,
    args: list,
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if isinstance(fn, Closure):
        return apply_closure(fn, args, env, evaluate_fn)
    elif isinstance(fn, (EagerPrimitive, LazyPrimitive)):
        return apply_primitive(fn, args, env, evaluate_fn)
    else:
        raise TssTypeError(f"Cannot apply non-function {fn!r}")
