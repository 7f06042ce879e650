"""Core tree-walking evaluator for the tss interpreter."""

from __future__ import annotations

from tss import SyntaxTree, LispValue
from tss.evaluation.apply import apply, is_callable
from tss.types.environment import Environment
from tss.types.errors import TssSyntaxError, TssTypeError, TssUnboundSymbol
from tss.types.primitive import STDLIB, LazyPrimitive
from tss.types.token import Token, first_line, is_name_token, is_value_token


def type_name(value: LispValue) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "list"
    return type(value).__name__


def evaluate(tree: SyntaxTree, env: Environment) -> LispValue:
    """Evaluate one syntax tree against `env` and return its value."""
    match tree:
        case []:
            raise TssSyntaxError("Unexpected empty statement")
        case [head, *tail]:
            target = evaluate(head, env)
            if not is_callable(target):
                raise TssTypeError(
                    f"Expected function, got {type_name(target)}", first_line(head)
                )
            # Lazy primitives receive the argument trees unevaluated
            if isinstance(target, LazyPrimitive):
                return apply(target, tail, env, evaluate)
            args = [evaluate(arg, env) for arg in tail]
            return apply(target, args, env, evaluate)
        case Token() if is_value_token(tree):
            return tree.value
        case Token() if is_name_token(tree):
            name = tree.name
            if name in STDLIB:
                return STDLIB[name]
            if env.is_bound(name):
                return env.lookup(name)
            raise TssUnboundSymbol(f"Unknown symbol or identifier {name}", tree.line)

    raise TssSyntaxError(f"Cannot evaluate {tree!r}")
