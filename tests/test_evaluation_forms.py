import pytest

from tss.types.errors import (
    TssInvalidSymbol,
    TssNameError,
    TssSyntaxError,
    TssTypeError,
    TssUnboundSymbol,
)
from tss.types.lambda_fn import Closure
from tss.types.primitive import STDLIB


# ------------------ define / set ------------------

def test_define_then_use(interp):
    assert interp.eval("(define x 5)") is None
    assert interp.eval("(+ x 1)") == 6


def test_redefinition_requires_set(interp):
    interp.eval("(define x 5)")
    with pytest.raises(TssNameError, match="x is already defined"):
        interp.eval("(define x 6)")
    assert interp.eval("(set x 6)") is None
    assert interp.eval("x") == 6


def test_set_creates_missing_binding(interp):
    interp.eval("(set fresh 1)")
    assert interp.eval("fresh") == 1


def test_define_redefinition_flag(interp):
    interp.eval("(define x 1 #t)")
    interp.eval("(define x 2 #t)")
    assert interp.eval("x") == 2
    with pytest.raises(TssNameError):
        interp.eval("(define x 3 #f)")
    with pytest.raises(TssTypeError):
        interp.eval("(define y 3 5)")


def test_dollar_alias_defines(interp):
    interp.eval("($ y 3)")
    assert interp.eval("y") == 3


def test_define_accepts_symbol_targets(interp):
    interp.eval("(define ++ (lambda (n) (+ n 1)))")
    assert interp.eval("(++ 41)") == 42


@pytest.mark.parametrize(
    "source", ["(define + 1)", "(define lambda 1)", "(set $ 1)", "(set write 2)", "(define λ 0)"]
)
def test_reserved_names_cannot_be_bound(interp, source):
    with pytest.raises(TssNameError, match="is a reserved name"):
        interp.eval(source)


@pytest.mark.parametrize("source", ["(define 1 2)", '(define "x" 2)', "(define (x) 2)"])
def test_define_target_must_be_a_name(interp, source):
    with pytest.raises(TssInvalidSymbol):
        interp.eval(source)


@pytest.mark.parametrize(
    "source,found",
    [("(define 1 2)", "found 1"), ('(define "x" 2)', 'found "x"'), ("(define (x #t) 2)", "found (x #t)")],
)
def test_define_target_error_shows_the_target(interp, source, found):
    with pytest.raises(TssInvalidSymbol) as err:
        interp.eval(source)
    assert found in str(err.value)


@pytest.mark.parametrize("source", ["(define x)", "(define)", "(set x 1 #t 2)"])
def test_define_shape(interp, source):
    with pytest.raises(TssSyntaxError):
        interp.eval(source)


def test_nested_define_is_rejected_and_marker_cleared(interp):
    with pytest.raises(TssNameError, match="Nested defines are not permitted, already defining a"):
        interp.eval("(define a (define b 1))")
    assert interp.env.defining is None
    # Neither name was bound and later defines still work
    with pytest.raises(TssUnboundSymbol):
        interp.eval("a")
    interp.eval("(define c 2)")
    assert interp.eval("c") == 2


def test_failed_value_clears_define_marker(interp):
    with pytest.raises(TssUnboundSymbol):
        interp.eval("(define a missing)")
    assert interp.env.defining is None
    interp.eval("(define a 1)")
    assert interp.eval("a") == 1


# ------------------ if ------------------

@pytest.mark.parametrize(
    "source,expected",
    [
        ("(if #t 1 2)", 1),
        ("(if #f 1 2)", 2),
        ("(if #f 1)", None),
        ("(if (= 1 1) \"y\" \"n\")", "y"),
        ("(if 0 1 2)", 2),
        ('(if "" 1 2)', 2),
        ('(if "text" 1 2)', 1),
        ("(if (lambda () 0) 1 2)", 1),
        ("(if (block) 1 2)", 2),
    ],
)
def test_if(interp, source, expected):
    assert interp.eval(source) == expected


def test_if_only_evaluates_taken_branch(interp, output):
    assert interp.eval('(if #t 1 (write "no"))') == 1
    assert interp.eval("(if #f undefined-name 2)") == 2
    assert output == []


@pytest.mark.parametrize("source", ["(if #t)", "(if)", "(if #t 1 2 3)"])
def test_if_shape(interp, source):
    with pytest.raises(TssSyntaxError):
        interp.eval(source)


# ------------------ lambda ------------------

def test_lambda_application(interp):
    assert interp.eval("((lambda (a b) (+ a b)) 2 3)") == 5


@pytest.mark.parametrize("alias", ["\\", "λ"])
def test_lambda_aliases(interp, alias):
    assert interp.eval(f"(({alias} (n) (* n n)) 4)") == 16


def test_lambda_returns_closure(interp):
    fn = interp.eval("(lambda (a b) a)")
    assert isinstance(fn, Closure)
    assert fn.formals == ["a", "b"]
    assert fn.self_name is None


def test_missing_arguments_bind_to_null_and_extras_are_ignored(interp):
    assert interp.eval("((lambda (a b) b) 1)") is None
    assert interp.eval("((lambda (a) a) 1 2)") == 1


@pytest.mark.parametrize(
    "source",
    ["(lambda (a))", "(lambda)", "(lambda (a 1) a)", "(lambda a a)", "(lambda (a) a a)"],
)
def test_lambda_shape(interp, source):
    with pytest.raises(TssSyntaxError):
        interp.eval(source)


@pytest.mark.parametrize(
    "source,found",
    [("(lambda (a 1.5) a)", "found (a 1.5)"), ("(lambda a a)", "found a"), ("(lambda (a (b)) a)", "found (a (b))")],
)
def test_lambda_parameter_error_shows_the_parameters(interp, source, found):
    with pytest.raises(TssSyntaxError) as err:
        interp.eval(source)
    assert found in str(err.value)


def test_recursive_factorial(interp):
    interp.eval("(define fact (lambda (n) (if (= n 0) 1 (* n (fact (- n 1))))))")
    assert interp.eval("(fact 5)") == 120
    assert interp.eval("fact").self_name == "fact"


def test_recursive_fibonacci(interp):
    interp.eval(
        """
        (define fib (lambda (n)
          (if (= n 0) 0
            (if (= n 1) 1
              (+ (fib (- n 1)) (fib (- n 2)))))))
        """
    )
    assert interp.eval("(fib 10)") == 55


# ------------------ block ------------------

def test_block(interp):
    assert interp.eval("(block 1 2 3)") == 3
    assert interp.eval("(block)") is None


def test_block_evaluates_in_order(interp, output):
    interp.eval('(block (write "a") (write "b"))')
    assert output == ["a", "b"]


# ------------------ write ------------------

def test_write_concatenates_display_forms(interp, output):
    assert interp.eval('(write "x = " 1.5 ", " 2 " " #t)') is None
    assert output == ["x = 1.5, 2 true"]


def test_write_with_no_arguments_emits_empty_line(interp, output):
    interp.eval("(write)")
    assert output == [""]


# ------------------ first-class primitives ------------------

def test_primitives_are_first_class(interp):
    assert interp.eval("+") is STDLIB["+"]
    interp.eval("(define add +)")
    assert interp.eval("(add 1 2)") == 3
    interp.eval("(define apply2 (lambda (f a b) (f a b)))")
    assert interp.eval("(apply2 * 3 4)") == 12


def test_lazy_primitive_through_alias(interp):
    interp.eval("(define my-if if)")
    assert interp.eval("(my-if #f missing 9)") == 9


def test_write_renders_booleans_as_words(interp, output):
    interp.eval('(write "flag " #t " " (= 1 2))')
    assert output == ["flag true false"]
