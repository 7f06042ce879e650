from timeit import timeit

from tss.interpreter import Interpreter
from tss.evaluation.evaluator import evaluate
from tss.reader.parser import parse
from tss.reader.tokenizer import tokenize
from tss.types.environment import Environment


def _parse_one(code: str):
    return parse(code)[0]


def time_interpreter(code: str, rounds: int, setup: str = "") -> float:
    """Time the evaluator only: parse once and repeatedly evaluate the same tree."""
    itp = Interpreter(output=lambda line: None)
    if setup:
        itp.eval(setup)
    expr = _parse_one(code)
    # Warmup
    evaluate(expr, itp.env)
    # Timed
    return timeit(lambda: evaluate(expr, itp.env), number=rounds)


def bench_local_lookup(n_lookups: int = 100000) -> float:
    """Lookup of a global name while a local scope is active (fall-through path)."""
    env = Environment()
    env.set("answer", 42)
    with env.scope({"x": 1}):
        # Warmup
        for _ in range(1000):
            env.lookup("answer")
        return timeit(lambda: env.lookup("answer"), number=n_lookups)


def bench_tokenize(lines: int = 2000, rounds: int = 10) -> float:
    source = "\n".join('(write "line" (+ 1 2.5) (* 3 4)) ; comment' for _ in range(lines))
    return timeit(lambda: tokenize(source), number=rounds)


LAMBDA_APPLY_CODE = "((lambda (x y) (+ x y)) 1 2)"

FACT_SETUP = """
(define fact (lambda (n)
  (if (= n 0) 1 (* n (fact (- n 1))))))
"""
FACT_CODE = "(fact 50)"

FIB_SETUP = """
(define fib (lambda (n)
  (if (= n 0) 0
    (if (= n 1) 1
      (+ (fib (- n 1)) (fib (- n 2)))))))
"""
FIB_CODE = "(fib 12)"


def _print_result(name: str, code: str, rounds: int, setup: str = "") -> None:
    t = time_interpreter(code, rounds, setup)
    print(f"Benchmark: {name}")
    print(f"  interpreter: {t:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    print("Benchmark: tokenizer (2000 lines)")
    print(f"  time: {bench_tokenize():.6f}s")
    print("Benchmark: global lookup from a local scope")
    print(f"  time: {bench_local_lookup():.6f}s")

    _print_result("lambda application", LAMBDA_APPLY_CODE, rounds=20000)
    _print_result("recursion (factorial)", FACT_CODE, rounds=500, setup=FACT_SETUP)
    _print_result("recursion (fibonacci)", FIB_CODE, rounds=20, setup=FIB_SETUP)
