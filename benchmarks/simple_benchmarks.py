from timeit import timeit

from lispy.evaluation.evaluator import evaluate
from lispy.reader.parser import Parser
from lispy.reader.reader import read


def _nested(depth: int) -> str:
    """(+ 1 (+ 1 (+ 1 ... 1)))"""
    return "(+ 1 " * depth + "1" + ")" * depth


def _wide(width: int) -> str:
    return "(* " + " ".join("1" for _ in range(width)) + ")"


def time_parse(code: str, rounds: int) -> float:
    parser = Parser()
    parser.parse(code)  # Warmup
    return timeit(lambda: parser.parse(code), number=rounds)


def time_eval(code: str, rounds: int) -> float:
    """Time read + reduce only. The reducer rewrites its tree, so every round
    reads a fresh value tree from the same syntax tree.
    """
    tree = Parser().parse(code)
    evaluate(read(tree))  # Warmup
    return timeit(lambda: evaluate(read(tree)), number=rounds)


def _print_pair(name: str, code: str, rounds: int) -> None:
    tparse = time_parse(code, rounds)
    teval = time_eval(code, rounds)
    print(f"Benchmark: {name}")
    print(f"  parse: {tparse:.6f}s  |  read + reduce: {teval:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    _print_pair("single application", "(+ 2 3)", rounds=20000)
    _print_pair("nested depth 200", _nested(200), rounds=200)
    _print_pair("wide application (1000 args)", _wide(1000), rounds=200)
    _print_pair("decimal fold", "(/ 1.0 " + " ".join("2.0" for _ in range(100)) + ")", rounds=2000)
