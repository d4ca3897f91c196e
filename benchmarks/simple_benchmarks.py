from timeit import timeit

from regula import Number, compare, equal, sorted_terms, to_value


def time_compare(a, b, rounds: int) -> float:
    """Time compare() on one pair of prebuilt values."""
    # Warmup
    compare(a, b)
    return timeit(lambda: compare(a, b), number=rounds)


def time_equal(a, b, rounds: int) -> float:
    equal(a, b)
    return timeit(lambda: equal(a, b), number=rounds)


# Numbers: int fast path vs rational fallback

def bench_numbers(rounds: int = 100000) -> tuple[float, float]:
    small = time_compare(Number("12345"), Number("12346"), rounds)
    big = time_compare(Number("123456789012345678901234.5"), Number("1.5e23"), rounds)
    return small, big


# Composite values built from native data once, compared many times

NESTED_ARRAY = [[i, str(i), [i, i + 1]] for i in range(50)]

OBJECT_DOC = {f"key{i}": {"id": i, "tags": ["a", "b", str(i)]} for i in range(50)}

SET_DOC = {f"member{i}" for i in range(100)}


def bench_sort_terms(n: int = 2000, rounds: int = 10) -> float:
    terms = [to_value(x) for x in [i % 7 for i in range(n)] + [str(i) for i in range(n)]]
    return timeit(lambda: sorted_terms(terms), number=rounds)


def _print_pair(name: str, native, rounds: int) -> None:
    a = to_value(native)
    b = to_value(native)
    tcmp = time_compare(a, b, rounds)
    teq = time_equal(a, b, rounds)
    print(f"Benchmark: {name}")
    print(f"  compare: {tcmp:.6f}s  |  equal: {teq:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    small, big = bench_numbers()
    print("Benchmark: number literals")
    print(f"  int64 fast path: {small:.6f}s  |  rational fallback: {big:.6f}s")

    _print_pair("nested arrays (50 rows)", NESTED_ARRAY, rounds=500)
    _print_pair("object of objects (50 keys)", OBJECT_DOC, rounds=100)
    _print_pair("set of strings (100 members)", SET_DOC, rounds=100)

    print("Benchmark: sorted_terms over mixed numbers and strings")
    print(f"  time: {bench_sort_terms():.6f}s")
