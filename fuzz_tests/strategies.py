import hypothesis.strategies as st

from equalityset import Equivalence


def modulo(n: int) -> Equivalence:
    return Equivalence(lambda a, b: a % n == b % n, lambda a: a % n)


def class_of(element: int, n: int) -> int:
    return element % n


moduli = st.integers(min_value=1, max_value=7)
elements = st.integers(min_value=-1000, max_value=1000)
element_lists = st.lists(elements, max_size=30)
