from hypothesis import given

from equalityset import EquivalenceSet

from .strategies import class_of, element_lists, elements, moduli, modulo


@given(moduli, element_lists)
def test_size_counts_equivalence_classes(n, xs):
    actual = EquivalenceSet.from_equivalence(modulo(n), xs)
    assert actual.size() == len({class_of(x, n) for x in xs})


@given(moduli, element_lists)
def test_first_element_of_each_class_is_representative(n, xs):
    expected = {}
    for x in xs:
        expected.setdefault(class_of(x, n), x)

    actual = EquivalenceSet.from_equivalence(modulo(n), xs)
    assert actual.to_list() == list(expected.values())


@given(moduli, element_lists, elements, elements)
def test_equivalent_add_is_rejected(n, xs, a, b):
    actual = EquivalenceSet.from_equivalence(modulo(n), xs)
    actual.add(a)
    size = actual.size()

    b = b - class_of(b, n) + class_of(a, n)
    assert not actual.add(b)
    assert actual.size() == size


@given(moduli, element_lists, elements)
def test_add_then_contains(n, xs, a):
    actual = EquivalenceSet.from_equivalence(modulo(n), xs)
    actual.add(a)
    assert a in actual


@given(moduli, element_lists, elements)
def test_remove_then_not_contains(n, xs, a):
    actual = EquivalenceSet.from_equivalence(modulo(n), xs)
    was_present = a in actual
    assert actual.remove(a) == was_present
    assert a not in actual


@given(moduli, element_lists)
def test_iteration_yields_every_element_once(n, xs):
    actual = EquivalenceSet.from_equivalence(modulo(n), xs)
    iterated = list(actual)
    assert len(iterated) == actual.size()
    assert actual.contains_all(iterated)


@given(moduli, element_lists)
def test_retain_all_of_current_elements_changes_nothing(n, xs):
    actual = EquivalenceSet.from_equivalence(modulo(n), xs)
    before = actual.to_list()
    assert not actual.retain_all(before)
    assert actual.to_list() == before


@given(moduli, element_lists, element_lists)
def test_add_all_reports_change(n, xs, ys):
    actual = EquivalenceSet.from_equivalence(modulo(n), xs)
    size = actual.size()
    changed = actual.add_all(ys)
    assert changed == (actual.size() > size)
    assert actual.contains_all(ys)
