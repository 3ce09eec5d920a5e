import pytest

from clikit.ordering import lexicographic_less


@pytest.mark.parametrize(
    ("a", "b", "expected"),
    [
        ("", "a", True),
        ("a", "", False),
        ("a", "a", False),
        ("a", "A", False),
        ("A", "a", True),
        ("aa", "a", False),
        ("a", "aa", True),
        ("a", "b", True),
        ("a", "B", True),
        ("A", "b", True),
        ("A", "B", True),
    ],
)
def test_lexicographic_less(a, b, expected):
    assert lexicographic_less(a, b) is expected


def test_case_variants_are_ordered_pairwise():
    ordered = ["A", "a", "B", "b"]
    for smaller, larger in zip(ordered, ordered[1:]):
        assert lexicographic_less(smaller, larger) is True
        assert lexicographic_less(larger, smaller) is False