import pytest

from services.matching.similarity import jaccard_similarity

SKILL_SETS = [
    (["java", "sql"], ["java", "sql"]),
    (["python"], ["java"]),
    (["python", "sql", "react"], ["sql", "react", "docker", "aws"]),
    ([], ["python"]),
    ([], []),
    (["React", " node.js "], ["react"]),
]


def test_identical_sets():
    assert jaccard_similarity(["Java", "SQL"], ["java", " sql "]) == 1.0


def test_disjoint_sets():
    assert jaccard_similarity(["Java", "SQL"], ["Python", "Go"]) == 0.0


def test_partial_overlap():
    # {a, b} vs {b, c}: 1 shared out of 3
    assert jaccard_similarity(["a", "b"], ["b", "c"]) == pytest.approx(1 / 3)


def test_empty_side_is_zero():
    assert jaccard_similarity([], ["python"]) == 0.0
    assert jaccard_similarity(["python"], []) == 0.0
    assert jaccard_similarity([], []) == 0.0


def test_duplicates_do_not_inflate():
    assert jaccard_similarity(["python", "Python", "PYTHON"], ["python"]) == 1.0


@pytest.mark.parametrize("a, b", SKILL_SETS)
def test_symmetric_and_bounded(a, b):
    forward = jaccard_similarity(a, b)
    assert forward == jaccard_similarity(b, a)
    assert 0.0 <= forward <= 1.0
