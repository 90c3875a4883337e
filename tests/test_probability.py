import pytest

from oddscout.probability import similarity, symmetric_similarity


def test_similarity_of_identical_is_zero():
    p = [0.2, 0.3, 0.5]
    assert similarity(p, p) == 0.0


def test_similarity_is_positive_for_different():
    assert similarity([0.9, 0.1], [0.1, 0.9]) > 0


def test_similarity_is_asymmetric():
    p = [0.7, 0.2, 0.1]
    q = [0.3, 0.3, 0.4]
    assert similarity(p, q) != pytest.approx(similarity(q, p))


def test_symmetric_similarity_is_symmetric():
    p = [0.7, 0.2, 0.1]
    q = [0.3, 0.3, 0.4]
    assert symmetric_similarity(p, q) == pytest.approx(symmetric_similarity(q, p))


def test_symmetric_similarity_is_bounded_by_one_bit():
    value = symmetric_similarity([1.0, 0.0], [0.0, 1.0])
    assert 0 < value <= 1.0 + 1e-6


def test_symmetric_similarity_of_identical_is_zero():
    assert symmetric_similarity([0.5, 0.5], [0.5, 0.5]) == pytest.approx(0.0)


def test_length_mismatch_raises():
    with pytest.raises(ValueError):
        similarity([0.5, 0.5], [1.0])
    with pytest.raises(ValueError):
        symmetric_similarity([1.0], [0.5, 0.5])