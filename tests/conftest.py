import pytest

from matrix import Matrix


@pytest.fixture
def square2() -> Matrix:
    """[[1, 2], [3, 4]]"""
    return Matrix.from_rows([[1, 2], [3, 4]])


@pytest.fixture
def square3() -> Matrix:
    return Matrix.from_rows([[2, -1, 0], [1, 3, 2], [0, 5, -4]])


@pytest.fixture
def square4() -> Matrix:
    return Matrix.from_rows([
        [2, -1, 0, 3],
        [1, 3, 2, 0],
        [0, 5, -4, 1],
        [4, 0, 1, 2],
    ])


@pytest.fixture(params=[1, 2, 3, 4, 5])
def size(request: pytest.FixtureRequest) -> int:
    """Provide the sizes used by the identity and singular-matrix checks."""
    return request.param


def assert_matrix_approx(actual: Matrix, expected: Matrix, abs_tol=1e-9):
    assert actual.shape == expected.shape
    for i, j in actual.indices():
        assert actual[i, j] == pytest.approx(expected[i, j], abs=abs_tol)
