import pytest

from renderkit.matrix import Matrix4x4


M = Matrix4x4(
    [
        [2.0, 1.0, 0.0, 3.0],
        [1.0, 3.0, 1.0, 0.0],
        [0.0, 1.0, 4.0, 1.0],
        [1.0, 0.0, 2.0, 5.0],
    ]
)

N = Matrix4x4(
    [
        [1.0, -2.0, 0.5, 0.0],
        [0.0, 1.0, 3.0, -1.0],
        [2.0, 0.0, 1.0, 4.0],
        [-1.0, 2.0, 0.0, 1.0],
    ]
)


def flat(matrix):
    return [v for row in matrix for v in row]


def assert_matrix_close(actual, expected, tol=1e-9):
    assert flat(actual) == pytest.approx(flat(expected), abs=tol)


def test_identity_is_multiplicative_neutral():
    assert M * Matrix4x4.identity() == M
    assert Matrix4x4.identity() * M == M


def test_identity_diagonal_and_zero_elsewhere():
    ident = Matrix4x4.identity()
    assert [ident[i][i] for i in range(4)] == [1.0] * 4
    assert sum(flat(ident)) == 4.0


def test_zero_is_additive_neutral():
    assert M + Matrix4x4.zero() == M


def test_add_then_subtract_round_trip():
    assert (M + N) - N == M


def test_negation_cancels():
    assert M + (-M) == Matrix4x4.zero()


def test_transpose_twice_is_original():
    assert M.transpose().transpose() == M


def test_transpose_swaps_entries():
    t = N.transpose()
    assert all(t[i][j] == N[j][i] for i in range(4) for j in range(4))


def test_transpose_of_product_reverses_order():
    assert_matrix_close((M * N).transpose(), N.transpose() * M.transpose())


def test_product_is_associative():
    assert_matrix_close((M * N) * M, M * (N * M))


def test_inverse_gives_identity():
    assert_matrix_close(M * M.inverse(), Matrix4x4.identity())
    assert_matrix_close(M.inverse() * M, Matrix4x4.identity())


def test_inverse_requiring_row_swap():
    perm = Matrix4x4(
        [
            [0.0, 1.0, 0.0, 0.0],
            [0.0, 0.0, 1.0, 0.0],
            [1.0, 0.0, 0.0, 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]
    )
    assert_matrix_close(perm.inverse(), perm.transpose())


def test_inverse_of_inverse_is_original():
    assert_matrix_close(N.inverse().inverse(), N)


def test_singular_matrix_raises():
    with pytest.raises(ValueError):
        Matrix4x4.zero().inverse()


def test_wrong_shape_raises():
    with pytest.raises(ValueError):
        Matrix4x4([[1.0, 2.0], [3.0, 4.0]])


def test_multiply_by_scalar_is_type_error():
    with pytest.raises(TypeError):
        M * 2.0
    assert M * Matrix4x4.identity() == M