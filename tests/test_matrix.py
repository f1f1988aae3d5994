import io
import random

import pytest

from pcmatrix.matrix import Matrix, display_matrix


def identity(n):
    return Matrix(n, n, [[1 if i == j else 0 for j in range(n)] for i in range(n)])


def test_generate_mode_zero_values_in_range():
    m = Matrix.generate(6, 7, 0, random.Random(1))
    assert (m.rows, m.cols) == (6, 7)
    assert all(1 <= v <= 10 for row in m.cells for v in row)


def test_generate_fixed_mode_is_all_ones():
    m = Matrix.generate(3, 4, 2, random.Random(1))
    assert m.cells == [[1] * 4 for _ in range(3)]
    assert m.total() == 3 * 4


def test_generate_is_reproducible_with_seed():
    a = Matrix.generate(4, 4, 0, random.Random(42))
    b = Matrix.generate(4, 4, 0, random.Random(42))
    assert a == b


def test_random_mode_zero_dimensions():
    rng = random.Random(7)
    for _ in range(50):
        m = Matrix.random(0, rng)
        assert 1 <= m.rows <= 4
        assert 1 <= m.cols <= 4


def test_random_fixed_mode_is_square():
    m = Matrix.random(3, random.Random(0))
    assert (m.rows, m.cols) == (3, 3)
    assert m.total() == 9


def test_by_size_announces():
    out = io.StringIO()
    m = Matrix.by_size(2, 3, 0, random.Random(0), out)
    assert out.getvalue() == "Generate random matrix (RxC) = (2x3)\n"
    assert (m.rows, m.cols) == (2, 3)


def test_multiply_incompatible_returns_none():
    out = io.StringIO()
    a = Matrix.generate(2, 3, 1)
    b = Matrix.generate(2, 3, 1)
    assert a.multiply(b, out) is None
    assert out.getvalue() == ""


def test_multiply_by_identity():
    out = io.StringIO()
    a = Matrix.generate(3, 3, 0, random.Random(5))
    assert a.multiply(identity(3), out) == a
    assert identity(3).multiply(a, out) == a


def test_multiply_announces_shapes():
    out = io.StringIO()
    a = Matrix.generate(2, 3, 1)
    b = Matrix.generate(3, 4, 1)
    product = a.multiply(b, out)
    assert out.getvalue() == "MULTIPLY (2 x 3) BY (3 x 4):\n"
    assert (product.rows, product.cols) == (2, 4)
    assert product.cells == [[3] * 4 for _ in range(2)]


def test_multiply_known_values():
    a = Matrix(2, 2, [[1, 2], [3, 4]])
    b = Matrix(2, 2, [[5, 6], [7, 8]])
    assert a.multiply(b, io.StringIO()).cells == [[19, 22], [43, 50]]


def test_total_matches_sum_of_cells():
    m = Matrix.generate(4, 3, 0, random.Random(3))
    assert m.total() == sum(v for row in m.cells for v in row)


def test_average_truncates():
    out = io.StringIO()
    m = Matrix(1, 2, [[1, 2]])
    assert m.average(out) == 1
    assert out.getvalue() == "x=3 ele=2\n"


def test_average_of_empty_raises():
    with pytest.raises(ValueError):
        Matrix(0, 0).average(io.StringIO())


def test_inconsistent_cells_rejected():
    with pytest.raises(ValueError):
        Matrix(2, 2, [[1, 2], [3]])


def test_render_format():
    m = Matrix(2, 2, [[1, 2], [10, 100]])
    assert m.render() == "|  1   2|\n| 10 100|\n"


def test_display_matrix_writes_render():
    out = io.StringIO()
    m = Matrix.generate(3, 2, 0, random.Random(9))
    display_matrix(m, out)
    assert out.getvalue() == m.render()
    assert out.getvalue().count("\n") == 3


def test_display_none(capsys):
    display_matrix(None, io.StringIO())
    assert capsys.readouterr().out == "DisplayMatrix: EMPTY matrix\n"