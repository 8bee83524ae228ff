import pytest

from tplib.operations import add, divide, factorial, multiply, subtract


@pytest.mark.parametrize("a, b", [(1.5, 2.25), (-4.0, 10.0), (0.0, 7.5), (1e6, -3.0)])
def test_add_is_commutative(a, b):
    assert add(a, b) == add(b, a)


@pytest.mark.parametrize("a", [0.0, 3.5, -8.0, 1234.0])
def test_add_zero_is_identity(a):
    assert add(a, 0.0) == a


@pytest.mark.parametrize("a, b", [(10.0, 4.0), (-2.5, 0.5), (100.0, 100.0)])
def test_subtract_undoes_add(a, b):
    assert subtract(add(a, b), b) == a


def test_subtract_self_is_zero():
    assert subtract(42.5, 42.5) == 0.0


def test_subtract_pinned_value():
    assert subtract(2.0, 5.0) == -3.0


@pytest.mark.parametrize("a, b", [(3.0, 4.0), (-2.0, 8.0), (0.5, 0.25)])
def test_multiply_is_commutative(a, b):
    assert multiply(a, b) == multiply(b, a)


@pytest.mark.parametrize("a", [7.0, -3.0, 0.0])
def test_multiply_by_one_is_identity(a):
    assert multiply(a, 1.0) == a


@pytest.mark.parametrize("a, b", [(12.0, 4.0), (-9.0, 3.0), (5.0, 0.5)])
def test_divide_undoes_multiply(a, b):
    assert divide(multiply(a, b), b) == a


def test_divide_self_is_one():
    assert divide(17.0, 17.0) == 1.0


@pytest.mark.parametrize("a", [1.0, 0.0, -5.0])
def test_divide_by_zero_raises(a):
    with pytest.raises(ZeroDivisionError):
        divide(a, 0)


def test_factorial_of_zero_and_one():
    assert factorial(0) == factorial(1) == 1.0


def test_factorial_pinned_value():
    assert factorial(5) == 120.0


@pytest.mark.parametrize("n", range(1, 21))
def test_factorial_recurrence(n):
    assert factorial(n) == n * factorial(n - 1)


def test_factorial_upper_bound_is_allowed():
    assert factorial(20) == 20 * factorial(19)


@pytest.mark.parametrize("n", [3.5, 7.9, 0.4])
def test_factorial_of_fraction_uses_whole_part(n):
    assert factorial(n) == factorial(int(n))


@pytest.mark.parametrize("n", [-1, -0.5, -20])
def test_factorial_negative_raises(n):
    with pytest.raises(ValueError):
        factorial(n)


@pytest.mark.parametrize("n", [21, 20.5, 100])
def test_factorial_too_large_raises(n):
    with pytest.raises(OverflowError):
        factorial(n)