import pytest

from ecparams import ecc, field
from ecparams.params import load_params
from ecparams.projective import (
    affine_to_jacobian,
    affine_to_std_projective,
    jacobian_add,
    jacobian_add_affine,
    jacobian_double,
    jacobian_equals,
    jacobian_is_valid,
    jacobian_negate,
    jacobian_to_affine,
    multiply_l2r,
    multiply_naf,
    multiply_r2l,
    std_projective_equals,
    std_projective_is_valid,
    std_projective_negate,
    std_projective_to_affine,
)
from ecparams.types import AffinePoint, CurveParameters, CurveType, ProjectivePoint


@pytest.fixture
def small():
    prime_data = field.make_prime_data(97, 7, False)
    return CurveParameters(
        prime_data=prime_data,
        order_n_data=prime_data,
        h=1,
        param_a=2,
        param_b=3,
        base_point=AffinePoint(3, 6, False),
    )


@pytest.fixture(scope="module")
def p192():
    return load_params(CurveType.SECP192R1)


def test_small_base_point_is_on_curve(small):
    assert ecc.point_is_valid(small.base_point, small)


def test_jacobian_round_trip_small(small):
    jac = affine_to_jacobian(small.base_point, small)
    assert jacobian_is_valid(jac, small)
    assert jacobian_to_affine(jac, small) == small.base_point


def test_jacobian_round_trip_montgomery(p192):
    jac = affine_to_jacobian(p192.base_point, p192)
    assert jacobian_is_valid(jac, p192)
    assert ecc.point_equals(jacobian_to_affine(jac, p192), p192.base_point, p192)


def test_identity_conversions(small):
    jac = affine_to_jacobian(AffinePoint(0, 0, True), small)
    assert jac.identity
    assert jacobian_to_affine(jac, small).identity
    assert jacobian_to_affine(ProjectivePoint(1, 1, 0, False), small).identity


def test_scaled_jacobian_representation(small):
    z = 5
    scaled = ProjectivePoint(3 * z * z % 97, 6 * z ** 3 % 97, z, False)
    assert jacobian_is_valid(scaled, small)
    assert jacobian_equals(scaled, affine_to_jacobian(small.base_point, small), small)
    assert jacobian_to_affine(scaled, small) == small.base_point


def test_off_curve_jacobian_is_invalid(small):
    assert not jacobian_is_valid(ProjectivePoint(1, 1, 1, False), small)


@pytest.mark.parametrize("fixture", ["small", "p192"])
def test_double_and_add_match_affine(fixture, request):
    params = request.getfixturevalue(fixture)
    g = params.base_point
    jac = affine_to_jacobian(g, params)
    doubled = jacobian_double(jac, params)
    assert ecc.point_equals(jacobian_to_affine(doubled, params), ecc.point_double(g, params), params)
    tripled = jacobian_add(jac, doubled, params)
    expected = ecc.point_add(g, ecc.point_double(g, params), params)
    assert ecc.point_equals(jacobian_to_affine(tripled, params), expected, params)
    mixed = jacobian_add_affine(doubled, g, params)
    assert jacobian_equals(mixed, tripled, params)


def test_add_negation_gives_identity(small):
    jac = affine_to_jacobian(small.base_point, small)
    total = jacobian_add(jac, jacobian_negate(jac, small), small)
    assert jacobian_to_affine(total, small).identity


def test_add_with_identity(small):
    jac = affine_to_jacobian(small.base_point, small)
    identity = affine_to_jacobian(AffinePoint(0, 0, True), small)
    assert jacobian_equals(jacobian_add(identity, jac, small), jac, small)
    assert jacobian_equals(jacobian_add(jac, identity, small), jac, small)


@pytest.mark.parametrize("multiply", [multiply_l2r, multiply_r2l, multiply_naf])
@pytest.mark.parametrize("scalar", range(0, 25))
def test_multipliers_match_ladder_small(small, multiply, scalar):
    expected = ecc.protected_multiply(small.base_point, scalar, small)
    result = multiply(small.base_point, scalar, small)
    assert ecc.point_equals(result, expected, small)


@pytest.mark.parametrize("multiply", [multiply_l2r, multiply_r2l, multiply_naf])
def test_multipliers_match_ladder_p192(p192, multiply):
    scalar = 0x1234_5678_9ABC_DEF0_1357_9BDF
    expected = ecc.protected_multiply(p192.base_point, scalar, p192)
    result = multiply(p192.base_point, scalar, p192)
    assert ecc.point_equals(result, expected, p192)
    assert ecc.point_is_valid(result, p192)


@pytest.mark.parametrize("multiply", [multiply_l2r, multiply_r2l, multiply_naf])
def test_order_times_base_is_identity(p192, multiply):
    assert multiply(p192.base_point, p192.order_n_data.prime, p192).identity


@pytest.mark.parametrize("multiply", [multiply_l2r, multiply_r2l, multiply_naf])
def test_negative_scalar_rejected(small, multiply):
    with pytest.raises(ValueError):
        multiply(small.base_point, -1, small)


def test_std_projective_round_trip(small):
    proj = affine_to_std_projective(small.base_point, small)
    assert std_projective_is_valid(proj, small)
    assert std_projective_to_affine(proj, small) == small.base_point


def test_std_projective_scaled(small):
    z = 7
    scaled = ProjectivePoint(3 * z % 97, 6 * z % 97, z, False)
    assert std_projective_is_valid(scaled, small)
    assert std_projective_equals(scaled, affine_to_std_projective(small.base_point, small), small)
    assert std_projective_to_affine(scaled, small) == small.base_point


def test_std_projective_invalid_and_negate(small):
    assert not std_projective_is_valid(ProjectivePoint(1, 1, 1, False), small)
    proj = affine_to_std_projective(small.base_point, small)
    negated = std_projective_to_affine(std_projective_negate(proj, small), small)
    assert ecc.point_equals(negated, ecc.point_negate(small.base_point, small), small)
    assert not std_projective_equals(proj, std_projective_negate(proj, small), small)


def test_std_projective_montgomery_round_trip(p192):
    proj = affine_to_std_projective(p192.base_point, p192)
    assert std_projective_is_valid(proj, p192)
    assert ecc.point_equals(std_projective_to_affine(proj, p192), p192.base_point, p192)