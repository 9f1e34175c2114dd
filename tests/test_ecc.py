import pytest

from ecparams import ecc, field
from ecparams.types import AffinePoint, CurveParameters, CurveType, words_to_int

P256_PRIME = words_to_int(
    [0xFFFFFFFF, 0xFFFFFFFF, 0xFFFFFFFF, 0x00000000, 0x00000000, 0x00000000, 0x00000001, 0xFFFFFFFF]
)
P256_ORDER = words_to_int(
    [0xFC632551, 0xF3B9CAC2, 0xA7179E84, 0xBCE6FAAD, 0xFFFFFFFF, 0xFFFFFFFF, 0x00000000, 0xFFFFFFFF]
)
P256_A = words_to_int(
    [0xFFFFFFFC, 0xFFFFFFFF, 0xFFFFFFFF, 0x00000003, 0x00000000, 0x00000000, 0x00000004, 0xFFFFFFFC]
)
P256_B = words_to_int(
    [0x29C4BDDF, 0xD89CDF62, 0x78843090, 0xACF005CD, 0xF7212ED6, 0xE5A220AB, 0x04874834, 0xDC30061D]
)
P256_BASE_X = words_to_int(
    [0x18A9143C, 0x79E730D4, 0x5FEDB601, 0x75BA95FC, 0x77622510, 0x79FB732B, 0xA53755C6, 0x18905F76]
)
P256_BASE_Y = words_to_int(
    [0xCE95560A, 0xDDF25357, 0xBA19E45C, 0x8B4AB8E4, 0xDD21F325, 0xD2E88688, 0x25885D85, 0x8571FF18]
)


@pytest.fixture(scope="module")
def p256():
    return CurveParameters(
        prime_data=field.make_prime_data(P256_PRIME, 256, True),
        order_n_data=field.make_prime_data(P256_ORDER, 256, False),
        h=1,
        param_a=P256_A,
        param_b=P256_B,
        base_point=AffinePoint(P256_BASE_X, P256_BASE_Y, False),
        curve_type=CurveType.SECP256R1,
    )


@pytest.fixture(scope="module")
def toy():
    # y^2 = x^3 + 2x + 3 over GF(97), plain representation
    return CurveParameters(
        prime_data=field.make_prime_data(97, 7, False),
        order_n_data=field.make_prime_data(101, 7, False),
        h=1,
        param_a=2,
        param_b=3,
        base_point=AffinePoint(3, 6, False),
    )


def test_base_point_is_valid(p256, toy):
    assert ecc.point_is_valid(p256.base_point, p256)
    assert ecc.point_is_valid(toy.base_point, toy)


def test_off_curve_point_is_invalid(p256):
    bad = AffinePoint(P256_BASE_X, (P256_BASE_Y + 1) % P256_PRIME, False)
    assert not ecc.point_is_valid(bad, p256)


def test_identity_is_valid(p256):
    assert ecc.point_is_valid(AffinePoint(identity=True), p256)


def test_double_matches_known_value(p256):
    doubled = ecc.point_double(p256.base_point, p256)
    pd = p256.prime_data
    assert field.from_montgomery(doubled.x, pd) == (
        0x7CF27B188D034F7E8A52380304B51AC3C08969E277F21B35A60B48FC47669978
    )
    assert field.from_montgomery(doubled.y, pd) == (
        0x07775510DB8ED040293D9AC69F7430DBBA7DADE63CE982299E04B79D227873D1
    )


def test_add_to_self_equals_double(p256):
    g = p256.base_point
    assert ecc.point_equals(ecc.point_add(g, g, p256), ecc.point_double(g, p256), p256)


def test_add_negation_gives_identity(p256):
    g = p256.base_point
    assert ecc.point_add(g, ecc.point_negate(g, p256), p256).identity


def test_subtract_undoes_add(p256):
    g = p256.base_point
    two_g = ecc.point_double(g, p256)
    three_g = ecc.point_add(two_g, g, p256)
    assert ecc.point_is_valid(three_g, p256)
    assert ecc.point_equals(ecc.point_subtract(three_g, g, p256), two_g, p256)


def test_identity_is_neutral(p256):
    g = p256.base_point
    identity = AffinePoint(identity=True)
    assert ecc.point_equals(ecc.point_add(identity, g, p256), g, p256)
    assert ecc.point_equals(ecc.point_add(g, identity, p256), g, p256)
    assert ecc.point_negate(identity, p256).identity


def test_equals_distinguishes_identity(p256):
    assert not ecc.point_equals(AffinePoint(identity=True), p256.base_point, p256)


def test_multiply_small_scalars(p256):
    g = p256.base_point
    assert ecc.protected_multiply(g, 0, p256).identity
    assert ecc.point_equals(ecc.protected_multiply(g, 1, p256), g, p256)
    assert ecc.point_equals(ecc.protected_multiply(g, 2, p256), ecc.point_double(g, p256), p256)


def test_multiply_by_order_is_identity(p256):
    assert ecc.protected_multiply(p256.base_point, P256_ORDER, p256).identity


def test_multiply_by_order_minus_one_is_negation(p256):
    g = p256.base_point
    result = ecc.protected_multiply(g, P256_ORDER - 1, p256)
    assert ecc.point_equals(result, ecc.point_negate(g, p256), p256)


def test_multiply_is_additive(p256):
    g = p256.base_point
    k1, k2 = 0x1234567890ABCDEF, 0xFEDCBA0987654321
    combined = ecc.point_add(
        ecc.protected_multiply(g, k1, p256), ecc.protected_multiply(g, k2, p256), p256
    )
    direct = ecc.protected_multiply(g, k1 + k2, p256)
    assert ecc.point_is_valid(direct, p256)
    assert ecc.point_equals(combined, direct, p256)


def test_generic_multiply_agrees_with_protected(p256, toy):
    assert ecc.point_equals(
        ecc.generic_multiply(p256.base_point, 12345, p256),
        ecc.protected_multiply(p256.base_point, 12345, p256),
        p256,
    )
    for k in range(1, 20):
        assert ecc.point_equals(
            ecc.generic_multiply(toy.base_point, k, toy),
            ecc.protected_multiply(toy.base_point, k, toy),
            toy,
        )


def test_generic_multiply_uses_configured_function(toy):
    params = CurveParameters(
        prime_data=toy.prime_data,
        order_n_data=toy.order_n_data,
        h=1,
        param_a=2,
        param_b=3,
        base_point=toy.base_point,
        eccp_mul=lambda point, scalar, p: AffinePoint(identity=True),
    )
    assert ecc.generic_multiply(toy.base_point, 5, params).identity


def test_toy_multiples_stay_on_curve(toy):
    for k in range(1, 30):
        assert ecc.point_is_valid(ecc.protected_multiply(toy.base_point, k, toy), toy)


def test_negative_scalar_raises(p256):
    with pytest.raises(ValueError):
        ecc.protected_multiply(p256.base_point, -1, p256)