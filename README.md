# ecparams

Elliptic curve arithmetic over prime fields, written for learning,
experimenting and testing rather than for protecting real secrets.

It covers:

- the standard SEC 2 curves `secp192r1`, `secp224r1`, `secp256r1`,
  `secp384r1` and `secp521r1`, loaded by name or by `CurveType`
  (`ecparams.params`);
- the core data types: `PrimeData`, `AffinePoint`, `ProjectivePoint`,
  `CurveParameters`, `EcdsaSignature` and `CurveType`, plus conversions
  between Python integers and little-endian 32-bit word lists
  (`ecparams.types`);
- fixed-width big integers kept as word lists, with add, subtract, shifts,
  compare, multiply, divide, bit and byte access and hex parsing
  (`ecparams.bigint`), and mask-based select, swap and compare helpers
  (`ecparams.constant_time`);
- arithmetic in GF(p), including Montgomery multiplication, exponentiation
  and inversion, and binary extended Euclidean inversion (`ecparams.field`);
- affine point arithmetic and a fixed-length Montgomery ladder
  (`ecparams.ecc`);
- Jacobian and standard projective points, with left-to-right,
  right-to-left and NAF scalar multiplication (`ecparams.projective`);
- lenient parsing of decimal and hex input (`ecparams.parse`) and
  formatting of words, bytes and points for display (`ecparams.output`).

## Installation

```
pip install .
```

Python 3.10 or later is needed, and nothing outside the standard library.

## Loading a curve

```python
from ecparams.params import curve_type_from_name, load_params
from ecparams.ecc import point_is_valid

curve = curve_type_from_name("secp256r1")
params = load_params(curve)

assert point_is_valid(params.base_point, params)
```

`curve_type_from_name` returns a `CurveType`; a name it does not know gives
`CurveType.UNKNOWN`. `load_params` raises `ValueError` for a curve type that
has no built-in constants, such as `UNKNOWN` or `CUSTOM`.

For every named curve, arithmetic modulo the field prime is done in the
Montgomery domain, so the curve coefficients and the base point coordinates
in the loaded parameters are in Montgomery form.

## Scalar multiplication

Field elements and scalars are Python integers.

```python
from ecparams.ecc import point_double, point_equals, protected_multiply
from ecparams.projective import multiply_naf

two_g = protected_multiply(params.base_point, 2, params)
assert point_equals(two_g, point_double(params.base_point, params), params)

five_g = multiply_naf(params.base_point, 5, params)
assert point_equals(five_g, protected_multiply(params.base_point, 5, params), params)
```

`ecparams.types.int_to_words` and `words_to_int` convert between integers
and the little-endian 32-bit word lists that `ecparams.bigint` and
`ecparams.constant_time` work on.

## Field arithmetic

```python
from ecparams import field

prime_data = field.make_prime_data(23, 5, montgomery_domain=True)
a = field.to_montgomery(7, prime_data)
b = field.to_montgomery(5, prime_data)
product = field.from_montgomery(field.mont_multiply(a, b, prime_data), prime_data)
assert product == (7 * 5) % 23
```

## Display

```python
from ecparams.output import format_affine_point

print(format_affine_point(params.base_point, params))
```

This prints the x and y coordinates in normal (not Montgomery) form, as
hex words, most significant word first.

## What this package does not do

There is no random number or key generation, no hashing, no key agreement
or signature protocol (the `EcdsaSignature` type is only a container), and
no command-line tool or benchmark. The package is a library of curve
parameters and arithmetic only.