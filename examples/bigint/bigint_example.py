#!usr/bin/env python3

# Examples of arbitrary-precision integer arithmetic.
# Written by the pycalc developers, October 2026.

from pycalc.bigint import BigInt, DivisionByZeroError

a, b = BigInt(123), BigInt('456')
print(f"a = {a}, b = {b}")
print(f"a + b = {a + b}")
print(f"a - b = {a - b}")
print(f"b / 2 = {b / 2}, b % a = {b % a}")
print(f"a ** 3 = {a ** 3}")

# Large factorials with digit grouping.
for n in (10, 25, 50):
    print(f"{n}! = {BigInt(n).factorial().grouped()}")

# Conversion between bases.  Digits of bases above 10 are separated.
x = BigInt(2) ** 64
for base in (2, 8, 16, 256):
    print(f"2^64 in base {base:3d}: {x.rebase(base)}")

# Values in different bases may be mixed freely; the result takes the
# larger base.
y = BigInt(1000, base=2) + BigInt(24, base=16)
print(f"Mixed base sum = {y} (base {y.base}) = {y.to_int()}")

try:
    a / 0
except DivisionByZeroError as e:
    print(f"Error: {e}")
