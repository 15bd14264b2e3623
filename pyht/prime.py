import enum
import math


class Primality(enum.Enum):
    PRIME = enum.auto()
    NOT_PRIME = enum.auto()
    UNDEFINED = enum.auto()


def is_prime(x: int) -> Primality:
    if x < 2:
        return Primality.UNDEFINED
    if x < 4:
        return Primality.PRIME
    if x % 2 == 0:
        return Primality.NOT_PRIME

    for i in range(3, math.isqrt(x) + 1, 2):
        if x % i == 0:
            return Primality.NOT_PRIME
    return Primality.PRIME


def next_prime(x: int) -> int:
    while is_prime(x) != Primality.PRIME:
        x += 1
    return x
