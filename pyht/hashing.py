from typing import Iterator


# both larger than the ASCII alphabet
PRIME_1 = 151
PRIME_2 = 163


def hash_string(s: str, a: int, m: int) -> int:
    # s read as a base-a number, reduced after every digit
    hash = 0
    for c in s:
        hash = (hash * a + ord(c)) % m
    return hash


def get_hash(s: str, num_buckets: int, attempt: int) -> int:
    hash_a = hash_string(s, PRIME_1, num_buckets)
    hash_b = hash_string(s, PRIME_2, num_buckets)
    return (hash_a + attempt * _step(hash_b, num_buckets)) % num_buckets


def _step(hash_b: int, num_buckets: int) -> int:
    # hash_b + 1, except that hash_b == num_buckets - 1 must not wrap to 0
    if num_buckets == 1:
        return 1
    return hash_b % (num_buckets - 1) + 1


def probe(s: str, num_buckets: int) -> Iterator[int]:
    # same indices as get_hash for attempt in range(num_buckets)
    hash_a = hash_string(s, PRIME_1, num_buckets)
    step = _step(hash_string(s, PRIME_2, num_buckets), num_buckets)
    for attempt in range(num_buckets):
        yield (hash_a + attempt * step) % num_buckets
