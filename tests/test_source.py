import itertools
import random
from collections import Counter
from concurrent.futures import ThreadPoolExecutor

import pytest

from ascii_password import (
    FastSource,
    PasswordPolicy,
    SecureSource,
    generate,
    get_fast_source,
    seed_fast_source,
    source,
)


@pytest.fixture(params=[FastSource, SecureSource])
def rand(request):
    return request.param()


def test_randbelow_range(rand):
    seen = {rand.randbelow(5) for _ in range(500)}

    assert seen == {0, 1, 2, 3, 4}
    assert rand.randbelow(1) == 0


@pytest.mark.parametrize("n", [0, -3])
def test_randbelow_rejects_empty_range(rand, n):
    with pytest.raises(ValueError):
        rand.randbelow(n)


@pytest.mark.parametrize("chars", [[], ["x"], list("password")])
def test_shuffle_keeps_characters(rand, chars):
    shuffled = list(chars)

    rand.shuffle(shuffled)

    assert sorted(shuffled) == sorted(chars)


def test_shuffle_is_uniform():
    rand = FastSource(seed=7)
    counts: Counter[str] = Counter()

    for _ in range(6000):
        chars = list("abc")
        rand.shuffle(chars)
        counts["".join(chars)] += 1

    assert set(counts) == {"".join(p) for p in itertools.permutations("abc")}
    assert all(800 < count < 1200 for count in counts.values())


def test_secure_shuffle_uses_fisher_yates():
    class Recording(SecureSource):
        def __init__(self) -> None:
            self.bounds: list[int] = []

        def randbelow(self, n: int) -> int:
            self.bounds.append(n)
            return 0

    rand = Recording()
    chars = list("abcd")

    rand.shuffle(chars)

    assert rand.bounds == [4, 3, 2]
    assert chars == list("bcda")


def test_fast_source_same_seed_same_stream():
    a, b = FastSource(seed=99), FastSource(seed=99)

    assert [a.randbelow(1000) for _ in range(50)] == [
        b.randbelow(1000) for _ in range(50)
    ]
    assert a.seed == 99


def test_fast_source_default_seed_is_time_based():
    assert isinstance(FastSource().seed, int)


def test_process_wide_source_is_lazy():
    assert source._fast_source is None

    first = get_fast_source()

    assert source._fast_source is first
    assert get_fast_source() is first


def test_seed_fast_source_replaces_instance():
    before = get_fast_source()

    after = seed_fast_source(5)

    assert after is not before
    assert after.seed == 5
    assert get_fast_source() is after


def test_shared_fast_source_across_threads(password_stats):
    policy = PasswordPolicy(
        min_length=40, min_upper=3, min_lower=3, min_number=3, min_symbol=3
    )
    shared = FastSource(seed=3)

    with ThreadPoolExecutor(max_workers=8) as pool:
        passwords = list(pool.map(lambda _: generate(policy, shared), range(200)))

    for password in passwords:
        stats = password_stats(password, policy)
        assert stats.length == 40
        assert stats.other == 0


def test_fast_shuffle_draws_through_randbelow():
    class Recording(FastSource):
        def __init__(self) -> None:
            super().__init__(seed=11)
            self.bounds: list[int] = []

        def randbelow(self, n: int) -> int:
            self.bounds.append(n)
            return super().randbelow(n)

    rand = Recording()
    chars = list("abcde")

    rand.shuffle(chars)

    assert rand.bounds == [5, 4, 3, 2]
    assert sorted(chars) == list("abcde")


def test_fast_shuffle_matches_seeded_stream():
    chars = list("password")
    FastSource(seed=21).shuffle(chars)

    reference = random.Random(21)
    expected = list("password")
    for i in range(len(expected) - 1, 0, -1):
        j = reference.randrange(i + 1)
        expected[i], expected[j] = expected[j], expected[i]

    assert chars == expected
