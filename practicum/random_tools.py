"""Deterministic random numbers, test data generation and small test helpers."""

from __future__ import annotations

import math
import time
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Any, List, MutableSequence, Union

try:
    import resource as _resource
except ImportError:  # pragma: no cover - platforms without getrusage
    _resource = None

_MASK32 = 0xFFFFFFFF


class Mt19937:
    """The 32-bit Mersenne Twister generator."""

    min = 0
    max = _MASK32

    _N = 624
    _M = 397
    _MATRIX_A = 0x9908B0DF
    _UPPER = 0x80000000
    _LOWER = 0x7FFFFFFF

    def __init__(self, seed: int = 5489) -> None:
        state = [seed & _MASK32]
        for i in range(1, self._N):
            previous = state[-1]
            state.append((1812433253 * (previous ^ (previous >> 30)) + i) & _MASK32)
        self._state = state
        self._index = self._N

    def _twist(self) -> None:
        state = self._state
        n, m = self._N, self._M
        for i in range(n):
            y = (state[i] & self._UPPER) | (state[(i + 1) % n] & self._LOWER)
            value = state[(i + m) % n] ^ (y >> 1)
            if y & 1:
                value ^= self._MATRIX_A
            state[i] = value
        self._index = 0

    def __call__(self) -> int:
        """Next 32-bit output."""
        if self._index >= self._N:
            self._twist()
        y = self._state[self._index]
        self._index += 1
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y & _MASK32


def _multiply_shift(gen: Any, span: int, bits: int) -> int:
    """Unbiased value in [0, span) by widening multiplication with rejection."""
    mask = (1 << bits) - 1
    product = gen() * span
    low = product & mask
    if low < span:
        threshold = ((1 << bits) - span) % span
        while low < threshold:
            product = gen() * span
            low = product & mask
    return product >> bits


class UniformIntDistribution:
    """Integers spread evenly over the closed range [a, b]."""

    def __init__(self, a: int = 0, b: int = 2**31 - 1) -> None:
        if a > b:
            raise ValueError(f"empty range [{a}, {b}]")
        self.a = a
        self.b = b

    def __call__(self, gen: Any) -> int:
        """Draw one value using ``gen``."""
        return self._sample(gen, self.a, self.b)

    def _sample(self, gen: Any, a: int, b: int) -> int:
        gen_min, gen_max = gen.min, gen.max
        rng_range = gen_max - gen_min
        urange = b - a

        if rng_range > urange:
            uerange = urange + 1
            if rng_range == 2**64 - 1:
                ret = _multiply_shift(gen, uerange, 64)
            elif rng_range == 2**32 - 1:
                ret = _multiply_shift(gen, uerange, 32)
            else:
                scaling = rng_range // uerange
                past = uerange * scaling
                ret = gen() - gen_min
                while ret >= past:
                    ret = gen() - gen_min
                ret //= scaling
        elif rng_range < urange:
            block = rng_range + 1
            while True:
                base = block * self._sample(gen, 0, urange // block)
                ret = base + (gen() - gen_min)
                if ret <= urange:
                    break
        else:
            ret = gen() - gen_min

        return ret + a


class UniformRealDistribution:
    """Floats spread evenly over the half-open range [a, b)."""

    _DIGITS = 53

    def __init__(self, a: float = 0.0, b: float = 1.0) -> None:
        self.a = float(a)
        self.b = float(b)

    def __call__(self, gen: Any) -> float:
        """Draw one value using ``gen``."""
        return self._canonical(gen) * (self.b - self.a) + self.a

    @classmethod
    def _canonical(cls, gen: Any) -> float:
        span = float(gen.max) - float(gen.min) + 1.0
        log2r = int(math.log2(span))
        rounds = max(1, (cls._DIGITS + log2r - 1) // log2r)
        total = 0.0
        scale = 1.0
        for _ in range(rounds):
            total += float(gen() - gen.min) * scale
            scale *= span
        ret = total / scale
        if ret >= 1.0:
            return math.nextafter(1.0, 0.0)
        return ret


class RandomGenerator:
    """Reproducible generator of test data built on Mt19937."""

    def __init__(self, seed: int = 738_547_485) -> None:
        self._gen = Mt19937(seed)

    def gen_integral_list(self, count: int, low: int, high: int) -> List[int]:
        """``count`` integers from [low, high]."""
        dist = UniformIntDistribution(low, high)
        return [dist(self._gen) for _ in range(count)]

    def gen_string(self, count: int, low: str = "a", high: str = "z") -> str:
        """A string of ``count`` characters from [low, high]."""
        dist = UniformIntDistribution(ord(low), ord(high))
        return "".join(chr(dist(self._gen)) for _ in range(count))

    def gen_real_list(self, count: int, low: float, high: float) -> List[float]:
        """``count`` floats from [low, high)."""
        dist = UniformRealDistribution(low, high)
        return [dist(self._gen) for _ in range(count)]

    def gen_permutation(self, count: int) -> List[int]:
        """A random ordering of 0 .. count - 1."""
        result = list(range(count))
        self.shuffle(result)
        return result

    def gen_int(self, low: int, high: int) -> int:
        """One integer from [low, high]."""
        return UniformIntDistribution(low, high)(self._gen)

    def gen_char(self, low: str = "a", high: str = "z") -> str:
        """One character from [low, high]."""
        return chr(UniformIntDistribution(ord(low), ord(high))(self._gen))

    def shuffle(self, items: MutableSequence[Any]) -> None:
        """Shuffle a mutable sequence in place."""
        dist = UniformIntDistribution(0, 0)
        for i in range(1, len(items)):
            j = dist._sample(self._gen, 0, i)
            items[i], items[j] = items[j], items[i]


def get_file_dir(file: Union[str, PathLike]) -> Path:
    """Directory of an existing file given by an absolute path."""
    path = Path(file)
    if path.is_absolute() and path.is_file():
        return path.parent
    raise ValueError("Bad file name")


def _cpu_time() -> float:
    if _resource is not None:
        return _resource.getrusage(_resource.RUSAGE_SELF).ru_utime
    return time.process_time()


@dataclass(frozen=True)
class Times:
    """Elapsed wall-clock and user CPU time, in seconds."""

    wall_time: float
    cpu_time: float


class Timer:
    """Measures time passed since the timer was created."""

    def __init__(self) -> None:
        self._wall_start = time.monotonic()
        self._cpu_start = _cpu_time()

    def times(self) -> Times:
        """Wall-clock and CPU time elapsed so far."""
        return Times(time.monotonic() - self._wall_start, _cpu_time() - self._cpu_start)