"""
평가 도메인 (Evaluation Domain)
================================

FR*의 곱셈 부분군 H = {1, ω, ω², ..., ω^(n-1)} 을 나타낸다.
공개 벡터의 j번째 원소는 점 ω^j 에서의 C(x) 값으로 인코딩된다.

크기는 요청한 최소 크기 이상의 가장 작은 2의 거듭제곱이다.
bn128 스칼라 필드는 2^28 까지만 지원하므로 그보다 크면 설정 오류이다.

사용 예시:
    >>> domain = EvaluationDomain(102)
    >>> domain.size  # 128
    >>> C = domain.interpolate(entries)
    >>> C.evaluate(domain.element(47)) == entries[47]  # True
"""

from zkmember.errors import ConfigurationError, PreconditionError
from zkmember.field import FR, TWO_ADICITY, get_root_of_unity
from zkmember.polynomial import Polynomial, fft, ifft


class EvaluationDomain:
    """radix-2 평가 도메인.

    속성:
        size: 도메인 크기 (2의 거듭제곱)
        omega: size차 원시 단위근
    """

    __slots__ = ("size", "omega")

    def __init__(self, min_size):
        if min_size < 1:
            raise ConfigurationError(f"도메인 크기는 1 이상이어야 합니다: {min_size}")
        size = 1
        while size < min_size:
            size <<= 1
        if size > (1 << TWO_ADICITY):
            raise ConfigurationError(
                f"크기 {min_size} 이상의 곱셈 부분군이 없습니다 "
                f"(최대 2^{TWO_ADICITY})"
            )
        self.size = size
        self.omega = get_root_of_unity(size)

    def __repr__(self):
        return f"EvaluationDomain(size={self.size})"

    def element(self, i):
        """i번째 도메인 원소 ω^i. i는 size로 축소된다."""
        return self.omega ** (i % self.size)

    def elements(self):
        result = []
        current = FR(1)
        for _ in range(self.size):
            result.append(current)
            current = current * self.omega
        return result

    def _pad(self, values):
        values = [v if isinstance(v, FR) else FR(v) for v in values]
        if len(values) > self.size:
            raise PreconditionError(
                f"값 {len(values)}개는 도메인 크기 {self.size}를 초과합니다"
            )
        return values + [FR(0)] * (self.size - len(values))

    def fft(self, coeffs):
        """계수 → 도메인 위 평가값. 부족한 계수는 0으로 채운다."""
        return fft(self._pad(coeffs), self.omega)

    def ifft(self, evals):
        """도메인 위 평가값 → 계수. 부족한 평가값은 0으로 채운다."""
        return ifft(self._pad(evals), self.omega)

    def interpolate(self, evals):
        """C(ω^j) = evals[j] 인 차수 < size 의 유일한 다항식."""
        return Polynomial(self.ifft(evals))

    def vanishing_polynomial(self):
        """Z_H(x) = x^size - 1."""
        coeffs = [FR(0)] * (self.size + 1)
        coeffs[0] = FR(0) - FR(1)
        coeffs[self.size] = FR(1)
        return Polynomial(coeffs)
