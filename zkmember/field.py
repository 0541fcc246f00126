"""
기반 모듈: 스칼라 필드 FR, 타원곡선 그룹 G1/G2, 페어링
======================================================

멤버십 증명 프로토콜 전체에서 사용되는 기본 대수 연산을 정의한다.

**유한체 FR**:
  bn128 타원곡선의 스칼라 필드. 벡터의 원소, 블라인딩 스칼라,
  다항식 계수가 모두 FR 원소이다.
  - p - 1 = 2^28 × m (m은 홀수) → 최대 2^28 크기의 평가 도메인 지원

**그룹 연산**:
  Pedersen 커밋먼트(G1), 인덱스 선택자 커밋먼트(G2), KZG 커밋먼트(G1)와
  검증 페어링 e(G1, G2) → GT 에 사용된다.

사용 예시:
    >>> from zkmember.field import FR, G1, ec_mul
    >>> a = FR(3) * FR(7)   # FR(21)
    >>> P = ec_mul(G1, 5)   # 5·G1
"""

import hashlib
import secrets

from py_ecc.fields import bn128_FQ as FQ
from py_ecc import bn128


# ─────────────────────────────────────────────────────────────────────
# 유한체(Finite Field) FR
# ─────────────────────────────────────────────────────────────────────

class FR(FQ):
    """bn128 스칼라 필드 위의 유한체 원소.

    py_ecc의 FQ를 상속하여 +, -, *, /, ** 연산을 그대로 사용한다.

    예시:
        >>> FR(1) / FR(3)   # 3의 모듈러 역원
    """
    field_modulus = bn128.curve_order


CURVE_ORDER = bn128.curve_order

# FR* 의 2-adicity: 지원 가능한 최대 radix-2 도메인은 2^28
TWO_ADICITY = 28


# ─────────────────────────────────────────────────────────────────────
# 타원곡선 상수 및 연산
# ─────────────────────────────────────────────────────────────────────

G1 = bn128.G1
G2 = bn128.G2

# 무한원점 (항등원). py_ecc는 None으로 표현한다.
Z1 = None


def ec_mul(point, scalar):
    """타원곡선 스칼라 곱셈: scalar · point.

    Args:
        point: G1 또는 G2 위의 점
        scalar: 정수 또는 FR 원소 (음수는 위수로 축소)

    Returns:
        scalar · point
    """
    if point is None:
        return None
    if isinstance(scalar, FR):
        scalar = int(scalar)
    return bn128.multiply(point, scalar % CURVE_ORDER)


def ec_add(p1, p2):
    """타원곡선 점 덧셈: p1 + p2."""
    return bn128.add(p1, p2)


def ec_neg(point):
    """타원곡선 점의 역원: -point."""
    return bn128.neg(point)


def ec_sub(p1, p2):
    """타원곡선 점 뺄셈: p1 - p2."""
    return bn128.add(p1, bn128.neg(p2))


def ec_pairing(g2_point, g1_point):
    """쌍선형 페어링 e(P, Q) → GT.

    주의:
        py_ecc.bn128.pairing의 인자 순서는 (G2, G1)이다.
        어느 한쪽이 무한원점이면 GT의 항등원을 반환한다.
    """
    if g2_point is None or g1_point is None:
        return bn128.FQ12.one()
    return bn128.pairing(g2_point, g1_point)


def is_g1_point(point):
    """G1 곡선 위의 점(또는 무한원점)인지 확인한다."""
    if point is None:
        return True
    if not (isinstance(point, tuple) and len(point) == 2):
        return False
    if not all(type(c) is bn128.FQ for c in point):
        return False
    return bn128.is_on_curve(point, bn128.b)


def is_g2_point(point):
    """G2 (twist) 곡선 위에 있고 위수 r인 부분군에 속하는 점(또는 무한원점)인지 확인한다.

    twist 곡선은 cofactor가 1이 아니므로 곡선 방정식만으로는 부족하다.
    r·P 가 무한원점인지 함께 검사한다. (G1은 cofactor가 1이다.)
    """
    if point is None:
        return True
    if not (isinstance(point, tuple) and len(point) == 2):
        return False
    if not all(type(c) is bn128.FQ2 for c in point):
        return False
    if not bn128.is_on_curve(point, bn128.b2):
        return False
    return bn128.multiply(point, CURVE_ORDER) is None


# ─────────────────────────────────────────────────────────────────────
# 난수
# ─────────────────────────────────────────────────────────────────────

def random_fr():
    """균등 분포의 FR 원소를 샘플링한다 (0 포함)."""
    return FR(secrets.randbelow(CURVE_ORDER))


def random_nonzero_fr():
    """0이 아닌 균등 분포의 FR 원소를 샘플링한다."""
    return FR(secrets.randbelow(CURVE_ORDER - 1) + 1)


def fr_from_seed(seed, label):
    """시드와 레이블에서 0이 아닌 FR 원소를 결정론적으로 도출한다 (테스트용)."""
    digest = hashlib.sha256(label + str(seed).encode()).digest()
    return FR(int.from_bytes(digest, "big") % (CURVE_ORDER - 1) + 1)


def random_g1():
    """이산로그를 알 수 없는 독립적인 G1 점을 샘플링한다.

    Pedersen 커밋먼트의 두 번째 기저 h로 사용된다.
    """
    return ec_mul(G1, random_nonzero_fr())


# ─────────────────────────────────────────────────────────────────────
# 단위근 (Roots of Unity)
# ─────────────────────────────────────────────────────────────────────

def get_root_of_unity(n):
    """n차 원시 단위근 ω를 반환한다.

    생성자 g = FR(5)에 대해 ω = g^((p-1)/n) 이다.

    Args:
        n: 2의 거듭제곱, 2^28 이하

    Raises:
        ValueError: n이 2의 거듭제곱이 아니거나 2^28을 초과할 때
    """
    if n < 1 or (n & (n - 1)) != 0:
        raise ValueError(f"n은 2의 거듭제곱이어야 합니다: {n}")
    if n > (1 << TWO_ADICITY):
        raise ValueError(f"n은 2^{TWO_ADICITY} 이하여야 합니다: {n}")
    if n == 1:
        return FR(1)

    g = FR(5)
    return g ** ((CURVE_ORDER - 1) // n)


def get_roots_of_unity(n):
    """[1, ω, ω², ..., ω^(n-1)] 을 반환한다."""
    omega = get_root_of_unity(n)
    roots = []
    current = FR(1)
    for _ in range(n):
        roots.append(current)
        current = current * omega
    return roots
