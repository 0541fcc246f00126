"""
Prover — 숨겨진 위치의 멤버십 증명 생성
=========================================

공개 벡터 entries의 index 위치에 value가 있다는 것을, index를 드러내지
않고 value는 Pedersen 커밋먼트로만 드러내며 증명한다.

**증명 구성** (r, a, s: 새로 뽑은 블라인딩 스칼라):

  cm  = v·[g1] + r·[h]                    (value에 대한 Pedersen 커밋먼트)
  C(x): C(ω^j) = entries[j] 인 보간 다항식
  q(x) = (C(x) - v) / (x - ω^i)
  [T]₁ = a⁻¹·[q]₁ + s·[h]
  [z]₂ = a·[β]₂ - a·ω^i·[1]₂              (= [a(β - ω^i)]₂)
  [S]₂ = -r·[1]₂ - s·[z]₂

  Proof = (cm, [z]₂, [T]₁, [S]₂)

v ≠ entries[i] 이면 나눗셈에 나머지가 생긴다. 나머지는 버리고 몫만
커밋하므로 증명은 만들어지지만 검증에서 거부된다.

사용 예시:
    >>> proof = prove(params, entries, 47, entries[47])
"""

import logging

from zkmember.errors import PreconditionError
from zkmember.field import FR, ec_add, ec_mul, ec_sub, random_fr
from zkmember.kzg import commit
from zkmember.polynomial import Polynomial, poly_div


logger = logging.getLogger(__name__)


class Proof:
    """멤버십 증명. 인덱스 정보는 평문으로 담지 않는다.

    속성:
        cm: G1 점, value에 대한 Pedersen 커밋먼트
        z_comm: G2 점, 블라인딩된 인덱스 선택자 커밋먼트
        T_comm: G1 점, 블라인딩된 몫 커밋먼트
        S_comm: G2 점, 열기 일관성 커밋먼트
    """

    __slots__ = ("cm", "z_comm", "T_comm", "S_comm")

    def __init__(self, cm, z_comm, T_comm, S_comm):
        self.cm = cm
        self.z_comm = z_comm
        self.T_comm = T_comm
        self.S_comm = S_comm

    def __eq__(self, other):
        if not isinstance(other, Proof):
            return NotImplemented
        return all(getattr(self, k) == getattr(other, k) for k in self.__slots__)

    def __repr__(self):
        return "Proof(cm={}, z_comm=..., T_comm=..., S_comm=...)".format(self.cm)


def prove(params, entries, index, value, rng=random_fr):
    """멤버십 증명을 생성한다.

    Args:
        params: PublicParameters
        entries: 공개 벡터 (FR 원소 리스트)
        index: prover가 소유한 위치, 0 ≤ index < domain.size
        value: index 위치의 값. entries[index]와 같아야 검증을 통과한다.
        rng: 블라인딩 스칼라 샘플러 (r, a, s 순서로 호출)

    Returns:
        Proof

    Raises:
        PreconditionError: index가 도메인 밖이거나 a = 0이 뽑혔을 때
    """
    domain = params.domain
    if not 0 <= index < domain.size:
        raise PreconditionError(
            f"인덱스 {index}가 도메인 범위 [0, {domain.size})를 벗어납니다"
        )
    if not isinstance(value, FR):
        value = FR(value)

    r = rng()
    a = rng()
    s = rng()
    if a == FR(0):
        raise PreconditionError("블라인딩 스칼라 a가 0입니다 (역원 없음)")

    g1, g2, xg2, h = params.g1, params.g2, params.xg2, params.h

    # cm = value·[g1] + r·[h]
    cm = ec_add(ec_mul(g1, value), ec_mul(h, r))

    C_poly = domain.interpolate(entries)

    omega_i = domain.element(index)
    q_poly, remainder = poly_div(C_poly - value, Polynomial.linear_root(omega_i))
    if not remainder.is_zero():
        logger.warning("quotient is not exact: value does not match entries[index]")

    q_comm = commit(q_poly, params.ck)

    # [T]₁ = a⁻¹·[q]₁ + s·[h]₁
    T_comm = ec_add(ec_mul(q_comm, FR(1) / a), ec_mul(h, s))

    # [z]₂ = a·[β]₂ - a·ω^i·[1]₂
    z_comm = ec_sub(ec_mul(xg2, a), ec_mul(g2, a * omega_i))

    # [S]₂ = -r·[1]₂ - s·[z]₂
    S_comm = ec_sub(ec_mul(g2, FR(0) - r), ec_mul(z_comm, s))

    logger.debug("proof generated: domain_size=%d", domain.size)
    return Proof(cm=cm, z_comm=z_comm, T_comm=T_comm, S_comm=S_comm)
