"""
Verifier
=========

공개 벡터와 Proof로 페어링 방정식을 검사한다.

**검증 방정식**:
  e([C]₁ - cm, [1]₂) == e([T]₁, [z]₂) · e([h]₁, [S]₂)

prover의 구성을 대입하면 우변은
  e([q]₁, [a(β-ω^i)]₂ / a) · e([h]₁, -r·[1]₂)
  = e([C(β) - v]₁, [1]₂) · e(-r·[h]₁, [1]₂)
  = e([C]₁ - v·[g1] - r·[h], [1]₂)
가 되어 좌변과 같다.

**알려진 한계** (구현하지 않음):
  - [z]₂ 가 실제 도메인 원소 ω^i 로 만들어졌는지 따로 확인하지 않는다.
  - Pedersen 커밋먼트의 열기를 따로 검증하지 않는다.

사용 예시:
    >>> verify(params, entries, proof)  # True / False
"""

import logging

from zkmember.errors import EncodingError
from zkmember.field import ec_pairing, ec_sub, is_g1_point, is_g2_point
from zkmember.kzg import commit


logger = logging.getLogger(__name__)


def check_proof_points(proof):
    """증명의 네 원소가 올바른 곡선과 부분군에 속하는지 확인한다.

    Raises:
        EncodingError: 곡선 위에 없거나 부분군 밖의 원소가 있을 때
    """
    for name in ("cm", "T_comm"):
        if not is_g1_point(getattr(proof, name)):
            raise EncodingError(f"{name}은 G1 위의 점이 아닙니다")
    for name in ("z_comm", "S_comm"):
        if not is_g2_point(getattr(proof, name)):
            raise EncodingError(f"{name}은 G2 부분군의 점이 아닙니다")


def verify(params, entries, proof):
    """멤버십 증명을 검증한다.

    Args:
        params: PublicParameters
        entries: 공개 벡터
        proof: Proof

    Returns:
        bool: 검증 성공 여부

    Raises:
        EncodingError: proof에 곡선 또는 부분군 밖의 점이 있을 때
    """
    check_proof_points(proof)

    C_poly = params.domain.interpolate(entries)
    C_comm = commit(C_poly, params.ck)

    # e(C - cm, g2)
    lhs = ec_pairing(params.g2, ec_sub(C_comm, proof.cm))
    # e(T, z) · e(h, S)
    rhs = ec_pairing(proof.z_comm, proof.T_comm) * ec_pairing(proof.S_comm, params.h)

    result = lhs == rhs
    logger.debug("verification result: %s", result)
    return result
