"""
KZG 다항식 커밋먼트
====================

다항식 p(x)를 하나의 G1 점으로 커밋한다: C = p(β)·G1.
β를 모르는 상태에서 커밋 키 [β^i·G1]의 선형결합으로 계산한다.

하이딩 변형:
  블라인딩 다항식 b(x)를 주면 C = p(β)·G1 + b(β)·γ·G1 이 된다.
  멤버십 프로토콜 자체는 하이딩 항을 쓰지 않는다 (블라인딩은
  Pedersen 기저 h로 따로 한다).

열기 증명 (Opening Proof):
  p(z) = y 일 때 π = commit((p(x) - y) / (x - z))
  검증: e(C - y·G1, G2) == e(π, β·G2 - z·G2)

사용 예시:
    >>> C = commit(poly, ck)
    >>> y, pi = create_witness(poly, FR(7), ck)
    >>> verify_opening(C, pi, FR(7), y, vk)  # True
"""

from zkmember.errors import ConfigurationError
from zkmember.field import FR, ec_mul, ec_add, ec_sub, ec_pairing
from zkmember.polynomial import Polynomial, poly_div


def _msm(bases, poly):
    # 무한원점에서 시작하는 나이브 multi-scalar multiplication
    result = None
    for base, coeff in zip(bases, poly.coeffs):
        if coeff == FR(0):
            continue
        result = ec_add(result, ec_mul(base, coeff))
    return result


def commit(poly, ck, blinding=None):
    """다항식을 KZG 커밋한다.

    Args:
        poly: 커밋할 다항식
        ck: CommitterKey
        blinding: 선택적 블라인딩 다항식 (γ 기저로 커밋)

    Returns:
        G1 점 (영 다항식이면 무한원점 None)

    Raises:
        ConfigurationError: 차수가 커밋 키의 용량을 넘을 때
    """
    if poly.degree > ck.max_degree:
        raise ConfigurationError(
            f"다항식 차수 {poly.degree}가 커밋 키 최대 차수 {ck.max_degree}를 초과합니다"
        )
    result = _msm(ck.powers_of_g, poly)

    if blinding is not None:
        if blinding.degree > ck.max_degree:
            raise ConfigurationError(
                f"블라인딩 다항식 차수 {blinding.degree}가 커밋 키 최대 차수를 초과합니다"
            )
        result = ec_add(result, _msm(ck.powers_of_gamma_g, blinding))

    return result


def create_witness(poly, point, ck):
    """p(point)에 대한 열기 증명을 만든다.

    Returns:
        tuple: (평가값 y, 증명 π)
    """
    if not isinstance(point, FR):
        point = FR(point)
    evaluation = poly.evaluate(point)
    quotient, _ = poly_div(poly - evaluation, Polynomial.linear_root(point))
    return evaluation, commit(quotient, ck)


def verify_opening(commitment, witness, point, evaluation, vk):
    """KZG 열기 증명을 검증한다.

    e(C - y·G1, G2) == e(π, β·G2 - z·G2)
    """
    if not isinstance(point, FR):
        point = FR(point)
    if not isinstance(evaluation, FR):
        evaluation = FR(evaluation)

    beta_minus_z = ec_sub(vk.beta_h, ec_mul(vk.h, point))
    c_minus_y = ec_sub(commitment, ec_mul(vk.g, evaluation))

    lhs = ec_pairing(vk.h, c_minus_y)
    rhs = ec_pairing(beta_minus_z, witness)
    return lhs == rhs
