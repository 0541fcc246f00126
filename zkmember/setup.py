"""
공개 파라미터 설정 (Setup)
===========================

크기 n인 벡터를 지원하는 공개 파라미터를 한 번 만들고, 이후 모든
prove/verify 호출에서 읽기 전용으로 공유한다.

  domain : 크기 ≥ n+2 인 평가 도메인 H
  g1, g2 : 그룹 생성자
  xg2    : β·G2 (KZG 비밀 값과 G2 생성자의 곱)
  h      : Pedersen 커밋먼트의 독립 기저. Ped_r(v) = v·[g1] + r·[h]
  ck     : trim된 KZG 커밋 키, 길이 k+1, k = max(n, 2·|H| + 3)

사용 예시:
    >>> params = setup(100)
    >>> params.domain.size  # 128
"""

import logging

from zkmember.domain import EvaluationDomain
from zkmember.errors import ConfigurationError
from zkmember.field import G1, ec_mul, fr_from_seed, random_g1
from zkmember.srs import UniversalSRS, trim


logger = logging.getLogger(__name__)


class PublicParameters:
    """setup()의 결과. 생성 후에는 속성을 바꿀 수 없다."""

    __slots__ = ("domain", "g1", "g2", "xg2", "h", "ck")

    def __init__(self, domain, g1, g2, xg2, h, ck):
        for name, value in zip(self.__slots__, (domain, g1, g2, xg2, h, ck)):
            object.__setattr__(self, name, value)

    def __setattr__(self, name, value):
        raise AttributeError(f"PublicParameters는 읽기 전용입니다: {name}")

    def __delattr__(self, name):
        raise AttributeError(f"PublicParameters는 읽기 전용입니다: {name}")

    def __repr__(self):
        return (
            f"PublicParameters(domain_size={self.domain.size}, "
            f"ck_degree={self.ck.max_degree})"
        )


def commitment_key_degree(n, domain_size):
    """k = max(n, 2·|H| + 3)."""
    return max(n, 2 * domain_size + 3)


def setup(n, seed=None, srs=None):
    """공개 파라미터를 생성한다.

    Args:
        n: 지원할 벡터 크기 (1 이상)
        seed: SRS와 Pedersen 기저를 결정론적으로 만들 시드 (테스트용)
        srs: 외부 세레모니에서 받은 UniversalSRS. 주어지면 SRS를 새로
             생성하지 않는다.

    Returns:
        PublicParameters

    Raises:
        ConfigurationError: n < 1, 도메인이 존재하지 않거나 SRS 차수가 부족할 때
    """
    if n < 1:
        raise ConfigurationError(f"벡터 크기는 1 이상이어야 합니다: {n}")

    domain = EvaluationDomain(n + 2)
    ck_size = commitment_key_degree(n, domain.size)

    if srs is None:
        srs = UniversalSRS.generate(max(n, ck_size), seed=seed)

    ck, vk = trim(srs, ck_size)

    if seed is not None:
        h = ec_mul(G1, fr_from_seed(seed, b"pedersen-h"))
    else:
        h = random_g1()

    logger.debug(
        "setup: n=%d domain_size=%d ck_degree=%d", n, domain.size, ck.max_degree
    )
    return PublicParameters(
        domain=domain,
        g1=ck.powers_of_g[0],
        g2=vk.h,
        xg2=vk.beta_h,
        h=h,
        ck=ck,
    )
