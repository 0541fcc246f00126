"""
범용 Structured Reference String (SRS) 와 trim
================================================

KZG 커밋먼트에 필요한 공개 파라미터를 생성하고, 실제로 필요한 차수까지
잘라낸다(trim).

**SRS 구성** (비밀 값 β, 블라인딩 비밀 값 γ):
  powers_of_g       = [G1, β·G1, β²·G1, ..., β^d·G1]
  powers_of_gamma_g = [γ·G1, β·γ·G1, ..., β^d·γ·G1]
  h                 = G2
  beta_h            = β·G2

**보안**:
  β, γ는 "toxic waste"이다. 아는 사람은 거짓 증명을 만들 수 있다.
  generate()는 두 값을 지역 변수로만 다루고 객체에 저장하지 않는다.
  실제 배포에서는 외부 세레모니(MPC)로 만든 SRS를 setup()에 주입한다.

사용 예시:
    >>> srs = UniversalSRS.generate(max_degree=16, seed=42)
    >>> ck, vk = trim(srs, 8)
    >>> len(ck.powers_of_g)  # 9
"""

import logging

from zkmember.errors import ConfigurationError
from zkmember.field import FR, G1, G2, ec_mul, fr_from_seed, random_nonzero_fr


logger = logging.getLogger(__name__)


class UniversalSRS:
    """범용 SRS. 최대 차수 d 이하의 모든 다항식에 재사용할 수 있다.

    속성:
        powers_of_g: [β^i·G1] (i = 0..d)
        powers_of_gamma_g: [β^i·γ·G1] (i = 0..d), 하이딩 커밋먼트용
        h: G2 생성자
        beta_h: β·G2
    """

    def __init__(self, powers_of_g, powers_of_gamma_g, h, beta_h):
        if len(powers_of_g) != len(powers_of_gamma_g):
            raise ConfigurationError("두 거듭제곱 수열의 길이가 다릅니다")
        self.powers_of_g = list(powers_of_g)
        self.powers_of_gamma_g = list(powers_of_gamma_g)
        self.h = h
        self.beta_h = beta_h

    @property
    def max_degree(self):
        return len(self.powers_of_g) - 1

    @classmethod
    def generate(cls, max_degree, seed=None):
        """신뢰 설정(trusted setup)을 프로세스 안에서 수행한다.

        Args:
            max_degree: 지원할 최대 다항식 차수 (1 이상)
            seed: 결정론적 생성을 위한 시드 (테스트용). None이면 secrets 사용.

        Raises:
            ConfigurationError: max_degree < 1
        """
        if max_degree < 1:
            raise ConfigurationError(f"SRS 차수는 1 이상이어야 합니다: {max_degree}")

        if seed is not None:
            beta = fr_from_seed(seed, b"beta")
            gamma = fr_from_seed(seed, b"gamma")
        else:
            beta = random_nonzero_fr()
            gamma = random_nonzero_fr()

        gamma_g = ec_mul(G1, gamma)

        powers_of_g = []
        powers_of_gamma_g = []
        beta_power = FR(1)
        for _ in range(max_degree + 1):
            powers_of_g.append(ec_mul(G1, beta_power))
            powers_of_gamma_g.append(ec_mul(gamma_g, beta_power))
            beta_power = beta_power * beta

        beta_h = ec_mul(G2, beta)
        logger.debug("universal SRS generated: max_degree=%d", max_degree)
        return cls(powers_of_g, powers_of_gamma_g, G2, beta_h)


class CommitterKey:
    """trim된 커밋 키. 차수 max_degree 이하의 다항식을 커밋할 수 있다."""

    def __init__(self, powers_of_g, powers_of_gamma_g):
        self.powers_of_g = powers_of_g
        self.powers_of_gamma_g = powers_of_gamma_g

    @property
    def max_degree(self):
        return len(self.powers_of_g) - 1

    def __len__(self):
        return len(self.powers_of_g)


class VerifierKey:
    """KZG 검증 키: g = G1, gamma_g = γ·G1, h = G2, beta_h = β·G2."""

    def __init__(self, g, gamma_g, h, beta_h):
        self.g = g
        self.gamma_g = gamma_g
        self.h = h
        self.beta_h = beta_h


def trim(srs, supported_degree):
    """범용 SRS를 supported_degree 차수까지 잘라낸다.

    차수 1은 2로 올린다 (원소 3개짜리 키).

    Returns:
        tuple: (CommitterKey, VerifierKey)

    Raises:
        ConfigurationError: supported_degree가 음수이거나 SRS 최대 차수를 초과할 때
    """
    if supported_degree == 1:
        supported_degree += 1
    if supported_degree < 0:
        raise ConfigurationError(f"차수는 음수일 수 없습니다: {supported_degree}")
    if supported_degree > srs.max_degree:
        raise ConfigurationError(
            f"요청한 차수 {supported_degree}가 SRS 최대 차수 {srs.max_degree}를 초과합니다"
        )

    ck = CommitterKey(
        srs.powers_of_g[:supported_degree + 1],
        srs.powers_of_gamma_g[:supported_degree + 1],
    )
    vk = VerifierKey(
        g=srs.powers_of_g[0],
        gamma_g=srs.powers_of_gamma_g[0],
        h=srs.h,
        beta_h=srs.beta_h,
    )
    return ck, vk
