"""
오류 분류
==========

세 가지 종류의 오류를 구분한다. 모두 ValueError의 하위 클래스이므로
기존처럼 ``except ValueError`` 로도 잡을 수 있다.

  - ConfigurationError: 설정 단계의 오류 (도메인 크기, SRS 차수 부족)
  - PreconditionError: 호출자가 지켜야 할 전제조건 위반 (인덱스 범위, a = 0)
  - EncodingError: 잘못된 그룹 원소 또는 직렬화 데이터
"""


class MembershipError(ValueError):
    """멤버십 증명 패키지의 모든 오류의 기반 클래스."""


class ConfigurationError(MembershipError):
    """공개 파라미터를 구성할 수 없을 때.

    다른 파라미터로 setup을 다시 실행하지 않으면 복구할 수 없다.
    """


class PreconditionError(MembershipError):
    """prove 호출의 전제조건이 깨졌을 때."""


class EncodingError(MembershipError):
    """곡선 위에 있지 않은 점이나 형식이 잘못된 데이터."""
