"""
Fiat-Shamir 트랜스크립트
=========================

레이블이 붙은 바이트열을 흡수하고 FR 챌린지를 내보내는 독립 서비스.

현재의 대화형(interactive) 멤버십 프로토콜은 이 모듈을 호출하지 않는다.
비대화식 변형에서 prover/verifier가 같은 순서로 메시지를 추가하면 같은
챌린지를 얻게 된다.

사용 예시:
    >>> t = Transcript(b"membership")
    >>> t.append_point(b"cm", proof.cm)
    >>> c = t.challenge_scalar(b"c")
"""

import hashlib

from py_ecc import bn128

from zkmember.errors import EncodingError
from zkmember.field import FR, CURVE_ORDER


class Transcript:
    """SHA-256 기반 트랜스크립트.

    속성:
        state: 지금까지 누적된 해시 입력
    """

    def __init__(self, label=b"zkmember"):
        self.state = bytearray()
        self.append_message(b"dom-sep", label)

    def append_message(self, label, message):
        """레이블과 메시지를 길이 접두사와 함께 추가한다."""
        message = bytes(message)
        self.state.extend(label)
        self.state.extend(len(message).to_bytes(4, "big"))
        self.state.extend(message)

    def append_scalar(self, label, scalar):
        """FR 원소를 32바이트 빅엔디안으로 추가한다."""
        val = int(scalar) % CURVE_ORDER
        self.append_message(label, val.to_bytes(32, "big"))

    def append_point(self, label, point):
        """G1 또는 G2 점을 추가한다. 무한원점은 빈 메시지로 표현한다."""
        self.append_message(label, _encode_point(point))

    def challenge_scalar(self, label):
        """현재 상태에서 챌린지를 도출한다.

        해시 출력은 상태에 다시 추가되므로 연속 호출은 서로 다른 값을 준다.
        """
        self.state.extend(label)
        h = hashlib.sha256(bytes(self.state)).digest()
        self.state.extend(h)
        return FR(int.from_bytes(h, "big") % CURVE_ORDER)


def _encode_point(point):
    if point is None:
        return b""
    out = bytearray()
    for coord in point:
        if isinstance(coord, bn128.FQ2):
            for c in coord.coeffs:
                out.extend(int(c).to_bytes(32, "big"))
        elif isinstance(coord, bn128.FQ):
            out.extend(int(coord).to_bytes(32, "big"))
        else:
            raise EncodingError(f"지원하지 않는 좌표 타입: {type(coord).__name__}")
    return bytes(out)
