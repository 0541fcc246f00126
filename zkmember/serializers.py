"""
직렬화/역직렬화 헬퍼
=====================

FR, G1, G2 원소와 Proof를 JSON으로 옮길 수 있는 형태(10진 문자열)로
변환한다. 역직렬화는 점이 올바른 곡선과 부분군에 속하는지 확인하며, 형식이 잘못된
데이터는 EncodingError로 거부한다.
"""

from py_ecc import bn128

from zkmember.errors import EncodingError
from zkmember.field import FR, is_g1_point, is_g2_point
from zkmember.prover import Proof


# ─── FR ───

def serialize_fr(val):
    """FR → str(int)"""
    return str(int(val))


def deserialize_fr(s):
    """str(int) → FR"""
    try:
        return FR(int(s))
    except (TypeError, ValueError) as exc:
        raise EncodingError(f"FR 원소가 아닙니다: {s!r}") from exc


def serialize_fr_list(lst):
    return [serialize_fr(v) for v in lst]


def deserialize_fr_list(data):
    return [deserialize_fr(s) for s in data]


# ─── G1 point ───

def serialize_g1(point):
    """G1 point → [str, str] or None"""
    if point is None:
        return None
    return [str(int(point[0])), str(int(point[1]))]


def deserialize_g1(data):
    """[str, str] or None → G1 point"""
    if data is None:
        return None
    try:
        x, y = data
        point = (bn128.FQ(int(x)), bn128.FQ(int(y)))
    except (TypeError, ValueError) as exc:
        raise EncodingError(f"G1 점 형식이 잘못되었습니다: {data!r}") from exc
    if not is_g1_point(point):
        raise EncodingError("G1 곡선 위에 있지 않은 점입니다")
    return point


# ─── G2 point ───

def serialize_g2(point):
    """G2 point → [[str,str],[str,str]] or None"""
    if point is None:
        return None
    return [
        [str(int(point[0].coeffs[0])), str(int(point[0].coeffs[1]))],
        [str(int(point[1].coeffs[0])), str(int(point[1].coeffs[1]))],
    ]


def deserialize_g2(data):
    """[[str,str],[str,str]] or None → G2 point"""
    if data is None:
        return None
    try:
        (x0, x1), (y0, y1) = data
        point = (
            bn128.FQ2([int(x0), int(x1)]),
            bn128.FQ2([int(y0), int(y1)]),
        )
    except (TypeError, ValueError) as exc:
        raise EncodingError(f"G2 점 형식이 잘못되었습니다: {data!r}") from exc
    if not is_g2_point(point):
        raise EncodingError("G2 부분군에 속하지 않는 점입니다")
    return point


# ─── Proof ───

def serialize_proof(proof):
    """Proof → dict"""
    return {
        "cm": serialize_g1(proof.cm),
        "z_comm": serialize_g2(proof.z_comm),
        "T_comm": serialize_g1(proof.T_comm),
        "S_comm": serialize_g2(proof.S_comm),
    }


def deserialize_proof(data):
    """dict → Proof"""
    try:
        return Proof(
            cm=deserialize_g1(data["cm"]),
            z_comm=deserialize_g2(data["z_comm"]),
            T_comm=deserialize_g1(data["T_comm"]),
            S_comm=deserialize_g2(data["S_comm"]),
        )
    except KeyError as exc:
        raise EncodingError(f"Proof 필드가 없습니다: {exc.args[0]}") from exc
