import sys
import os

# 프로젝트 루트를 sys.path에 추가
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest
from py_ecc import bn128

FQ2 = bn128.FQ2


def _fq2_sqrt(a):
    """p ≡ 3 (mod 4) 인 FQ2의 제곱근. 없으면 None."""
    p = bn128.field_modulus
    a1 = a ** ((p - 3) // 4)
    alpha = a1 * a1 * a
    if alpha ** p * alpha == -FQ2.one():
        return None
    x0 = a1 * a
    if alpha == -FQ2.one():
        return FQ2([0, 1]) * x0
    return (FQ2.one() + alpha) ** ((p - 1) // 2) * x0


@pytest.fixture(scope="session")
def twist_point_outside_subgroup():
    """twist 곡선 위에 있지만 위수 r 부분군에는 속하지 않는 점."""
    for k in range(2, 64):
        x = FQ2([k, 1])
        rhs = x ** 3 + bn128.b2
        y = _fq2_sqrt(rhs)
        if y is None or y * y != rhs:
            continue
        point = (x, y)
        if bn128.multiply(point, bn128.curve_order) is not None:
            assert bn128.is_on_curve(point, bn128.b2)
            return point
    raise AssertionError("twist point outside the subgroup not found")
