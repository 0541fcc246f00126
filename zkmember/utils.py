"""
출력용 유틸리티
================

디버깅할 때 다항식을 사람이 읽을 수 있는 문자열로 바꾼다.
"""


def format_poly_coeffs(poly):
    """계수 하나당 한 줄: "c * x^i"."""
    return "\n".join(f"{int(c)} * x^{i}" for i, c in enumerate(poly.coeffs))


def format_poly_evals(poly, domain):
    """도메인 원소마다 한 줄: p(ω^j)."""
    return "\n".join(str(int(e)) for e in domain.fft(poly.coeffs))
