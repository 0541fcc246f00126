"""
숨겨진 위치의 멤버십 증명 (KZG + Pedersen, bn128)
==================================================

    >>> from zkmember.setup import setup
    >>> from zkmember.prover import prove
    >>> from zkmember.verifier import verify
"""
