"""
멤버십 증명 데모
=================

실행:
    python -m zkmember.example

흐름:
    1. 무작위 FR 원소 100개로 공개 벡터 구성
    2. 공개 파라미터 생성 (trusted setup)
    3. prover가 47번 원소를 소유한다고 증명
    4. verifier가 어떤 위치인지 모른 채 검증
"""

import logging

from zkmember.field import random_fr
from zkmember.setup import setup
from zkmember.prover import prove
from zkmember.verifier import verify


NUM_OF_ENTRIES = 100
PROVER_ENTRY_INDEX = 47


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    entries = [random_fr() for _ in range(NUM_OF_ENTRIES)]

    print("[1] 공개 파라미터 생성...")
    params = setup(NUM_OF_ENTRIES)
    print(f"    도메인 크기: {params.domain.size}")
    print(f"    커밋 키 차수: {params.ck.max_degree}")

    print("[2] 증명 생성...")
    prover_entry = entries[PROVER_ENTRY_INDEX]
    proof = prove(params, entries, PROVER_ENTRY_INDEX, prover_entry)

    print("[3] 증명 검증...")
    result = verify(params, entries, proof)

    if result:
        print("Proof verified!")
    else:
        print("Proof invalid")
    return result


if __name__ == "__main__":
    main()
