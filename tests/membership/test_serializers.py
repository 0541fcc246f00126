"""
Serializer tests: JSON-friendly encoding of proofs and the off-curve checks
performed on the way back in.
"""

import json

import pytest
from zkmember.errors import EncodingError
from zkmember.field import FR, G1, G2, ec_mul
from zkmember.prover import prove
from zkmember.setup import setup
from zkmember.verifier import verify
from zkmember.serializers import (
    serialize_fr, deserialize_fr,
    serialize_fr_list, deserialize_fr_list,
    serialize_g1, deserialize_g1,
    serialize_g2, deserialize_g2,
    serialize_proof, deserialize_proof,
)


@pytest.fixture(scope="module")
def proof_data():
    params = setup(2, seed=77)
    entries = [FR(3), FR(4)]
    proof = prove(params, entries, 1, entries[1])
    return params, entries, proof


class TestScalars:
    def test_fr(self):
        assert serialize_fr(FR(42)) == "42"
        assert deserialize_fr("42") == FR(42)

    def test_fr_list(self):
        assert deserialize_fr_list(serialize_fr_list([FR(1), FR(2)])) == [FR(1), FR(2)]

    def test_bad_fr(self):
        with pytest.raises(EncodingError):
            deserialize_fr("forty-two")


class TestPoints:
    def test_g1(self):
        P = ec_mul(G1, 5)
        assert deserialize_g1(serialize_g1(P)) == P
        assert serialize_g1(None) is None
        assert deserialize_g1(None) is None

    def test_g2(self):
        Q = ec_mul(G2, 5)
        assert deserialize_g2(serialize_g2(Q)) == Q

    def test_g1_off_curve(self):
        with pytest.raises(EncodingError):
            deserialize_g1(["1", "1"])

    def test_g1_malformed(self):
        with pytest.raises(EncodingError):
            deserialize_g1(["1"])

    def test_g2_off_curve(self):
        with pytest.raises(EncodingError):
            deserialize_g2([["1", "0"], ["1", "0"]])

    def test_g2_outside_subgroup(self, twist_point_outside_subgroup):
        data = serialize_g2(twist_point_outside_subgroup)
        with pytest.raises(EncodingError, match="부분군"):
            deserialize_g2(data)

    def test_g2_subgroup_point_restored(self):
        point = ec_mul(G2, 12345)
        assert deserialize_g2(serialize_g2(point)) == point


class TestProof:
    def test_json_transport_keeps_validity(self, proof_data):
        params, entries, proof = proof_data
        wire = json.dumps(serialize_proof(proof))
        restored = deserialize_proof(json.loads(wire))
        assert restored == proof
        assert verify(params, entries, restored) is True

    def test_missing_field(self, proof_data):
        _, _, proof = proof_data
        data = serialize_proof(proof)
        del data["S_comm"]
        with pytest.raises(EncodingError):
            deserialize_proof(data)

    def test_corrupted_point(self, proof_data):
        _, _, proof = proof_data
        data = serialize_proof(proof)
        data["T_comm"][1] = str(int(data["T_comm"][1]) + 1)
        with pytest.raises(EncodingError):
            deserialize_proof(data)
