"""
Demo driver smoke test (shrunk vector so it runs quickly).
"""

from zkmember import example


def test_demo_prints_verified(monkeypatch, capsys):
    monkeypatch.setattr(example, "NUM_OF_ENTRIES", 3)
    monkeypatch.setattr(example, "PROVER_ENTRY_INDEX", 1)
    assert example.main() is True
    assert "Proof verified!" in capsys.readouterr().out
