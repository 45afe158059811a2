from deskbot.db import Database
from deskbot.seed import SAMPLE_ORDERS, SAMPLE_PAYROLL, seed_database


def test_seed_inserts_sample_rows_once(tmp_path):
    db = Database(tmp_path / "deskbot.db")
    db.initialize()

    assert seed_database(db) is True
    assert seed_database(db) is False

    assert db.count_rows("payroll") == len(SAMPLE_PAYROLL)
    assert db.count_rows("orders") == len(SAMPLE_ORDERS)
