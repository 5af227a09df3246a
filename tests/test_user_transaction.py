import pytest

from workbench.users.repository import connect, get_tx
from workbench.users.transaction import Transaction


@pytest.fixture
def conn():
    connection = connect(":memory:")
    yield connection
    connection.close()


def _insert(name):
    tx = get_tx()
    cursor = tx.execute(
        "INSERT INTO users (name, email, age) VALUES (?, ?, ?)", (name, "", 0)
    )
    return cursor.lastrowid


def _names(conn):
    return [row[0] for row in conn.execute("SELECT name FROM users ORDER BY id")]


def test_commit_keeps_work_and_returns_value(conn):
    row_id = Transaction(conn).do_in_tx(lambda: _insert("Ann"))
    assert conn.execute("SELECT name FROM users WHERE id = ?", (row_id,)).fetchone() == ("Ann",)
    assert not conn.in_transaction


def test_failure_rolls_back_and_propagates(conn):
    def work():
        _insert("Ann")
        _insert("Bob")
        raise KeyError("boom")

    with pytest.raises(KeyError):
        Transaction(conn).do_in_tx(work)
    assert _names(conn) == []
    assert not conn.in_transaction


def test_transaction_visible_only_inside(conn):
    seen = Transaction(conn).do_in_tx(get_tx)
    assert seen is conn
    assert get_tx() is None


def test_transactions_run_one_after_another(conn):
    transaction = Transaction(conn)
    transaction.do_in_tx(lambda: _insert("Ann"))
    transaction.do_in_tx(lambda: _insert("Bob"))
    assert _names(conn) == ["Ann", "Bob"]