import io

import pytest

from scopetab.hashing import bucket_index
from scopetab.scope import ScopeTable
from scopetab.symbol import OutputStyle, SymbolInfo


def make(style=OutputStyle.PLAIN, buckets=7, scope_id=1):
    out = io.StringIO()
    return ScopeTable(scope_id, buckets, "SDBM", out, style), out


def test_insert_and_look_up_returns_same_symbol():
    scope, _ = make()
    symbol = SymbolInfo("foo", "INT")
    assert scope.insert(symbol) is True
    assert scope.look_up("foo") is symbol
    assert scope.look_up("bar") is None
    assert len(scope) == 1


def test_duplicate_insert_rejected():
    scope, _ = make()
    assert scope.insert(SymbolInfo("x", "INT"))
    assert scope.insert(SymbolInfo("x", "FLOAT")) is False
    assert scope.look_up("x").kind == "INT"
    assert len(scope) == 1


def test_delete_reports_position():
    scope, out = make()
    scope.insert(SymbolInfo("abc", "INT"))
    assert scope.delete("abc") is True
    index = bucket_index("abc", 7, "SDBM")
    assert out.getvalue() == f"\t\tDeleted abc from ScopeTable# 1 at position {index + 1}, 1\n"
    assert scope.look_up("abc") is None
    assert "abc" not in scope


def test_delete_missing_reports():
    scope, out = make()
    assert scope.delete("nothing") is False
    assert out.getvalue() == "\t\tNot found in current ScopeTable\n"


def test_chain_order_kept_after_delete():
    scope, _ = make(buckets=1)
    for name in ("a", "b", "c"):
        scope.insert(SymbolInfo(name, "INT"))
    scope.delete("b")
    assert [s.name for s in scope] == ["a", "c"]


def test_collision_counts_with_single_bucket():
    scope, _ = make(buckets=1)
    names = ["a", "b", "c"]
    for name in names:
        scope.insert(SymbolInfo(name, "INT"))
    assert scope.collision == pytest.approx(len(names) - 1)


def test_no_collision_on_first_insert():
    scope, _ = make(buckets=5)
    scope.insert(SymbolInfo("a", "INT"))
    assert scope.collision == 0.0


def test_plain_dump_lists_only_filled_buckets():
    scope, out = make(buckets=1)
    scope.insert(SymbolInfo("a", "INT"))
    scope.insert(SymbolInfo("b", "FLOAT"))
    scope.dump(2)
    assert out.getvalue() == "ScopeTable # 1\n1 --> < a : INT >< b : FLOAT >\n"


def test_plain_dump_of_empty_table_is_header_only():
    scope, out = make(buckets=4)
    scope.dump()
    assert out.getvalue() == "ScopeTable # 1\n"


def test_plain_insert_and_look_up_are_silent():
    scope, out = make()
    scope.insert(SymbolInfo("a", "INT"))
    scope.look_up("a")
    assert out.getvalue() == ""


def test_float_id_label():
    scope, out = make(scope_id=1 + 2 * 0.1)
    scope.dump()
    assert out.getvalue().splitlines()[0] == "ScopeTable # 1.2"


def test_compact_insert_and_found_messages():
    scope, out = make(OutputStyle.COMPACT)
    scope.insert(SymbolInfo("foo", "INT"))
    index = bucket_index("foo", 7, "SDBM", True)
    assert out.getvalue() == f"\t\tInserted in ScopeTable# 1 at position {index + 1},1\n"
    out.truncate(0)
    out.seek(0)
    assert scope.insert(SymbolInfo("foo", "INT")) is False
    assert out.getvalue() == f"\t\t'foo' found in ScopeTable# 1 at position {index + 1}, 1\n"


def test_compact_dump_lists_every_bucket_with_indent():
    scope, out = make(OutputStyle.COMPACT, buckets=3)
    out.truncate(0)
    scope.dump(2)
    lines = out.getvalue().splitlines()
    assert lines == ["\t\tScopeTable# 1", "\t\t1--> ", "\t\t2--> ", "\t\t3--> "]


def test_compact_close_reports_once():
    scope, out = make(OutputStyle.COMPACT)
    scope.insert(SymbolInfo("a", "INT"))
    out.truncate(0)
    out.seek(0)
    scope.close()
    scope.close()
    assert out.getvalue() == "\t\tScopeTable# 1 removed\n"
    assert len(scope) == 0


def test_zero_buckets_rejected():
    with pytest.raises(ValueError):
        ScopeTable(1, 0)