from quippy.interp import Interpreter
from quippy.values import Int, List, Str


def test_starts_with_one_empty_local_scope():
    interp = Interpreter()
    assert interp.local_scopes == [{}]
    assert interp.global_scope == {}


def test_store_then_fetch_global():
    interp = Interpreter()
    interp.store_global("x", Int(5))
    assert interp.fetch_global("x") == Int(5)


def test_fetch_missing_global_is_none():
    interp = Interpreter()
    interp.store_global("x", Int(5))
    assert interp.fetch_global("y") is None


def test_store_global_overwrites():
    interp = Interpreter()
    interp.store_global("x", Int(5))
    interp.store_global("x", Str("new"))
    assert interp.fetch_global("x") == Str("new")
    assert len(interp.global_scope) == 1


def test_store_local_goes_to_innermost_scope():
    interp = Interpreter()
    interp.local_scopes.append({})
    interp.store_local("v", List((Int(1),)))
    assert interp.local_scopes[-1] == {"v": List((Int(1),))}
    assert interp.local_scopes[0] == {}
    assert interp.fetch_global("v") is None


def test_instances_do_not_share_state():
    first = Interpreter()
    second = Interpreter()
    first.store_global("a", Int(1))
    first.store_local("b", Int(2))
    assert second.fetch_global("a") is None
    assert second.local_scopes == [{}]