"""Tests for the combinator table."""

from itertools import combinations, product

from remote_data import (
    SRD,
    Failure,
    Loading,
    Matcher,
    NotAsked,
    Success,
    alt,
    ap,
    bimap,
    chain,
    equals,
    failure,
    loading,
    map,
    map2,
    map3,
    map_failure,
    match,
    not_asked,
    of,
    sequence,
    success,
    traverse,
    unpack,
    unwrap,
    with_default,
)
from fakes import FIXTURES, Recorder, add, double, fa, l, n, su


def test_equals_reflexivity() -> None:
    for rd in FIXTURES:
        assert equals(rd, rd)


def test_equals_symmetry() -> None:
    for a, b in combinations(FIXTURES, 2):
        assert equals(a, b) == equals(b, a)
        assert not equals(a, b)


def test_equals_transitivity() -> None:
    a, b, c = loading(), loading(), loading()
    assert equals(a, b)
    assert equals(b, c)
    assert equals(a, c)


def test_equals_ignores_payload() -> None:
    assert equals(failure("a"), failure("b"))
    assert equals(success(1), success("one"))


def test_map_only_touches_success() -> None:
    assert map(double, su) == Success(10)
    assert map(double, n) is n
    assert map(double, l) is l
    assert map(double, fa) is fa


def test_map_does_not_call_function_for_non_success() -> None:
    spy = Recorder()
    for rd in (n, l, fa):
        map(spy, rd)
    assert spy.calls == []


def test_map_failure_does_not_call_function_for_non_failure() -> None:
    spy = Recorder()
    for rd in (n, l, su):
        assert map_failure(spy, rd) is rd
    assert spy.calls == []


def test_map_failure_only_touches_failure() -> None:
    assert map_failure(str.upper, fa) == Failure("MSG")
    assert map_failure(str.upper, su) is su
    assert map_failure(str.upper, n) is n
    assert map_failure(str.upper, l) is l


def test_bimap() -> None:
    assert bimap(lambda e: e + "msg", double, n) is n
    assert bimap(lambda e: e + "msg", double, l) is l
    assert bimap(lambda e: e + "msg", double, fa) == Failure("msgmsg")
    assert bimap(lambda e: e + "msg", double, su) == Success(10)


def test_bimap_calls_only_the_matching_side() -> None:
    on_failure, on_success = Recorder(result="E"), Recorder(result="A")
    for rd in (n, l):
        assert bimap(on_failure, on_success, rd) is rd
    assert on_failure.calls == [] and on_success.calls == []

    assert bimap(on_failure, on_success, su) == Success("A")
    assert on_failure.calls == [] and on_success.calls == [(5,)]

    assert bimap(on_failure, on_success, fa) == Failure("E")
    assert on_failure.calls == [("msg",)] and on_success.calls == [(5,)]


def test_chain_does_not_call_function_for_non_success() -> None:
    spy = Recorder(result=success(0))
    for rd in (n, l, fa):
        assert chain(spy, rd) is rd
    assert spy.calls == []


def test_chain() -> None:
    assert chain(lambda x: success(x * 2), su) == Success(10)
    assert chain(lambda x: failure("late"), su) == Failure("late")
    assert chain(lambda x: success(x * 2), fa) is fa


def test_map2_short_circuit() -> None:
    assert map2(add, n, su) == n
    assert map2(add, l, su) == l
    assert map2(add, fa, su) == Failure("msg")
    assert map2(add, su, su) == Success(10)


def test_map2_returns_first_non_success_left_to_right() -> None:
    assert map2(add, l, fa) is l
    assert map2(add, fa, l) is fa
    assert map2(add, su, fa) is fa
    assert map2(add, su, n) is n


def test_map2_does_not_call_function_unless_both_succeed() -> None:
    spy = Recorder(result=0)
    for a, b in product(FIXTURES, repeat=2):
        if a is su and b is su:
            continue
        map2(spy, a, b)
    assert spy.calls == []

    assert map2(spy, su, success(1)) == Success(0)
    assert spy.calls == [(5, 1)]


def test_map3_does_not_call_function_unless_all_succeed() -> None:
    spy = Recorder(result=0)
    for a, b, c in product(FIXTURES, repeat=3):
        if a is su and b is su and c is su:
            continue
        map3(spy, a, b, c)
    assert spy.calls == []

    assert map3(spy, su, su, success(1)) == Success(0)
    assert spy.calls == [(5, 5, 1)]


def test_map3() -> None:
    assert map3(lambda x, y, z: x + y + z, success(4), success(2), success(10)) == Success(16)
    assert map3(lambda x, y, z: x + y + z, su, l, fa) is l
    assert map3(lambda x, y, z: x + y + z, su, su, fa) is fa
    assert map3(lambda x, y, z: x + y + z, n, l, fa) is n


def test_ap_applies_wrapped_function() -> None:
    assert ap(success(double), su) == Success(10)


def test_ap_checks_value_before_function() -> None:
    # Value side wins when neither is a Success
    assert ap(failure("fn"), n) is n
    assert ap(loading(), fa) is fa
    assert ap(n, l) is l
    # Function side returned only when the value is a Success
    assert ap(failure("fn"), su) == Failure("fn")
    assert ap(n, su) is n


def test_ap_does_not_call_wrapped_function_unless_both_succeed() -> None:
    spy = Recorder(result=0)
    for rd in (n, l, fa):
        assert ap(success(spy), rd) is rd
    assert spy.calls == []

    assert ap(success(spy), su) == Success(0)
    assert spy.calls == [(5,)]


def test_unwrap_does_not_call_function_for_non_success() -> None:
    spy = Recorder(result=0)
    for rd in (n, l, fa):
        assert unwrap(4, spy, rd) == 4
    assert spy.calls == []


def test_alt() -> None:
    assert alt(success(2), success(4)) == Success(4)
    assert alt(success(2), failure("err")) == Success(2)
    assert alt(fa, l) is fa
    assert alt(n, fa) is n


def test_of() -> None:
    assert of(5) == Success(5)
    assert of(None) == Success(None)


def test_unwrap() -> None:
    assert unwrap(4, double, su) == 10
    assert unwrap(4, double, n) == 4
    assert unwrap(4, double, l) == 4
    assert unwrap(4, double, fa) == 4


def test_unpack_calls_default_only_when_needed() -> None:
    thunk = Recorder(result=4)
    assert unpack(thunk, double, su) == 10
    assert thunk.calls == []

    assert unpack(thunk, double, fa) == 4
    assert thunk.calls == [()]


def test_with_default() -> None:
    assert with_default(5, success(4)) == 4
    assert with_default(5, failure("msg")) == 5
    assert with_default(5, n) == 5
    assert with_default(5, l) == 5


def test_match_invokes_exactly_one_handler() -> None:
    expected = {
        NotAsked(): ("not_asked", ()),
        Loading(): ("loading", ()),
        Failure("msg"): ("failure", ("msg",)),
        Success(5): ("success", (5,)),
    }
    for rd, (name, args) in expected.items():
        handlers = {key: Recorder(result=key) for key in ("not_asked", "loading", "failure", "success")}
        result = match(Matcher(**handlers), rd)
        assert result == name
        for key, recorder in handlers.items():
            assert recorder.calls == ([args] if key == name else [])


def test_match_branches_may_return_different_types() -> None:
    matcher = Matcher(
        not_asked=lambda: None,
        loading=lambda: 0,
        failure=lambda e: f"Err: {e}",
        success=lambda d: [d],
    )
    assert [match(matcher, rd) for rd in (n, l, fa, su)] == [None, 0, "Err: msg", [5]]


def test_sequence() -> None:
    assert sequence([success(1), success(2), success(3)]) == Success([1, 2, 3])
    assert sequence([]) == Success([])
    assert sequence([su, fa, l]) is fa
    assert sequence(iter([l, fa])) is l


def test_sequence_agrees_with_map2() -> None:
    for a in FIXTURES:
        for b in FIXTURES:
            assert map(lambda xs: add(*xs), sequence([a, b])) == map2(add, a, b)


def test_traverse_stops_calling_after_first_non_success() -> None:
    seen: list[int] = []

    def lookup(x: int):
        seen.append(x)
        return success(x * 2) if x < 3 else failure(f"bad {x}")

    assert traverse(lookup, [1, 2]) == Success([2, 4])
    seen.clear()
    assert traverse(lookup, [1, 3, 4]) == Failure("bad 3")
    assert seen == [1, 3]


def test_srd_namespace_exposes_operations() -> None:
    assert SRD.URI == "RemoteData"
    assert SRD.map(double, su) == Success(10)
    assert SRD.chain(SRD.of, fa) is fa
    assert SRD.is_success(su)
    assert SRD.is_not_asked(not_asked())
    assert SRD.equals(SRD.alt(su, n), su)


def test_srd_namespace_can_be_passed_as_a_value() -> None:
    def double_all(F, values):
        return F.sequence([F.map(double, v) for v in values])

    assert double_all(SRD, [su, success(1)]) == Success([10, 2])
