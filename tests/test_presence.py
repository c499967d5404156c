"""Tests for the Presence type (Present and Absent)."""

import pytest
from hypothesis import given
from hypothesis import strategies as st
from warm_fuzzy_thing import Absent, AbsentType, CallbackContractError, Failure, Present, Success, presence

from tests.strategies import integers, payloads, presence_fns, presences


class TestPresentCreation:
    """Tests for Present instantiation and basic properties."""

    def test_present_creation(self):
        assert Present(42).value == 42

    def test_present_with_none(self):
        """Present can wrap None (Present(None) is not Absent)."""
        present = Present(None)
        assert present.value is None
        assert present != Absent

    def test_present_is_frozen(self):
        with pytest.raises(AttributeError):
            Present(42).value = 100  # type: ignore[misc]


class TestAbsent:
    """Tests for the Absent singleton."""

    def test_absent_is_singleton_instance(self):
        assert isinstance(Absent, AbsentType)

    def test_absent_instances_equal(self):
        assert AbsentType() == Absent
        assert hash(AbsentType()) == hash(Absent)

    def test_absent_repr(self):
        assert repr(Absent) == 'Absent'

    def test_absent_is_frozen(self):
        with pytest.raises(AttributeError):
            Absent.value = 42  # type: ignore[attr-defined]

    def test_present_not_equal_to_absent(self):
        assert Present(42) != Absent


class TestPresencePredicates:
    """Tests for is_present / is_absent."""

    def test_methods(self):
        assert Present(1).is_present() is True
        assert Present(1).is_absent() is False
        assert Absent.is_present() is False
        assert Absent.is_absent() is True

    def test_functions_accept_anything(self):
        assert presence.is_present(Present(1)) is True
        assert presence.is_absent(Absent) is True
        assert presence.is_absent(None) is False
        assert presence.is_present(Success(1)) is False


class TestPresencePure:
    """Tests for the smart constructor."""

    def test_value_becomes_present(self):
        assert presence.pure(1) == Present(1)

    def test_none_becomes_absent(self):
        assert presence.pure(None) is Absent

    def test_absent_stays_absent(self):
        assert presence.pure(AbsentType()) is Absent

    def test_falsy_values_are_present(self):
        """Only None is nil-shaped; other falsy values are present."""
        assert presence.pure(0) == Present(0)
        assert presence.pure('') == Present('')
        assert presence.pure(False) == Present(False)


class TestPresenceMapBind:
    """Tests for fmap and bind."""

    def test_present_map(self):
        assert presence.fmap(Present(1), lambda v: v + 1) == Present(2)
        assert presence.fmap(Present('hello'), len) == Present(5)

    def test_absent_map_skips_function(self, explode):
        assert presence.fmap(Absent, explode) is Absent

    def test_present_bind(self):
        assert presence.bind(Present(1), lambda v: Present(v + 1)) == Present(2)
        assert presence.bind(Present('hello'), lambda v: Absent) is Absent

    def test_absent_bind_skips_function(self, explode):
        assert presence.bind(Absent, explode) is Absent

    def test_none_return_is_a_violation(self):
        """A bare None is not read as Absent."""
        with pytest.raises(CallbackContractError) as exc_info:
            presence.bind(Present(1), lambda v: None)
        assert exc_info.value.operation == 'presence.bind'

    def test_raw_return_raises(self):
        with pytest.raises(CallbackContractError):
            Present(1).bind(lambda v: v + 1)

    def test_outcome_return_raises(self):
        with pytest.raises(CallbackContractError):
            presence.bind(Present(1), lambda v: Success(v))

    def test_rejects_non_presence(self):
        with pytest.raises(TypeError, match='expects Present or Absent'):
            presence.bind(None, lambda v: Present(v))


class TestPresenceFold:
    """Tests for fold."""

    def test_present_fold(self):
        assert presence.fold(Present(1), lambda v: v + 1) == 2
        assert presence.fold(Present(1), 0, lambda v: v + 1) == 2

    def test_absent_fold_default(self, explode):
        assert presence.fold(Absent, 'not_found', explode) == 'not_found'

    def test_absent_fold_without_default(self, explode):
        assert presence.fold(Absent, explode) is None

    @given(payloads.filter(lambda v: v is not None))
    def test_pure_then_fold_is_function(self, value):
        assert presence.fold(presence.pure(value), 'default', repr) == repr(value)


class TestPresenceSequence:
    """Tests for sequence."""

    def test_empty(self):
        assert presence.sequence([]) == Present([])

    def test_all_present(self):
        assert presence.sequence([Present(1), Present(2)]) == Present([1, 2])

    def test_first_absent_short_circuits(self):
        assert presence.sequence([Present(1), Absent, Present(2)]) is Absent

    def test_stops_consuming_after_absent(self):
        consumed = []

        def items():
            for item in (Present(1), Absent, Present(3)):
                consumed.append(item)
                yield item

        assert presence.sequence(items()) is Absent
        assert len(consumed) == 2

    def test_none_element_raises(self):
        with pytest.raises(CallbackContractError, match='presence.sequence'):
            presence.sequence([Present(1), None])

    @given(st.lists(integers))
    def test_all_present_preserves_order(self, values):
        assert presence.sequence([Present(v) for v in values]) == Present(values)

    @given(st.lists(presences))
    def test_absent_anywhere_gives_absent(self, items):
        expected = Absent if Absent in items else Present([item.value for item in items])
        assert presence.sequence(items) == expected


class TestPresenceHooks:
    """Tests for on_present and on_absent."""

    def test_on_present_calls_with_value(self):
        seen = []
        present = Present(1)
        assert presence.on_present(present, seen.append) is present
        assert seen == [1]

    def test_on_present_skips_absent(self, explode):
        assert presence.on_present(Absent, explode) is Absent

    def test_on_absent_calls_without_arguments(self):
        calls = []
        assert presence.on_absent(Absent, lambda: calls.append('empty')) is Absent
        assert calls == ['empty']

    def test_on_absent_skips_present(self, explode):
        present = Present(1)
        assert presence.on_absent(present, explode) is present


class TestPresenceOperators:
    """Tests for the |, >> and << chaining operators."""

    def test_map_operator(self):
        assert Present(1) | (lambda v: v + 1) == Present(2)
        assert (Absent | (lambda v: v + 1)) is Absent

    def test_bind_operator(self):
        assert Present(1) >> (lambda v: Present(v + 1)) == Present(2)
        assert (Present('hello') >> (lambda v: Absent)) is Absent

    def test_fold_operator(self):
        assert Present(1) << (lambda v: v + 1) == 2
        assert (Absent << (lambda v: v + 1)) is None
        assert Absent << ('not_found', lambda v: v + 1) == 'not_found'

    def test_pipeline(self):
        def check_length(text):
            return Absent if len(text) < 20 else Present(len(text))

        chained = (Present('Hello') | (lambda v: v + ' world')) >> check_length
        assert chained is Absent
        assert chained << ('too_short', str) == 'too_short'


class TestPresenceLaws:
    """Property-based tests for the monad laws."""

    @given(integers, presence_fns)
    def test_left_identity(self, value, f):
        assert presence.bind(presence.pure(value), f) == f(value)

    @given(presences)
    def test_right_identity(self, m):
        assert presence.bind(m, presence.pure) == m

    @given(presences, presence_fns, presence_fns)
    def test_associativity(self, m, f, g):
        left = presence.bind(presence.bind(m, f), g)
        right = presence.bind(m, lambda v: presence.bind(f(v), g))
        assert left == right

    @given(presences)
    def test_map_composition(self, m):
        def f(x):
            return x + 1

        def g(x):
            return x * 2

        assert presence.fmap(presence.fmap(m, f), g) == presence.fmap(m, lambda x: g(f(x)))

    def test_outcome_is_not_a_presence(self):
        with pytest.raises(TypeError):
            presence.fmap(Failure('x'), str)
