# tests/unit/test_cannot.py
"""
Tests for the structured error type.

Tests cover:
- Construction and identity
- Codified fields and codes
- Write-once reason, subject, data and info
- Behaviour as a Python exception
"""

import copy
import pickle
from datetime import datetime
from types import SimpleNamespace

import pytest

from cannot import (
    Cannot,
    cannot,
    InvalidArgumentsError,
    InvalidReasonTypeError,
    ReasonAlreadySetError,
    SubjectAlreadySetError,
    UsageError,
)


class TestConstruction:
    """Creating errors"""

    def test_create_from_arguments(self):
        err = Cannot("load", "something", "there is nothing to load")

        assert err.code == "cannot_load_something"
        assert err.verb == "load"
        assert err.object == "something"
        assert err.reason == "there_is_nothing_to_load"
        assert isinstance(err, Exception)

    def test_function_form_is_equivalent(self):
        err = cannot("load", "something", "there is nothing to load")
        err2 = Cannot("load", "something", "there is nothing to load")

        assert isinstance(err, Cannot)
        assert err.code == err2.code
        assert err.reason == err2.reason
        assert err.message == err2.message

    def test_is_error(self):
        assert Cannot("load", "something").is_error is True

    @pytest.mark.parametrize("verb,obj", [(None, "user"), ("load", None), ("", "user"), ("load", "")])
    def test_missing_verb_or_object(self, verb, obj):
        with pytest.raises(InvalidArgumentsError) as exc_info:
            Cannot(verb, obj)

        err = exc_info.value
        assert isinstance(err, Cannot)
        assert err.code == "cannot_create_error"
        assert err.reason == "verb_or_object_is_missing"

    def test_ids_are_unique_and_increasing(self):
        first = Cannot("load", "user")
        second = Cannot("load", "user")

        assert second.id > first.id

    def test_id_and_created_at_are_read_only(self):
        err = Cannot("load", "user")

        assert isinstance(err.created_at, datetime)
        assert err.created_at.tzinfo is not None
        with pytest.raises(AttributeError):
            err.id = 1
        with pytest.raises(AttributeError):
            err.created_at = None

    def test_multiword_verb_codified(self):
        err = Cannot("connect to", "Database")

        assert err.verb == "connect_to"
        assert err.object == "database"
        assert err.code == "cannot_connect_to_database"

    def test_code_ignores_casing_and_spacing(self):
        assert Cannot("Load", "The  User").code == Cannot("load", "the user").code


class TestReason:
    """Reason handling and the write-once rule"""

    def test_string_reason(self):
        err = Cannot("load", "something").because("string reason")
        assert err.reason == "string_reason"

    def test_none_and_empty_reasons_are_ignored(self):
        assert Cannot("do", "something").because(None).reason == ""
        assert Cannot("do", "something").because("").reason == ""

    def test_reason_with_code_attribute(self):
        err = Cannot("do", "something")
        err.reason = SimpleNamespace(code="something_else")

        assert err.reason == "something_else"

    def test_reason_mapping_with_code(self):
        err = Cannot("do", "something").because({"code": "Ground_Zero"})

        # codes are taken verbatim
        assert err.reason == "Ground_Zero"

    def test_reason_without_code_is_rejected(self):
        err = Cannot("do", "something")

        with pytest.raises(InvalidReasonTypeError) as exc_info:
            err.reason = {"none": "something_else"}

        assert exc_info.value.code == "cannot_set_reason"
        assert isinstance(exc_info.value, UsageError)

    def test_invalid_reason_fails_construction(self):
        with pytest.raises(InvalidReasonTypeError):
            Cannot("do", "something", 42)

    def test_exception_reason(self):
        cause = Exception("What the heck")
        err = Cannot("do", "something").because(cause)

        assert err.reason == "error_what_the_heck"
        assert err.cause is cause
        assert err.__cause__ is cause

    def test_exception_with_empty_message(self):
        err = Cannot("do", "something").because(ValueError(""))

        assert err.reason == "error"

    def test_cannot_reason_gives_its_code(self):
        err = Cannot("load", "user").because(Cannot("connect to", "database"))

        assert err.reason == "cannot_connect_to_database"

    def test_reason_can_only_be_set_once(self):
        err = Cannot("load", "user").because("first")

        with pytest.raises(ReasonAlreadySetError) as exc_info:
            err.because("second")

        assert exc_info.value.code == "cannot_overwrite_reason"
        assert err.reason == "first"

    def test_reason_from_constructor_cannot_be_replaced(self):
        err = Cannot("load", "user", "first")

        with pytest.raises(ReasonAlreadySetError):
            err.reason = "second"

    def test_empty_reason_after_set_is_a_noop(self):
        err = Cannot("load", "user").because("first").because(None)
        assert err.reason == "first"


class TestSubject:
    """Grammatical subject of the message"""

    def test_default_subject(self):
        assert Cannot("fly", "away").subject == "I"

    def test_set_subject(self):
        err = Cannot("fly", "away")
        err.subject = "Alice"

        assert err.subject == "Alice"
        assert err.message == "Alice could not fly away. (No reason)"

    def test_subject_can_be_set_after_reading_the_default(self):
        err = Cannot("fly", "away")
        assert err.message == "I could not fly away. (No reason)"

        err.subject = "Alice"
        assert err.message == "Alice could not fly away. (No reason)"

    def test_subject_can_only_be_set_once(self):
        err = Cannot("fly", "away")
        err.subject = "Alice"

        with pytest.raises(SubjectAlreadySetError):
            err.subject = "Bob"
        assert err.subject == "Alice"


class TestData:
    """Payload attached for programmatic consumers"""

    def test_add_data(self):
        err = Cannot("fly into", "the sky").add_data({"key": "value"})
        assert err.data == {"key": "value"}

    def test_data_defaults_to_none(self):
        assert Cannot("fly into", "the sky").data is None

    def test_empty_data_does_not_overwrite(self):
        err = Cannot("fly into", "the sky").add_data({"key": "value"}).add_data(None)
        assert err.data == {"key": "value"}

    def test_empty_data_alone(self):
        assert Cannot("fly into", "the sky").add_data(None).data is None

    def test_first_data_wins(self):
        err = Cannot("fly into", "the sky").add_data({"key": "value"}).add_data({"other": 1})
        assert err.data == {"key": "value"}


class TestInfo:
    """Supplementary info text"""

    def test_info_alias(self):
        err = Cannot("fly into", "the sky").info("additional stuff")
        assert err.info_text == "additional stuff"

    def test_first_info_wins(self):
        err = Cannot("fly into", "the sky").add_info("first").add_info("second")
        assert err.info_text == "first"


class TestAsException:
    """Raising and catching"""

    def test_raise_and_catch(self):
        with pytest.raises(Cannot) as exc_info:
            raise Cannot("load", "user", "connection was lost")

        assert str(exc_info.value) == "I could not load user, because connection was lost."

    def test_to_string(self):
        err = Cannot("load", "something").because("string reason")
        assert err.to_string() == "Cannot: I could not load something, because string reason."

    def test_args_hold_inputs(self):
        err = Cannot("load", "user", "gone")
        assert err.args == ("load", "user", "gone")

    def test_recovery_by_chaining(self):
        def connect():
            raise Cannot("connect to", "database", "the host is unreachable")

        def load_user():
            try:
                connect()
            except Cannot as e:
                raise Cannot("load", "user").because(e)

        with pytest.raises(Cannot) as exc_info:
            load_user()

        err = exc_info.value
        assert err.reason == "cannot_connect_to_database"
        assert isinstance(err.__cause__, Cannot)


class TestCopy:
    """Copying and pickling"""

    def test_copy_has_its_own_options(self):
        err = Cannot("load", "user")
        other = copy.copy(err)
        other.because("disk full")

        assert other.reason == "disk_full"
        assert err.reason == ""
        assert err.message == "I could not load user. (No reason)"

    def test_copy_keeps_options(self):
        err = Cannot("load", "user", "gone").add_data({"id": 1}).add_info("retry later")
        err.subject = "Database"
        other = copy.copy(err)

        assert other is not err
        assert other.message == err.message
        assert other.data == {"id": 1}
        assert other.args == ("load", "user", "gone")
        assert other.created_at == err.created_at
        assert other.id != err.id
        with pytest.raises(ReasonAlreadySetError):
            other.because("again")

    def test_copy_keeps_exception_cause(self):
        cause = ValueError("boom")
        other = copy.copy(Cannot("load", "user").because(cause))

        assert other.__cause__ is cause
        assert other.reason == "error_boom"

    def test_copy_keeps_instance_extensions(self):
        err = Cannot("load", "user")
        err.extend("label", "x")
        err.extend("tag", lambda e: f"#{e.id}", type="get")
        other = copy.copy(err)

        assert other.label == "x"
        assert other.tag == f"#{other.id}"

    def test_copy_matcher_is_bound_to_copy(self):
        err = Cannot("load", "user")
        other = copy.copy(err)

        assert other.matches is not err.matches
        assert other.matches._err is other

    def test_deepcopy_of_chain(self):
        err = Cannot("load", "user").because(Cannot("connect to", "database"))
        other = copy.deepcopy(err)

        assert other.cause is not err.cause
        assert other.message == err.message

    def test_pickle_round_trip(self):
        err = Cannot("load", "user").because(Cannot("connect to", "database", "timeout"))
        err.add_info("retry later")
        restored = pickle.loads(pickle.dumps(err))

        assert type(restored) is Cannot
        assert restored.message == err.message
        assert restored.code == err.code
        assert restored.cause.reason == "timeout"
        assert restored.matches("load", "user")

    def test_pickle_usage_error(self):
        err = InvalidArgumentsError()
        restored = pickle.loads(pickle.dumps(err))

        assert isinstance(restored, InvalidArgumentsError)
        assert restored.reason == err.reason
