import dataclasses

import pytest

import progopts
import progopts.spec
from progopts.errors import ErrorKind, SpecificationError
from progopts.spec import DOS_FLAGS, POSIX_FLAGS, FlagSet, Option

LS_OPTIONS = [
    Option("all", "a", "all"),
    Option("pattern", "p", "pattern", True, True),
    Option("color", "c", "color", False, True),
    Option("size", "s", "min-size", False, True),
]


class TestOption:
    def test_defaults(self):
        option = Option("verbose")
        assert option.short_form == ""
        assert option.long_form == ""
        assert option.allow_multiple is False
        assert option.expects_value is False

    def test_positional_fields(self):
        option = Option("pattern", "p", "pattern", True, True)
        assert option.allow_multiple is True
        assert option.expects_value is True

    def test_frozen(self):
        option = Option("all", "a", "all")
        with pytest.raises(dataclasses.FrozenInstanceError):
            option.name = "none"  # type: ignore

    def test_equality(self):
        assert Option("all", "a", "all") == Option("all", "a", "all")
        assert Option("all", "a", "all") != Option("all", "A", "all")


class TestFlagSet:
    def test_posix(self):
        assert POSIX_FLAGS.short_flags == ("-",)
        assert POSIX_FLAGS.long_flags == ("--",)
        assert POSIX_FLAGS.separator == "="
        assert POSIX_FLAGS.case_insensitive is False

    def test_dos(self):
        assert DOS_FLAGS.short_flags == ("-",)
        assert DOS_FLAGS.long_flags == ("/",)
        assert DOS_FLAGS.separator == ":"
        assert DOS_FLAGS.case_insensitive is True

    def test_lists_become_tuples(self):
        flags = FlagSet(short_flags=["-", "+"], long_flags=["--"])
        assert flags.short_flags == ("-", "+")
        assert flags.long_flags == ("--",)
        assert hash(flags) == hash(FlagSet(("-", "+"), ("--",)))

    def test_plain_string_rejected(self):
        with pytest.raises(TypeError, match="short_flags"):
            FlagSet(short_flags="-")  # type: ignore
        with pytest.raises(TypeError, match="long_flags"):
            FlagSet(long_flags="--")  # type: ignore


class TestValidate:
    def test_valid(self):
        progopts.spec.validate_options(LS_OPTIONS, POSIX_FLAGS)
        progopts.spec.validate_options(LS_OPTIONS, DOS_FLAGS)

    def test_empty(self):
        progopts.spec.validate_options([], POSIX_FLAGS)

    def test_flag_conflict(self):
        flags = FlagSet(short_flags=("-",), long_flags=("-",))
        with pytest.raises(SpecificationError) as exc_info:
            progopts.spec.validate_options(LS_OPTIONS, flags)
        assert exc_info.value.kind is ErrorKind.FLAG_CONFLICT
        assert str(exc_info.value) == "Conflicting option flag symbols"

    def test_flag_conflict_among_several(self):
        flags = FlagSet(short_flags=("-", "/"), long_flags=("--", "/"))
        with pytest.raises(SpecificationError) as exc_info:
            progopts.spec.validate_options([], flags)
        assert exc_info.value.kind is ErrorKind.FLAG_CONFLICT

    def test_flag_conflict_checked_first(self):
        flags = FlagSet(short_flags=("-",), long_flags=("-",))
        with pytest.raises(SpecificationError) as exc_info:
            progopts.spec.validate_options([Option("", "a")], flags)
        assert exc_info.value.kind is ErrorKind.FLAG_CONFLICT

    def test_empty_name(self):
        with pytest.raises(SpecificationError) as exc_info:
            progopts.spec.validate_options([Option("", "a", "all")], POSIX_FLAGS)
        assert exc_info.value.kind is ErrorKind.EMPTY_IDENTIFIER_NAME
        assert str(exc_info.value) == "Empty option identifier found"

    def test_duplicate_name(self):
        options = LS_OPTIONS + [Option("all", "A", "ALL")]
        with pytest.raises(SpecificationError) as exc_info:
            progopts.spec.validate_options(options, POSIX_FLAGS)
        assert exc_info.value.kind is ErrorKind.DUPLICATE_IDENTIFIER
        assert str(exc_info.value) == "Duplicate option identifier found: all"

    def test_duplicate_short(self):
        options = LS_OPTIONS + [Option("almost-all", "a", "almost-all")]
        with pytest.raises(SpecificationError) as exc_info:
            progopts.spec.validate_options(options, POSIX_FLAGS)
        assert exc_info.value.kind is ErrorKind.DUPLICATE_SHORT_OPTION
        assert str(exc_info.value) == "Duplicate short option observed: a"

    def test_duplicate_long(self):
        options = LS_OPTIONS + [Option("everything", "e", "all")]
        with pytest.raises(SpecificationError) as exc_info:
            progopts.spec.validate_options(options, POSIX_FLAGS)
        assert exc_info.value.kind is ErrorKind.DUPLICATE_LONG_OPTION
        assert str(exc_info.value) == "Duplicate long option observed: all"

    def test_long_short_form(self):
        with pytest.raises(SpecificationError) as exc_info:
            progopts.spec.validate_options([Option("all", "ab")], POSIX_FLAGS)
        assert exc_info.value.kind is ErrorKind.INVALID_SHORT_OPTION
        assert (
            str(exc_info.value) == "A short option contains more than one character: ab"
        )

    def test_long_short_form_reported_on_first_occurrence(self):
        options = [Option("first", "ab"), Option("second", "ab")]
        with pytest.raises(SpecificationError) as exc_info:
            progopts.spec.validate_options(options, POSIX_FLAGS)
        assert exc_info.value.kind is ErrorKind.INVALID_SHORT_OPTION

    def test_duplicates_are_case_sensitive(self):
        options = [Option("lower", "a", "all"), Option("upper", "A", "ALL")]
        progopts.spec.validate_options(options, DOS_FLAGS)

    def test_empty_forms_are_not_duplicates(self):
        options = [
            Option("short-only", "s"),
            Option("long-only", long_form="long"),
            Option("other-long", long_form="other"),
            Option("other-short", "o"),
        ]
        progopts.spec.validate_options(options, POSIX_FLAGS)

    def test_no_forms_warns(self):
        with pytest.warns(progopts.ProgoptsWarning, match="'hidden'"):
            progopts.spec.validate_options([Option("hidden")], POSIX_FLAGS)
