import pytest

import progopts.errors
from progopts.errors import ConversionFailure, ErrorKind, OptionValueError


class TestHierarchy:
    @pytest.mark.parametrize(
        "error",
        [
            progopts.errors.SpecificationError("x", ErrorKind.FLAG_CONFLICT),
            progopts.errors.InvalidOptionError("-x", ErrorKind.INVALID_SHORT_OPTION),
            progopts.errors.MultipleInstancesError("all"),
            progopts.errors.MissingArgumentError("x", "color"),
            progopts.errors.OptionNotGivenError("color"),
            OptionValueError("size", "x", ConversionFailure.PARSE),
        ],
    )
    def test_base(self, error):
        assert isinstance(error, progopts.errors.OptionsError)
        assert isinstance(error, ValueError)

    def test_kinds(self):
        assert (
            progopts.errors.MultipleInstancesError("all").kind
            is ErrorKind.MULTIPLE_INSTANCES
        )
        assert (
            progopts.errors.MissingArgumentError("x", "color").kind
            is ErrorKind.MISSING_OPTION_ARGUMENT
        )
        assert (
            progopts.errors.OptionNotGivenError("color").kind
            is ErrorKind.OPTION_NOT_GIVEN
        )
        assert (
            OptionValueError("size", "x", ConversionFailure.UNKNOWN).kind
            is ErrorKind.OPTION_VALUE_ERROR
        )

    def test_invalid_option(self):
        error = progopts.errors.InvalidOptionError(
            "--everything", ErrorKind.INVALID_LONG_OPTION
        )
        assert error.argument == "--everything"
        assert str(error) == "Invalid option specified: --everything"


class TestOptionValueError:
    def test_parse(self):
        error = OptionValueError("size", "abc", ConversionFailure.PARSE)
        assert str(error) == 'Invalid argument value for "size": abc'
        assert error.option_name == "size"
        assert error.value == "abc"
        assert error.reason is ConversionFailure.PARSE

    def test_range(self):
        error = OptionValueError(
            "size", "200", ConversionFailure.RANGE, lower=0, upper=99
        )
        assert str(error) == (
            'Argument value for "size" is out-of-range: 200 [valid range is 0 .. 99]'
        )
        assert error.lower == 0
        assert error.upper == 99

    def test_range_unbounded(self):
        error = OptionValueError("size", "-5", ConversionFailure.RANGE, lower=0)
        assert str(error) == (
            'Argument value for "size" is out-of-range: -5 '
            "[valid range is 0 .. unbounded]"
        )

    def test_unknown(self):
        error = OptionValueError("size", "20", ConversionFailure.UNKNOWN)
        assert str(error) == 'Unknown error converting argument "size": 20'

    def test_no_value(self):
        error = OptionValueError("size", None, ConversionFailure.UNKNOWN)
        assert str(error) == 'Unknown error converting argument "size": <unknown>'
        assert error.value is None
