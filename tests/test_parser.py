import pytest

from optscan import (
    CommandLineError,
    Flag,
    InvalidValueError,
    MalformedArgumentError,
    Many,
    MissingValueError,
    Number,
    OptionParser,
    OptionSpecError,
    Text,
    UnknownOptionError,
)


def test_positional_arguments_untouched(parser):
    args = ["prog", "a", "b", "c"]
    assert parser.parse(args) is args
    assert args == ["prog", "a", "b", "c"]


def test_program_name_never_scanned(parser):
    args = ["-weird-name", "x"]
    parser.parse(args)
    assert args == ["-weird-name", "x"]


def test_empty_and_single_element_lists(parser):
    args = ["prog"]
    parser.parse(args)
    assert args == ["prog"]

    args = []
    parser.parse(args)
    assert args == []


def test_empty_string_is_positional(parser):
    args = ["prog", "", "a"]
    parser.parse(args)
    assert args == ["prog", "", "a"]


def test_options_removed_and_positionals_compacted(parser):
    verbose, output = Flag(), Text()
    parser.register("v,verbose", verbose, "verbose").register("o,output", output, "output")

    args = ["prog", "a", "-v", "b", "--output", "out.txt", "c"]
    parser.parse(args)

    assert args == ["prog", "a", "b", "c"]
    assert verbose.value is True
    assert output.value == "out.txt"


def test_aliases_share_one_destination(parser):
    tags = Many(Text)
    parser("t,tag,label", tags, "tags")
    parser.parse(["prog", "-t", "a", "--tag", "b", "--label", "c"])
    assert tags.values == ["a", "b", "c"]


def test_bundled_flags_match_separate_flags():
    results = []
    for args in (["prog", "-ab"], ["prog", "-a", "-b"]):
        a, b = Flag(), Flag()
        parser = OptionParser()
        parser.register("a", a, "").register("b", b, "")
        parser.parse(args)
        results.append((a.value, b.value, args))
    assert results[0] == results[1] == (True, True, ["prog"])


def test_short_option_attached_value(parser):
    output = Text()
    parser.register("o", output, "")
    args = ["prog", "-ofoo", "bar"]
    parser.parse(args)
    assert output.value == "foo"
    assert args == ["prog", "bar"]


def test_short_option_separate_value(parser):
    output = Text()
    parser.register("o", output, "")
    args = ["prog", "-o", "foo", "bar"]
    parser.parse(args)
    assert output.value == "foo"
    assert args == ["prog", "bar"]


def test_value_option_takes_rest_of_bundle(parser):
    a, verbose = Text(), Flag()
    parser.register("a", a, "").register("v", verbose, "")
    parser.parse(["prog", "-avfoo"])
    assert a.value == "vfoo"
    assert verbose.value is False


def test_flag_then_value_in_one_bundle(parser):
    verbose, output = Flag(), Text()
    parser.register("v", verbose, "").register("o", output, "")
    args = ["prog", "-vofile", "rest"]
    parser.parse(args)
    assert verbose.value is True
    assert output.value == "file"
    assert args == ["prog", "rest"]


def test_value_may_start_with_dash(parser):
    output = Text()
    parser.register("output", output, "")
    parser.parse(["prog", "--output", "-x"])
    assert output.value == "-x"


def test_accumulator_grows_in_order(parser):
    tags = Many(Text)
    parser.register("tag", tags, "")
    parser.parse(["prog", "--tag", "x", "--tag", "y", "--tag", "z"])
    assert tags.values == ["x", "y", "z"]
    assert len(tags) == 3


def test_accumulator_of_flags_and_numbers(parser):
    verbosity, sizes = Many(Flag), Many(lambda: Number(float))
    parser.register("v", verbosity, "").register("s,size", sizes, "")
    parser.parse(["prog", "-vvv", "-s1.5", "--size", "2"])
    assert verbosity.values == [True, True, True]
    assert sizes.values == [1.5, 2.0]


def test_nested_accumulator(parser):
    groups = Many(lambda: Many(Text))
    parser.register("g", groups, "")
    parser.parse(["prog", "-g", "a", "-gb"])
    assert groups.values == [["a"], ["b"]]


def test_number_conversion(parser):
    count = Number(int)
    parser.register("n,count", count, "")
    parser.parse(["prog", "--count", "42"])
    assert count.value == 42


def test_number_conversion_failure(parser):
    parser.register("n,count", Number(int), "")
    with pytest.raises(InvalidValueError) as excinfo:
        parser.parse(["prog", "-nabc"])
    assert excinfo.value.token == "-nabc"
    assert excinfo.value.value == "abc"


def test_end_of_options_marker(parser):
    bar = Flag()
    parser.register("b,a,r", bar, "")
    args = ["prog", "foo", "--", "-bar", "--baz"]
    parser.parse(args)
    assert args == ["prog", "foo", "-bar", "--baz"]
    assert bar.value is False


def test_end_of_options_marker_after_options(parser):
    verbose = Flag()
    parser.register("v", verbose, "")
    args = ["prog", "-v", "x", "--", "-v", "--"]
    parser.parse(args)
    assert args == ["prog", "x", "-v", "--"]


def test_lone_dash_is_malformed(parser):
    with pytest.raises(MalformedArgumentError) as excinfo:
        parser.parse(["prog", "-"])
    assert excinfo.value.token == "-"


def test_unknown_long_option_reports_token(parser):
    with pytest.raises(UnknownOptionError) as excinfo:
        parser.parse(["prog", "--zzz"])
    assert excinfo.value.token == "--zzz"
    assert "--zzz" in str(excinfo.value)


def test_unknown_short_option_in_bundle_reports_whole_token(parser):
    parser.register("a", Flag(), "")
    with pytest.raises(UnknownOptionError) as excinfo:
        parser.parse(["prog", "-az"])
    assert excinfo.value.token == "-az"


def test_missing_value_for_trailing_option(parser):
    parser.register("o,output", Text(), "")
    with pytest.raises(MissingValueError) as excinfo:
        parser.parse(["prog", "--output"])
    assert excinfo.value.token == "--output"

    with pytest.raises(MissingValueError):
        parser.parse(["prog", "a", "-o"])


def test_errors_share_base_class(parser):
    for args in (["prog", "-"], ["prog", "--nope"]):
        with pytest.raises(CommandLineError):
            parser.parse(args)


def test_last_registration_wins(parser):
    first, second = Flag(), Flag()
    parser.register("x", first, "").register("x", second, "")
    parser.parse(["prog", "-x"])
    assert first.value is False
    assert second.value is True


def test_register_rejects_bad_names(parser):
    with pytest.raises(OptionSpecError):
        parser.register("o,,output", Text(), "")
    with pytest.raises(OptionSpecError):
        parser.register("--output", Text(), "")
    assert not parser.is_registered("o")


def test_register_rejects_unknown_destination(parser):
    with pytest.raises(OptionSpecError):
        parser.register("x", object(), "")


def test_parse_defaults_to_sys_argv(parser, monkeypatch):
    argv = ["prog", "-v", "file"]
    monkeypatch.setattr("sys.argv", argv)
    verbose = Flag()
    parser.register("v", verbose, "")
    assert parser.parse() is argv
    assert argv == ["prog", "file"]
    assert verbose.value is True


@pytest.mark.parametrize("element", [int, lambda: object()])
def test_register_rejects_unsupported_list_element(parser, element):
    with pytest.raises(OptionSpecError):
        parser.register("x", Many(element), "")
    assert not parser.is_registered("x")
