import pytest

from core.models import Policy
from core.services.flag_parser import (
    MissingOperandError,
    NotImplementedOptionError,
    UnknownOptionError,
    UsageError,
    parse_args,
)


def test_plain_targets_keep_order():
    policy, targets = parse_args(["b.txt", "a.txt", "c"])

    assert policy == Policy()
    assert targets == ["b.txt", "a.txt", "c"]


@pytest.mark.parametrize("tokens", [["-rf"], ["-fr"], ["-r", "-f"], ["-f", "-R"]])
def test_clustered_flags_equal_separate_flags(tokens):
    policy, _ = parse_args([*tokens, "x"])

    assert policy == Policy(recursive=True, force=True)


def test_all_simple_flags():
    policy, _ = parse_args(["-dvP", "x"])

    assert policy.allow_empty_dir_delete
    assert policy.verbose
    assert not policy.recursive


@pytest.mark.parametrize(
    "cluster, expected",
    [
        ("-fi", Policy(prompt_each=True)),
        ("-if", Policy(force=True)),
        ("-iI", Policy(prompt_once_if_many=True)),
        ("-Ii", Policy(prompt_each=True)),
        ("-fIi", Policy(prompt_each=True)),
        ("-iIf", Policy(force=True)),
    ],
)
def test_last_prompting_flag_wins(cluster, expected):
    policy, _ = parse_args([cluster, "x"])

    assert policy == expected


def test_prompting_flags_across_tokens():
    policy, _ = parse_args(["-i", "x", "-f", "y"])

    assert policy.force and not policy.prompt_each


def test_flags_after_targets_still_apply():
    policy, targets = parse_args(["x", "-r"])

    assert policy.recursive
    assert targets == ["x"]


def test_double_dash_ends_options():
    policy, targets = parse_args(["-v", "--", "-r", "--", "plain"])

    assert policy == Policy(verbose=True)
    assert targets == ["-r", "--", "plain"]


def test_single_dash_is_a_target():
    _, targets = parse_args(["-"])

    assert targets == ["-"]


@pytest.mark.parametrize("flag", ["x", "W"])
def test_unsupported_flags_are_rejected(flag):
    with pytest.raises(NotImplementedOptionError) as excinfo:
        parse_args([f"-r{flag}", "target"])

    assert excinfo.value.option == flag
    assert "not implemented" in str(excinfo.value)


def test_unknown_flag_is_rejected():
    with pytest.raises(UnknownOptionError) as excinfo:
        parse_args(["-rq", "target"])

    assert excinfo.value.option == "q"
    assert str(excinfo.value) == "unknown option -- q"


def test_unknown_flag_aborts_even_with_valid_targets_before_it():
    with pytest.raises(UsageError):
        parse_args(["a", "b", "-z"])


@pytest.mark.parametrize("tokens", [[], ["-rf"], ["-v", "--"]])
def test_missing_operand(tokens):
    with pytest.raises(MissingOperandError, match="missing operand"):
        parse_args(tokens)
