import pytest

from argcheck.messages.render import system_id
from argcheck.messages.template import WELL_KNOWN, format_message, normalize

ARGS = ("TEST", "VALUE", "TYPE", "ARG_NAME", "OBJ", "extra1", "extra2", "extra3")


def test_named_tokens_are_substituted():
    out = format_message('Check "${test}" did not go well for argument ${name}', ARGS)
    assert out == 'Check "TEST" did not go well for argument ARG_NAME'


def test_integer_tokens_refer_to_extra_arguments():
    assert format_message("Watch out for ${0} when using ${2}", ARGS) == "Watch out for extra1 when using extra3"


def test_type_arg_and_obj_tokens():
    assert format_message("Unexpected type: ${type}", ARGS) == "Unexpected type: TYPE"
    assert format_message("${arg} has no relation to ${obj}", ARGS) == "VALUE has no relation to OBJ"


@pytest.mark.parametrize("name, index", list(zip(WELL_KNOWN, range(5))))
def test_each_well_known_name_maps_to_its_slot(name, index):
    args = ["a", "b", "c", "d", "e"]
    args[index] = "X"
    assert format_message("${" + name + "}", args) == "X"


def test_name_slot_holds_argument_name():
    assert format_message("${name}", ["t", 1, "int", "X", None]) == "X"


@pytest.mark.parametrize(
    "fmt",
    [
        "",
        "plain text",
        "costs $5 {not a token}",
        "100% {0} %s",
    ],
)
def test_template_without_tokens_is_unchanged(fmt):
    assert format_message(fmt, ARGS) == fmt


def test_unknown_names_are_preserved():
    fmt = 'Check "${test2}" did not go well for argument ${name0}'
    assert format_message(fmt, ARGS) == fmt


def test_unknown_token_in_middle_is_preserved():
    out = format_message("${arg} did not relate to ${skunk} (sorry)", ARGS)
    assert out == "VALUE did not relate to ${skunk} (sorry)"


def test_out_of_range_index_is_preserved():
    assert format_message("${arg} did not relate to ${9}", ARGS) == "VALUE did not relate to ${9}"


@pytest.mark.parametrize("n", [3, 4, 10, 99])
def test_indices_beyond_vector_are_preserved(n):
    assert format_message("${%d}" % n, ARGS) == "${%d}" % n


def test_scenario_named_and_positional():
    args = ["gte", 3, "int", "count", 10, 10]
    assert format_message("${name} must be >= ${0}", args) == "count must be >= 10"


def test_scenario_unresolved_positional():
    args = ["gt", "subject", "str", "s", None, 1, 2, 3]
    assert format_message("${arg} is ${5}", args) == "subject is ${5}"


@pytest.mark.parametrize(
    "fmt, expected",
    [
        ("${arg} relates to $", "VALUE relates to $"),
        ("${arg} relates to ${", "VALUE relates to ${"),
        ("${arg} relates to ${a", "VALUE relates to ${a"),
        ("${arg} relates to ${arg", "VALUE relates to ${arg"),
        ("...${abc", "...${abc"),
        ("$", "$"),
        ("${", "${"),
    ],
)
def test_unterminated_tokens_are_copied_through(fmt, expected):
    assert format_message(fmt, ARGS) == expected


def test_bare_dollar_is_literal():
    assert format_message("$$ and $name and ${name}", ARGS) == "$$ and $name and ARG_NAME"


def test_dollar_directly_before_token():
    assert format_message("$${name}", ARGS) == "$ARG_NAME"


def test_whitespace_inside_braces_is_not_trimmed():
    assert format_message("${ name }", ARGS) == "${ name }"
    assert format_message("${ 0}", ARGS) == "${ 0}"


def test_empty_and_signed_bodies_are_unresolved():
    assert format_message("${}", ARGS) == "${}"
    assert format_message("${-1}", ARGS) == "${-1}"
    assert format_message("${+1}", ARGS) == "${+1}"


def test_tokens_do_not_nest():
    assert format_message("${a${name}}", ARGS) == "${a${name}}"


class Broken:
    def __str__(self) -> str:
        raise RuntimeError("boom")


def test_unprintable_values_fall_back_to_identity():
    value = Broken()
    out = format_message("${arg} / ${0}", ["t", value, "Broken", "n", None, value])
    assert out == f"{system_id(value)} / {system_id(value)}"


def test_none_values_render_as_null():
    assert format_message("${obj} / ${0}", ["t", "v", "str", "n", None, None]) == "null / null"


def test_extra_arguments_use_their_text_form():
    assert format_message("${0} ${1}", ["t", "v", "str", "n", None, 1.5, [1, 2]]) == "1.5 [1, 2]"


def test_short_vector_does_not_raise():
    assert format_message("${name} ${obj}", ["t"]) == "${name} ${obj}"


def test_normalize_rewrites_tokens_to_positional_fields():
    assert normalize("${test} ${arg} ${type} ${name} ${obj} ${0} ${3}") == "{0} {1} {2} {3} {4} {5} {8}"


def test_normalize_escapes_literal_braces_and_keeps_unknown_tokens():
    out = normalize("{x} ${skunk} ${name}")
    assert out == "{{x}} ${{skunk}} {3}"
    assert out.format(*ARGS) == "{x} ${skunk} ARG_NAME"


def test_normalize_agrees_with_format_message():
    fmt = "Check ${test} on ${name}: ${0} vs ${2} ($ ${"
    assert normalize(fmt).format(*ARGS) == format_message(fmt, ARGS)


def test_normalize_empty_string():
    assert normalize("") == ""
