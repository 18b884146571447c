import io

import pytest

from vslc.options import Action, OptionParser


def parse(*args):
    err = io.StringIO()
    parser = OptionParser(err=err).parse(list(args))
    return parser, err.getvalue()


def test_defaults():
    parser, err = parse()
    assert parser.action is Action.COMPILE
    assert parser.optimize is False
    assert parser.infile is None
    assert parser.outfile == "a.out"
    assert err == ""


@pytest.mark.parametrize(
    "flag, action",
    [
        ("-h", Action.DISPLAY_HELP),
        ("--help", Action.DISPLAY_HELP),
        ("-l", Action.REPL_LEX),
        ("-p", Action.REPL_PARSE),
        ("-g", Action.REPL_GENERATE),
    ],
)
def test_action_flags(flag, action):
    parser, _ = parse(flag)
    assert parser.action is action


def test_last_action_wins():
    parser, _ = parse("-l", "-p")
    assert parser.action is Action.REPL_PARSE


def test_output_file():
    parser, err = parse("-o", "prog.o", "main.vsl")
    assert parser.outfile == "prog.o"
    assert parser.infile == "main.vsl"
    assert err == ""


def test_missing_output_file():
    parser, err = parse("-o")
    assert parser.outfile == "a.out"
    assert err == "Error: no output file given\n"
    assert parser.errors == ["Error: no output file given"]


def test_optimization_levels():
    assert parse("-O1")[0].optimize is True
    assert parse("-O1", "-O0")[0].optimize is False


def test_optimization_level_checks_first_character_only():
    parser, err = parse("-O1x")
    assert parser.optimize is True
    assert err == ""


def test_missing_optimization_level():
    parser, err = parse("-O")
    assert parser.optimize is False
    assert err == "Error: No optimization level specified.\n"


def test_unknown_optimization_level():
    parser, _ = parse("-O3")
    assert parser.errors == ["Error: Unknown optimization level '3'"]
    assert parser.optimize is False


def test_unknown_flag_is_reported_and_parsing_continues():
    parser, _ = parse("-z", "in.vsl")
    assert parser.errors == ["Error: unknown flag '-z'"]
    assert parser.infile == "in.vsl"


def test_dash_means_stdin():
    parser, err = parse("-")
    assert parser.infile == "-"
    assert err == ""


def test_multiple_input_files_rejected():
    parser, _ = parse("a.vsl", "b.vsl")
    assert parser.infile == "a.vsl"
    assert parser.errors == [
        "Error: VSL currently doesn't support multiple input files"
    ]


def test_errors_go_to_stderr_by_default(capsys):
    OptionParser().parse(["-q"])
    assert capsys.readouterr().err == "Error: unknown flag '-q'\n"