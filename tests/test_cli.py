"""Tests for the command line interface"""
import argparse

import pytest

from record_deduper.cli import load_alias_file, main, parse_key_option, unescape_separator
from record_deduper.common.exceptions import ConfigurationError


@pytest.fixture
def pipe_file(tmp_path, pipe_records):
    path = tmp_path / "people.txt"
    path.write_text("\n".join(pipe_records) + "\n")
    return path


@pytest.fixture
def alias_file(tmp_path):
    path = tmp_path / "nick_names.yaml"
    path.write_text("Bob: Robert\nRob: Robert\n")
    return path


def test_parse_key_option():
    assert parse_key_option("field=2, ignore-case,ignore_whitespace") == {
        'field_number': 2,
        'ignore_case': True,
        'ignore_whitespace': True,
    }
    assert parse_key_option("start=3,length=6") == {'start_pos': 3, 'key_length': 6}


def test_parse_key_option_rejects_bad_input():
    with pytest.raises(argparse.ArgumentTypeError, match="Unknown"):
        parse_key_option("colour=red")
    with pytest.raises(argparse.ArgumentTypeError, match="integer"):
        parse_key_option("field=two")


def test_alias_file_values_are_strings(tmp_path):
    path = tmp_path / "aliases.yaml"
    path.write_text("'007': Bond\nyes: 'no'\n")

    assert load_alias_file(str(path)) == {'007': 'Bond', 'True': 'no'}


def test_alias_file_must_be_a_mapping(tmp_path):
    path = tmp_path / "aliases.yaml"
    path.write_text("- Bob\n")

    with pytest.raises(ConfigurationError):
        load_alias_file(str(path))


def test_unescape_separator():
    assert unescape_separator(r"\t") == "\t"
    assert unescape_separator("|") == "|"


def test_pipe_scenario_end_to_end(pipe_file, alias_file, pipe_records, capsys):
    exit_code = main([
        str(pipe_file),
        "--separator", "|",
        "--key", f"field=2,ignore-case,ignore-whitespace,alias={alias_file}",
        "--key", "field=3,ignore-case",
    ])

    assert exit_code == 0
    uniques = (pipe_file.parent / "people_uniqs.txt").read_text().splitlines()
    dupes = (pipe_file.parent / "people_dupes.txt").read_text().splitlines()
    assert uniques == [pipe_records[i] for i in (0, 2, 3, 4)]
    assert dupes == [pipe_records[1], pipe_records[5]]
    assert "4 unique" in capsys.readouterr().out


def test_fixed_width_end_to_end(tmp_path, fixed_width_records, alias_file):
    path = tmp_path / "people.dat"
    path.write_text("\n".join(fixed_width_records) + "\n")
    unique_out = tmp_path / "keep.dat"

    exit_code = main([
        str(path),
        "--key", f"start=3,length=6,ignore-case,ignore-whitespace,alias={alias_file}",
        "--key", "start=10,length=8,ignore-case",
        "--unique-out", str(unique_out),
    ])

    assert exit_code == 0
    assert len(unique_out.read_text().splitlines()) == 4
    assert len((tmp_path / "people_dupes.dat").read_text().splitlines()) == 2


def test_regex_separator(tmp_path):
    path = tmp_path / "names.txt"
    path.write_text("1 Bob  Smith\n2 Bob Smith\n")

    assert main([str(path), "--separator-regex", r"\s+", "--key", "field=2", "--key", "field=3"]) == 0
    assert (tmp_path / "names_dupes.txt").read_text() == "2 Bob Smith\n"


def test_mixed_modes_exit_with_configuration_error(pipe_file, capsys):
    exit_code = main([str(pipe_file), "--separator", "|", "--key", "start=1,length=2"])

    assert exit_code == 2
    assert "Configuration error" in capsys.readouterr().err
    assert not (pipe_file.parent / "people_uniqs.txt").exists()


def test_fixed_width_key_needs_length(pipe_file):
    assert main([str(pipe_file), "--key", "start=3"]) == 2


def test_invalid_regex(pipe_file):
    assert main([str(pipe_file), "--separator-regex", "("]) == 2


def test_missing_input_exits_with_io_error(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "not found" in capsys.readouterr().err


def test_unknown_key_option_is_a_usage_error(pipe_file):
    with pytest.raises(SystemExit) as exc_info:
        main([str(pipe_file), "--key", "colour=red"])

    assert exc_info.value.code == 2


def test_missing_config_file(pipe_file, tmp_path):
    assert main([str(pipe_file), "--config", str(tmp_path / "nope.yaml")]) == 2
