import json

import pytest

from gamezer.geometry import Block
from gamezer.instance import (
    SEPARATOR,
    Entry,
    Instance,
    Section,
    format_instance,
    format_section,
    load_instance,
    parse_instance,
    parse_section,
)

LEVEL = {
    "w": 40,
    "h": 30,
    "blocks": [
        {"x": 0, "y": 0, "w": 40, "h": 1},
        {"x": 10.5, "y": 4, "w": 2, "h": 0.5},
    ],
    "left": {"w": 7, "h": 30, "blocks": []},
    "right": {"w": 5, "h": 30, "blocks": [{"x": 1, "y": 1, "w": 1, "h": 1}]},
    "up": None,
}


def test_parse_section_reads_fields_and_blocks():
    section = parse_section(LEVEL)
    assert section.w == 40
    assert section.h == 30
    assert section.blocks == [Block(0, 0, 40, 1), Block(10.5, 4, 2, 0.5)]
    assert section.left.w == 7
    assert section.right.blocks == [Block(1, 1, 1, 1)]
    assert section.up is None
    assert section.down is None


def test_parse_section_none():
    assert parse_section(None) is None


def test_parse_instance_sets_start_and_current():
    instance = parse_instance(json.dumps(LEVEL))
    assert instance.start_section is instance.current_section
    assert instance.entry is Entry.LEFT
    assert instance.start_section.w == 40


def test_parse_instance_null_root():
    instance = parse_instance("null")
    assert instance.start_section is None
    assert instance.current_section is None


@pytest.mark.parametrize(
    "node",
    [
        [1, 2],
        {"w": "wide"},
        {"w": True},
        {"blocks": {"x": 1}},
        {"blocks": [3]},
        {"blocks": [{"x": "left"}]},
        {"right": 5},
    ],
)
def test_parse_section_rejects_malformed(node):
    with pytest.raises(ValueError):
        parse_section(node)


def test_parse_instance_rejects_invalid_json():
    with pytest.raises(ValueError):
        parse_instance("{not json")


def test_load_instance_from_static_dir(tmp_path):
    instances = tmp_path / "instances"
    instances.mkdir()
    (instances / "3.json").write_text(json.dumps(LEVEL), encoding="utf-8")
    instance = load_instance(3, tmp_path)
    assert instance.start_section == parse_section(LEVEL)


def test_load_instance_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_instance(1, tmp_path)


def test_format_section_line_format():
    assert format_section(Section(w=2, h=3)) == "w, h = 2.000000, 3.000000\n"


def test_format_section_none_is_empty():
    assert format_section(None) == ""


def test_format_section_one_line_per_section_and_block():
    lines = format_section(parse_section(LEVEL)).splitlines()
    assert len(lines) == 3 + 2 + 1
    assert sum(line.startswith("\t(") for line in lines) == 3


def test_format_section_visits_right_before_left():
    text = format_section(parse_section(LEVEL))
    right = text.index(f"w, h = {5:f}")
    left = text.index(f"w, h = {7:f}")
    assert right < left


def test_format_instance_none():
    assert format_instance(None) == SEPARATOR + "\n"


def test_format_instance_wraps_sections():
    instance = Instance(start_section=Section(w=1, h=1))
    text = format_instance(instance)
    assert text.startswith(SEPARATOR + "\n")
    assert text.endswith(SEPARATOR + "\n")
    assert format_section(instance.start_section) in text


def test_print_instance_writes_description(capsys):
    from gamezer.instance import print_instance

    instance = parse_instance(json.dumps(LEVEL))
    print_instance(instance)
    assert capsys.readouterr().out == format_instance(instance)