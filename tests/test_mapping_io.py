from pathlib import Path

import pytest

from css_renaming.exceptions import RenamingMapFormatError
from css_renaming.mapping_io import (
    RenamingMapFormat,
    parse_properties_map,
    read_renaming_map,
    write_renaming_map,
)

MAPPING = {"dialog": "e", "content": "b", "settings": "m", "unused": "T"}


@pytest.mark.parametrize("filename", ["renaming.json", "renaming.properties"])
def test_written_maps_read_back_in_order(tmp_path: Path, filename: str) -> None:
    path = write_renaming_map(tmp_path / "out" / filename, MAPPING)
    loaded = read_renaming_map(path)
    assert list(loaded.items()) == list(MAPPING.items())


def test_explicit_format_overrides_suffix(tmp_path: Path) -> None:
    path = tmp_path / "renaming.txt"
    write_renaming_map(path, MAPPING, "properties")
    assert path.read_text(encoding="utf-8").splitlines()[0] == "dialog=e"
    assert read_renaming_map(path, RenamingMapFormat.PROPERTIES) == MAPPING


def test_properties_ignore_comments_and_blank_lines() -> None:
    text = "# generated\n\ndialog = e\nbutton=a\n"
    assert parse_properties_map(text) == {"dialog": "e", "button": "a"}


def test_malformed_properties_line_reports_location() -> None:
    with pytest.raises(RenamingMapFormatError, match=r"map.properties:2"):
        parse_properties_map("dialog=e\nbutton\n", source="map.properties")


@pytest.mark.parametrize("text", ["[1, 2]", "{\"dialog\": 3}", "{not json"])
def test_invalid_json_maps_are_rejected(tmp_path: Path, text: str) -> None:
    path = tmp_path / "renaming.json"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(RenamingMapFormatError):
        read_renaming_map(path)


def test_unknown_suffix_requires_explicit_format(tmp_path: Path) -> None:
    with pytest.raises(RenamingMapFormatError):
        write_renaming_map(tmp_path / "renaming.yaml", MAPPING)


def test_unknown_format_name_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(RenamingMapFormatError):
        write_renaming_map(tmp_path / "renaming.json", MAPPING, "xml")


def test_undecodable_map_file_is_a_format_error(tmp_path: Path) -> None:
    path = tmp_path / "renaming.properties"
    path.write_bytes(b"dialog=\xff\xfe\n")
    with pytest.raises(RenamingMapFormatError, match="renaming.properties"):
        read_renaming_map(path)
