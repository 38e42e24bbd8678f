import pytest

from css_renaming.exceptions import UnknownRenamingTypeError
from css_renaming.recording import RecordingSubstitutionMap
from css_renaming.renaming import RenamingType
from css_renaming.substitution import IdentitySubstitutionMap


def _assert_records_parts(renaming_type: RenamingType) -> None:
    provider = renaming_type.get_css_substitution_map_provider()
    recording = RecordingSubstitutionMap(provider.get())
    recording.get("dialog-content")
    recording.get("dialog-title")
    assert set(recording.get_mappings()) == {"dialog", "content", "title"}


def test_none() -> None:
    substitution_map = RenamingType.NONE.get_css_substitution_map_provider().get()
    assert isinstance(substitution_map, IdentitySubstitutionMap)
    assert substitution_map.get("dialog-button") == "dialog-button"


def test_debug() -> None:
    substitution_map = RenamingType.DEBUG.get_css_substitution_map_provider().get()
    assert substitution_map.get("dialog") == "dialog_"
    assert substitution_map.get("dialog-button") == "dialog_-button_"
    assert substitution_map.get("button_") == "button__"
    _assert_records_parts(RenamingType.DEBUG)


def test_compact() -> None:
    substitution_map = RenamingType.COMPACT.get_css_substitution_map_provider().get()
    assert substitution_map.get("dialog") == "a"
    assert substitution_map.get("settings") == "b"
    assert substitution_map.get("dialog-button") == "a-c"
    assert substitution_map.get("button") == "c"
    # A class name may include the same part more than once.
    assert substitution_map.get("goog-imageless-button-button-pos") == "d-e-c-c-f"
    _assert_records_parts(RenamingType.COMPACT)


def test_compact_with_input_renaming_map() -> None:
    provider = RenamingType.COMPACT.get_css_substitution_map_provider()
    recording = (
        RecordingSubstitutionMap.Builder()
        .with_substitution_map(provider.get())
        .should_record_mapping_for_code_generation(lambda part: True)
        .build()
    )
    input_map = {"dialog": "e", "content": "b", "settings": "m", "unused": "T"}
    recording.initialize_with_mappings(input_map)

    assert recording.get("dialog") == "e"
    assert recording.get("settings") == "m"
    assert recording.get("dialog-button") == "e-a"
    assert recording.get("button") == "a"
    assert recording.get("title") == "c"
    assert recording.get("goog-imageless-button-button-pos-dialog") == "d-f-a-a-g-e"

    expected = dict(input_map)
    expected.update({"button": "a", "goog": "d", "imageless": "f", "pos": "g", "title": "c"})
    assert recording.get_mappings() == expected


def test_provenance_round_trip_reproduces_tokens() -> None:
    names = ["dialog", "settings", "dialog-button", "goog-imageless-button-button-pos"]
    first = RecordingSubstitutionMap(RenamingType.COMPACT.create_substitution_map())
    first_results = [first.get(name) for name in names]

    second = RecordingSubstitutionMap(RenamingType.COMPACT.create_substitution_map())
    second.initialize_with_mappings(first.get_mappings())
    assert [second.get(name) for name in reversed(names)] == list(reversed(first_results))
    assert second.get("footer") == "g"


def test_provider_seed_is_copied_per_map() -> None:
    seed = {"dialog": "e"}
    provider = RenamingType.COMPACT.get_css_substitution_map_provider(seed=seed)
    seed["title"] = "a"
    first = provider.get()
    assert first.get("dialog-title") == "e-a"
    second = provider.get()
    assert second.get("button") == "a"


def test_excluded_tokens_are_never_assigned() -> None:
    substitution_map = RenamingType.COMPACT.create_substitution_map(excluded_tokens=["a", "b"])
    assert substitution_map.get("dialog-title") == "c-d"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("none", RenamingType.NONE),
        ("DEBUG", RenamingType.DEBUG),
        (" compact ", RenamingType.COMPACT),
        ("closure", RenamingType.COMPACT),
    ],
)
def test_from_name(name: str, expected: RenamingType) -> None:
    assert RenamingType.from_name(name) is expected


def test_unknown_mode_is_a_configuration_error() -> None:
    with pytest.raises(UnknownRenamingTypeError) as excinfo:
        RenamingType.from_name("pretty")
    assert "pretty" in str(excinfo.value)
    assert isinstance(excinfo.value, ValueError)
