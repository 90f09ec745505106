# tests/test_config.py
from __future__ import annotations

import pytest

from zeckendorf.config import has_profile, list_profiles_with_descriptions, load_settings
from zeckendorf.runtime import APPLY, CFG, current
from zeckendorf.utility import UserInputError
from zeckendorf.workspace import ensure_workspace_seeded, seed_workspace, workspace_dir


def _write_profile(name: str, body: str) -> None:
    pdir = workspace_dir() / "profiles"
    pdir.mkdir(parents=True, exist_ok=True)
    (pdir / f"{name}.toml").write_text(body, encoding="utf-8")


def test_workspace_follows_environment(tmp_path):
    assert workspace_dir() == (tmp_path / "workspace").resolve()


def test_seeding_copies_default_profile_once():
    root, seeded, copied = ensure_workspace_seeded()
    assert seeded
    assert copied["profiles"] >= 1
    assert (root / "profiles" / "default.toml").is_file()

    _, seeded_again, _ = ensure_workspace_seeded()
    assert not seeded_again


def test_seed_overwrite_restores_packaged_profile():
    ensure_workspace_seeded()
    default = workspace_dir() / "profiles" / "default.toml"
    default.write_text("[BEHAVIOUR]\nDEBUG = true\n", encoding="utf-8")
    seed_workspace(overwrite=True)
    assert "[_PROFILE_]" in default.read_text(encoding="utf-8")


def test_default_profile_settings():
    settings = load_settings()
    assert settings.name == "default"
    assert "_PROFILE_" not in settings.data
    APPLY(settings)
    assert CFG("CONVERSION.OVERFLOW") == "raise"
    assert CFG("FIBONACCI.MEMOIZE") is True
    assert CFG("BEHAVIOUR.MAX_DIGITS") == 100_000
    assert current().profile_name == "default"
    assert current().debug is False


def test_custom_profile_with_metadata():
    _write_profile(
        "wide",
        '[_PROFILE_]\nname = "Wide"\ndescription = "  saturate\\n  everything "\n'
        '[CONVERSION]\nOVERFLOW = "saturate"\n[BEHAVIOUR]\nDEBUG = true\n',
    )
    assert has_profile("wide")
    settings = load_settings("wide")
    assert settings.name == "Wide"
    assert settings.description == "saturate everything"
    APPLY(settings)
    assert CFG("CONVERSION.OVERFLOW") == "saturate"
    assert current().debug is True


def test_profile_without_metadata_uses_file_stem():
    _write_profile("plain", "[DISPLAY]\nCOLOR = false\n")
    settings = load_settings("plain")
    assert settings.name == "plain"
    assert settings.description == "(no description)"


def test_missing_profile():
    assert not has_profile("nope")
    with pytest.raises(FileNotFoundError, match=r"Profile 'nope' not found at .*nope\.toml"):
        load_settings("nope")


def test_malformed_toml_reports_location():
    _write_profile("broken", "[BEHAVIOUR\nDEBUG = true\n")
    with pytest.raises(UserInputError, match=r"broken\.toml.*line 1"):
        load_settings("broken")


@pytest.mark.parametrize(
    "body",
    [
        '[CONVERSION]\nOVERFLOW = "wrap"\n',
        "[BEHAVIOUR]\nMAX_DIGITS = 0\n",
        '[BEHAVIOUR]\nMAX_DIGITS = "many"\n',
    ],
)
def test_invalid_values_rejected(body):
    _write_profile("bad", body)
    with pytest.raises(UserInputError):
        load_settings("bad")


def test_profile_listing():
    _write_profile("broken", "[oops\n")
    names = dict(list_profiles_with_descriptions())
    assert "default" in names
    assert names["broken"] == "(unreadable)"


def test_cfg_dotted_lookup_defaults():
    APPLY({"A": {"B": {"C": 3}}, "TOP": 1})
    assert CFG("A.B.C") == 3
    assert CFG("A.B.X", "fallback") == "fallback"
    assert CFG("TOP") == 1
    assert CFG("", 9) == 9


def test_apply_dict_replaces_profile_and_copies():
    APPLY({"BEHAVIOUR": {"DEBUG": True}})
    assert current().profile_name == "default"
    assert current().debug is True

    _write_profile("quiet", '[_PROFILE_]\nname = "Quiet"\n[BEHAVIOUR]\nDEBUG = false\n')
    APPLY(load_settings("quiet"))
    assert current().profile_name == "Quiet"
    assert current().debug is False

    raw = {"DISPLAY": {"COLOR": False}}
    APPLY(raw)
    raw["EXTRA"] = 1
    assert current().profile_name == "default"
    assert CFG("EXTRA") is None
    assert CFG("DISPLAY.COLOR") is False


def test_apply_keeps_debug_when_unset():
    APPLY({"BEHAVIOUR": {"DEBUG": True}})
    APPLY({"DISPLAY": {"COLOR": True}})
    assert current().debug is True
