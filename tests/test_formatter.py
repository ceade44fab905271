from deskdex.services.formatter import build_candidates, format_label
from deskdex.services.index_cache import ApplicationIndexCache
from deskdex.services.models import Candidate, DesktopEntry


def test_label_with_comment():
    assert format_label(DesktopEntry(name="App", exec="app", comment="X")) == "App - X"


def test_label_without_comment():
    assert format_label(DesktopEntry(name="App", exec="app")) == "App "


def test_build_candidates_covers_every_entry(tmp_path, write_entry):
    root = tmp_path / "applications"
    write_entry(root / "a.desktop", Type="Application", Name="Alpha", Exec="alpha %U", Comment="First")
    write_entry(root / "b.desktop", Type="Application", Name="Beta", Exec="beta", NoDisplay="true")
    cache = ApplicationIndexCache([root])

    candidates = build_candidates(cache)

    by_label = {candidate.label: candidate for candidate in candidates}
    assert set(by_label) == {"Alpha - First", "Beta "}
    assert isinstance(by_label["Alpha - First"], Candidate)
    assert by_label["Alpha - First"].entry.command == "alpha"


def test_build_candidates_can_drop_invisible_entries(tmp_path, write_entry):
    root = tmp_path / "applications"
    write_entry(root / "a.desktop", Type="Application", Name="Alpha", Exec="alpha")
    write_entry(root / "b.desktop", Type="Application", Name="Beta", Exec="beta", Hidden="true")
    cache = ApplicationIndexCache([root])

    labels = [candidate.label for candidate in build_candidates(cache, include_hidden=False)]

    assert labels == ["Alpha "]
