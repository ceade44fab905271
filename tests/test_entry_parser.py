import logging

from deskdex.services.entry_parser import DesktopEntryParser, parse, parse_entry_text, section_fields
from deskdex.services.models import CandidateFile, DesktopEntry, Rejection, RejectReason, clean_exec

from conftest import desktop_text


def never_found(_name):
    return None


def always_found(name):
    return f"/usr/bin/{name}"


def test_well_formed_entry():
    text = desktop_text(Type="Application", Name="Foo", Exec="foo %U", Comment="Bar")

    entry = parse_entry_text(text, "/apps/foo.desktop")

    assert entry == DesktopEntry(name="Foo", exec="foo %U", comment="Bar", visible=True, path="/apps/foo.desktop")


def test_clean_exec_strips_file_and_url_placeholders():
    assert clean_exec("foo %U --flag %f") == "foo --flag"
    assert clean_exec("foo %F %u") == "foo"
    assert clean_exec("env  FOO=1   bar") == "env FOO=1 bar"
    # Other field codes are not touched.
    assert clean_exec("foo %i %c") == "foo %i %c"


def test_command_property_uses_cleaned_exec():
    entry = DesktopEntry(name="Foo", exec="foo %U --flag %f")
    assert entry.command == "foo --flag"


def test_non_application_type_is_rejected():
    text = desktop_text(Type="Link", Name="Site", Exec="xdg-open http://example.org", URL="http://example.org")

    result = parse_entry_text(text)

    assert isinstance(result, Rejection)
    assert result.reason is RejectReason.NOT_APPLICATION
    assert not result.reason.is_fault


def test_missing_type_is_rejected():
    result = parse_entry_text(desktop_text(Name="Foo", Exec="foo"))
    assert result.reason is RejectReason.NOT_APPLICATION


def test_hidden_entry_is_kept_but_not_visible():
    entry = parse_entry_text(desktop_text(Type="Application", Name="Foo", Exec="foo", Hidden="true"))
    assert isinstance(entry, DesktopEntry)
    assert entry.visible is False


def test_no_display_entry_is_not_visible():
    entry = parse_entry_text(desktop_text(Type="Application", Name="Foo", Exec="foo", NoDisplay="True"))
    assert entry.visible is False


def test_false_visibility_flags_keep_entry_visible():
    entry = parse_entry_text(desktop_text(Type="Application", Name="Foo", Exec="foo", Hidden="false", NoDisplay="false"))
    assert entry.visible is True


def test_missing_header_is_a_fault():
    result = parse_entry_text("Type=Application\nName=Foo\nExec=foo\n")
    assert result.reason is RejectReason.NO_DESKTOP_SECTION
    assert result.reason.is_fault


def test_missing_name_is_a_fault():
    result = parse_entry_text(desktop_text(Type="Application", Exec="foo"))
    assert result.reason is RejectReason.MISSING_NAME
    assert result.reason.is_fault


def test_missing_exec_is_a_silent_skip():
    result = parse_entry_text(desktop_text(Type="Application", Name="Handler", MimeType="text/plain;"))
    assert result.reason is RejectReason.MISSING_EXEC
    assert not result.reason.is_fault


def test_tryexec_must_resolve():
    text = desktop_text(Type="Application", Name="Foo", Exec="foo", TryExec="foo-bin")

    assert parse_entry_text(text, which=never_found).reason is RejectReason.TRYEXEC_NOT_FOUND
    assert isinstance(parse_entry_text(text, which=always_found), DesktopEntry)


def test_tryexec_absolute_path_must_be_executable(tmp_path):
    binary = tmp_path / "tool"
    binary.write_text("#!/bin/sh\n")
    text = desktop_text(Type="Application", Name="Foo", Exec="foo", TryExec=str(binary))

    assert parse_entry_text(text, which=always_found).reason is RejectReason.TRYEXEC_NOT_FOUND
    binary.chmod(0o755)
    assert isinstance(parse_entry_text(text, which=never_found), DesktopEntry)


def test_fields_from_later_sections_do_not_leak():
    text = (
        "[Desktop Entry]\n"
        "Type=Application\n"
        "Name=Browser\n"
        "\n"
        "[Desktop Action new-window]\n"
        "Name=New Window\n"
        "Exec=browser --new-window\n"
        "Comment=Leaked\n"
    )

    result = parse_entry_text(text)

    assert isinstance(result, Rejection)
    assert result.reason is RejectReason.MISSING_EXEC


def test_fields_before_the_primary_section_are_ignored():
    text = "[Other]\nName=Wrong\n[Desktop Entry]\nType=Application\nName=Right\nExec=right\n"
    assert parse_entry_text(text).name == "Right"


def test_localized_keys_are_ignored_and_first_key_wins():
    text = (
        "[Desktop Entry]\n"
        "Name[de]=Rechner\n"
        "Type = Application\n"
        "Name = Calculator  \n"
        "Name=Second\n"
        "Comment[fr]=Calculatrice\n"
        "Exec=calc\n"
    )

    entry = parse_entry_text(text)

    assert entry.name == "Calculator"
    assert entry.comment is None


def test_comments_and_blank_lines_are_skipped():
    fields = section_fields("# header\n[Desktop Entry]\n# Name=Commented\n\nName=Real\n")
    assert fields == {"Name": "Real"}


def test_parse_batch_isolates_faults(tmp_path, write_entry, caplog):
    good = write_entry(tmp_path / "good.desktop", Type="Application", Name="Good", Exec="good")
    broken = write_entry(tmp_path / "broken.desktop", text="Name=Broken\nExec=broken\n")
    nameless = write_entry(tmp_path / "nameless.desktop", Type="Application", Exec="x")
    link = write_entry(tmp_path / "link.desktop", Type="Link", Name="Link", Exec="y")
    missing = tmp_path / "vanished.desktop"
    files = [CandidateFile(identifier=p.name, path=str(p)) for p in (broken, good, nameless, link, missing)]

    parser = DesktopEntryParser(which=always_found)
    with caplog.at_level(logging.WARNING, logger="deskdex.services.entry_parser"):
        entries = parser.parse(files)

    assert list(entries) == ["Good"]
    assert [(f.path, f.reason) for f in parser.faults] == [
        (str(broken), RejectReason.NO_DESKTOP_SECTION),
        (str(nameless), RejectReason.MISSING_NAME),
        (str(missing), RejectReason.UNREADABLE),
    ]
    warned = {record.getMessage() for record in caplog.records}
    assert any(str(broken) in message for message in warned)
    assert not any(str(link) in message for message in warned)


def test_duplicate_names_last_file_wins(tmp_path, write_entry):
    first = write_entry(tmp_path / "a.desktop", Type="Application", Name="Same", Exec="first")
    second = write_entry(tmp_path / "b.desktop", Type="Application", Name="Same", Exec="second")
    files = [CandidateFile(identifier=p.name, path=str(p)) for p in (first, second)]

    entries = parse(files)

    assert list(entries) == ["Same"]
    assert entries["Same"].exec == "second"
    assert entries["Same"].path == str(second)


def test_byte_order_mark_before_header_is_tolerated(tmp_path, write_entry):
    text = "\ufeff" + desktop_text(Type="Application", Name="Foo", Exec="foo")
    path = tmp_path / "bom.desktop"
    path.write_bytes(text.encode("utf-8"))

    assert parse_entry_text(text).name == "Foo"
    parser = DesktopEntryParser(which=always_found)
    assert list(parser.parse([CandidateFile(identifier="bom.desktop", path=str(path))])) == ["Foo"]
    assert parser.faults == []
