import pytest

from find_engine.actions import (
    COMMANDS,
    FindPreviousCommand,
    ReplaceAllCommand,
    ReplaceAndFindCommand,
    SearchService,
    UnknownCommandError,
    create_command,
)
from find_engine.query import QueryError, SearchOptions


def test_registry_lists_every_command() -> None:
    assert set(COMMANDS) == {
        "find_incremental",
        "find_next",
        "find_previous",
        "replace_and_find",
        "replace_all",
    }


def test_create_find_command() -> None:
    service = SearchService()
    command = create_command("find_previous", "foo", service=service)

    assert isinstance(command, FindPreviousCommand)
    assert command.service is service
    assert command.query.raw == "foo"


def test_create_replace_commands() -> None:
    options = SearchOptions(is_regex=True)
    replace_and_find = create_command(
        "replace_and_find", "a+", replace="b", options=options
    )
    replace_all = create_command(
        "replace_all", "a+", replace="b", options=options, selection_only=True
    )

    assert isinstance(replace_and_find, ReplaceAndFindCommand)
    assert replace_and_find.replace == "b"
    assert isinstance(replace_all, ReplaceAllCommand)
    assert replace_all.selection_only is True
    assert replace_all.options is options


def test_unknown_command() -> None:
    with pytest.raises(UnknownCommandError) as excinfo:
        create_command("find_everything", "foo")

    assert excinfo.value.name == "find_everything"


def test_create_command_propagates_query_error() -> None:
    with pytest.raises(QueryError):
        create_command("find_next", "[", options=SearchOptions(is_regex=True))
