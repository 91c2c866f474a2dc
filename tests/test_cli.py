"""Tests for the command line interface."""

from collections.abc import Generator
from unittest.mock import patch

import pytest
from conftest import TEST_BASE_URL, FakeHN

from hn_api.cli import build_parser, format_item, run
from hn_api.client import HNClient
from hn_api.types import Item, ItemType


class TestParser:
    """Tests for argument parsing."""

    def test_story_list_defaults(self) -> None:
        """Story lists default to ten entries without authors."""
        args = build_parser().parse_args(["top"])
        assert args.command == "top"
        assert args.limit == 10
        assert not args.authors

    def test_item_requires_int(self) -> None:
        """Item ids must be integers."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["item", "abc"])


class TestFormatItem:
    """Tests for item formatting."""

    def test_deleted_author(self) -> None:
        """Items without author are shown as deleted."""
        line = format_item(Item(id=1, type=ItemType.COMMENT, text="hi"))
        assert "[deleted]" in line


class TestRun:
    """Tests for running commands against a fake API."""

    @pytest.fixture
    def patched_client(self, fake_hn: FakeHN) -> Generator[None, None, None]:
        """Make the CLI talk to the fake API."""
        with patch(
            "hn_api.cli.HNClient",
            lambda: HNClient(base_url=TEST_BASE_URL, transport=fake_hn.transport),
        ):
            yield

    @pytest.mark.asyncio
    async def test_top_with_authors(
        self, fake_hn: FakeHN, patched_client: None, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Top stories are printed in rank order, missing ones marked."""
        fake_hn.bodies["topstories"] = [5, 3, 9, 11]
        fake_hn.add_item(5, title="Five", by="alice")
        fake_hn.add_item(9, title="Nine", by="bob")
        fake_hn.add_user("alice", karma=7)

        args = build_parser().parse_args(["top", "--limit", "3", "--authors"])
        assert await run(args) == 0

        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 3
        assert "Five" in lines[0] and "karma=7" in lines[0]
        assert "[missing]" in lines[1]
        assert "Nine" in lines[2] and "karma" not in lines[2]
        assert "item/11" not in fake_hn.requests

    @pytest.mark.asyncio
    async def test_missing_item_exit_code(
        self, patched_client: None, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Strict lookups of missing items exit with 1."""
        args = build_parser().parse_args(["item", "404"])
        assert await run(args) == 1

    @pytest.mark.asyncio
    async def test_user(
        self, fake_hn: FakeHN, patched_client: None, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Users are printed on one line."""
        fake_hn.add_user("pg", karma=155111)

        assert await run(build_parser().parse_args(["user", "pg"])) == 0
        assert "pg karma=155111" in capsys.readouterr().out
