"""Tests for the command line entry point."""

from __future__ import annotations

import json
import logging

import pytest

from ygg_keys.__main__ import ColoredFormatter, build_parser, main, render, setup_logging
from ygg_keys.identity import NodeIdentity
from tests.ygg_keys.helpers import STRONG_KEY, WEAK_KEY


class TestInspect:
    """Tests for the inspect command."""

    def test_plain_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Prints keys and derived values one per line."""
        assert main(["--no-color", "inspect", "--secret", STRONG_KEY.pair_hex]) == 0

        out = capsys.readouterr().out
        assert f"public:   {STRONG_KEY.public_hex}" in out
        assert f"strength: {STRONG_KEY.strength}" in out
        assert f"address:  {STRONG_KEY.address}" in out
        assert f"subnet:   {STRONG_KEY.subnet}" in out

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """--json prints a single camelCase object."""
        argv = ["inspect", "--secret", WEAK_KEY.secret_hex, "--public", WEAK_KEY.public_hex]
        assert main([*argv, "--json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data == {
            "secretKey": WEAK_KEY.secret_hex,
            "publicKey": WEAK_KEY.public_hex,
            "strength": WEAK_KEY.strength,
            "address": str(WEAK_KEY.address),
            "subnet": str(WEAK_KEY.subnet),
        }

    @pytest.mark.parametrize(
        "argv",
        [
            ["inspect", "--secret", "xyz"],
            ["inspect", "--secret", "00" * 33],
            ["inspect", "--secret", STRONG_KEY.pair_hex, "--public", WEAK_KEY.public_hex],
        ],
        ids=["bad-hex", "bad-length", "conflict"],
    )
    def test_invalid_key_exits_with_error(
        self,
        argv: list[str],
        capsys: pytest.CaptureFixture[str],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Import failures are logged and give exit status 1."""
        with caplog.at_level(logging.ERROR):
            assert main(argv) == 1

        assert capsys.readouterr().out == ""
        assert "Could not load identity" in caplog.text

    def test_unroutable_key_exits_with_error(
        self,
        capsys: pytest.CaptureFixture[str],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """A key that loads but has no address gives exit status 1."""
        argv = ["inspect", "--secret", STRONG_KEY.secret_hex, "--public", "00" * 32]
        with caplog.at_level(logging.ERROR):
            assert main(argv) == 1

        assert capsys.readouterr().out == ""
        assert "Could not derive address" in caplog.text

    def test_secret_is_required(self) -> None:
        """inspect without --secret is a usage error."""
        with pytest.raises(SystemExit):
            build_parser().parse_args(["inspect"])


class TestGenerate:
    """Tests for the generate command."""

    def test_generate_prints_loadable_identity(self, capsys: pytest.CaptureFixture[str]) -> None:
        """The printed keys load back to the printed address."""
        assert main(["generate", "--json"]) == 0

        data = json.loads(capsys.readouterr().out)
        identity = NodeIdentity.from_hex(data["secretKey"], data["publicKey"])
        assert str(identity.address()) == data["address"]
        assert str(identity.subnet()) == data["subnet"]

    def test_command_is_required(self) -> None:
        """Running without a command is a usage error."""
        with pytest.raises(SystemExit):
            build_parser().parse_args([])


class TestRendering:
    """Tests for output and log formatting."""

    def test_render_plain_field_order(self) -> None:
        """Plain output lists secret, public, strength, address, subnet."""
        summary = NodeIdentity.from_hex(STRONG_KEY.pair_hex).summary()
        labels = [line.split(":")[0] for line in render(summary, as_json=False).splitlines()]

        assert labels == ["secret", "public", "strength", "address", "subnet"]

    def test_colored_formatter(self) -> None:
        """Levels and names are wrapped in ANSI colors."""
        record = logging.LogRecord("ygg_keys", logging.ERROR, __file__, 1, "boom", None, None)
        text = ColoredFormatter().format(record)

        assert ColoredFormatter.RED in text
        assert ColoredFormatter.BLUE + "ygg_keys" in text
        assert text.endswith("boom")


class TestSetupLogging:
    """Tests for root logger configuration."""

    @pytest.fixture
    def bare_root(self, monkeypatch: pytest.MonkeyPatch) -> logging.Logger:
        """The root logger with its handlers and level restored after the test."""
        root = logging.getLogger()
        monkeypatch.setattr(root, "handlers", [])
        monkeypatch.setattr(root, "level", root.level)
        return root

    def test_repeated_calls_install_one_handler(self, bare_root: logging.Logger) -> None:
        """Calling setup twice does not duplicate log output."""
        setup_logging()
        setup_logging(verbose=True)

        assert len(bare_root.handlers) == 1
        assert bare_root.level == logging.DEBUG

    def test_existing_handler_is_kept(self, bare_root: logging.Logger) -> None:
        """A handler configured by the embedding application is left alone."""
        existing = logging.NullHandler()
        bare_root.addHandler(existing)

        setup_logging(no_color=True)

        assert bare_root.handlers == [existing]

    def test_no_color_uses_plain_formatter(self, bare_root: logging.Logger) -> None:
        """--no-color installs a formatter without ANSI codes."""
        setup_logging(no_color=True)

        (handler,) = bare_root.handlers
        assert not isinstance(handler.formatter, ColoredFormatter)
