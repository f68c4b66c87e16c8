"""Tests for tiling_ipc.daemon."""

from tiling_ipc.commands import CommandChain, ErrorKind, ParseError
from tiling_ipc.config_store import SPLIT_RATIO
from tiling_ipc.daemon import TilingDaemon
from tiling_ipc.settings import DaemonSettings


class TestWindowMessages:
    def test_focus_east(self, daemon, calls, store):
        result = daemon.handle_message("window -f east")
        assert result.success
        assert calls == [("focus_window", "east")]
        assert store.updates == []

    def test_temporary_ratio_restored(self, daemon, store):
        before = store.float_value(SPLIT_RATIO)
        result = daemon.handle_message("window -r 0.05")
        assert result.success
        assert store.float_value(SPLIT_RATIO) == before

    def test_invalid_selector_dispatches_nothing(self, daemon, calls):
        result = daemon.handle_message("window -f up")
        assert not result.success
        assert result.kind is ErrorKind.INVALID_SELECTOR
        assert calls == []

    def test_partially_valid_message_dispatches_nothing(self, daemon, calls, store):
        result = daemon.handle_message("window -r 0.3 -f east -s up")
        assert not result.success
        assert calls == []
        assert store.updates == []

    def test_unknown_flag(self, daemon, calls):
        result = daemon.handle_message("window -d 2")
        assert result.kind is ErrorKind.UNRECOGNIZED_FLAG
        assert calls == []

    def test_unknown_flag_lists_accepted_flags(self, daemon):
        result = daemon.handle_message("window -x east")
        assert "option -x not recognized for window command" in result.message
        assert "expected one of -f, -s, -i, -w, -t, -r" in result.message

    def test_long_option_is_unrecognized_flag(self, daemon, calls):
        result = daemon.handle_message("window --f east")
        assert result.kind is ErrorKind.UNRECOGNIZED_FLAG
        assert "did you mean '-f'?" in result.message
        assert calls == []

    def test_connection_is_ignored(self, daemon, calls):
        connection = object()
        assert daemon.handle_message("window -t float", connection).success
        assert calls == [("toggle_window", "float")]

    def test_trailing_newline_stripped(self, daemon, calls):
        assert daemon.handle_message("window -f west\n").success
        assert calls == [("focus_window", "west")]

    def test_line_endings_kept_when_disabled(self, window_handlers, space_handlers, store, calls):
        daemon = TilingDaemon(
            window_handlers,
            space_handlers,
            store,
            DaemonSettings(strip_line_endings=False),
        )
        result = daemon.handle_message("window -f west\n")
        assert result.kind is ErrorKind.INVALID_SELECTOR
        assert calls == []

    def test_argument_limit(self, window_handlers, space_handlers, store, calls):
        daemon = TilingDaemon(
            window_handlers, space_handlers, store, DaemonSettings(max_arguments=2)
        )
        result = daemon.handle_message("window -f east -s west")
        assert result.kind is ErrorKind.TOO_MANY_ARGUMENTS
        assert calls == []


class TestSpaceMessages:
    def test_rotate(self, daemon, calls):
        assert daemon.handle_message("space -r 270").success
        assert calls == [("rotate_window_tree", "270")]

    def test_invalid_rotation(self, daemon, calls):
        result = daemon.handle_message("space -r 45")
        assert not result.success
        assert calls == []


class TestConfigMessages:
    def test_integer_update(self, daemon, store):
        result = daemon.handle_message("config mouse_follows_focus 1")
        assert result.success
        assert store.updates == [("mouse_follows_focus", 1, None)]

    def test_scoped_update(self, daemon, store):
        result = daemon.handle_message("config 3_top 20")
        assert result.success
        assert store.updates == [("space_offset_top", 20.0, 3)]

    def test_bogus_key(self, daemon, store):
        result = daemon.handle_message("config bogus_key 5")
        assert not result.success
        assert "not a valid config option" in result.message
        assert store.updates == []

    def test_missing_value(self, daemon, store):
        result = daemon.handle_message("config space_mode")
        assert result.kind is ErrorKind.MISSING_VALUE
        assert store.updates == []

    def test_ratio_persists_through_config(self, daemon, store):
        daemon.handle_message("config bsp_split_ratio 0.6")
        daemon.handle_message("window -f east")
        assert store.float_value(SPLIT_RATIO) == 0.6


class TestUnmatched:
    def test_unknown_type(self, daemon, calls, store):
        result = daemon.handle_message("desktop -f 2")
        assert not result.success
        assert result.kind is ErrorKind.UNRECOGNIZED_MESSAGE
        assert result.message == "no match for 'desktop'"
        assert calls == []
        assert store.updates == []

    def test_empty_message(self, daemon):
        result = daemon.handle_message("")
        assert result.kind is ErrorKind.UNRECOGNIZED_MESSAGE


class TestParse:
    def test_parse_twice(self, daemon):
        first = daemon.parse("window", "-f east -r 0.1")
        second = daemon.parse("window", "-f east -r 0.1")
        assert isinstance(first, CommandChain)
        assert first == second
        assert first is not second

    def test_parse_does_not_dispatch(self, daemon, calls):
        daemon.parse("space", "-r 90")
        assert calls == []

    def test_parse_unknown_type(self, daemon):
        result = daemon.parse("config", "space_mode bsp")
        assert isinstance(result, ParseError)
        assert result.kind is ErrorKind.UNRECOGNIZED_MESSAGE
