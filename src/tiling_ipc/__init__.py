"""Tiling IPC — command-protocol front end for a tiling window-manager daemon."""

from tiling_ipc.arguments import ArgumentOverflow, build_arguments
from tiling_ipc.commands import Command, CommandChain, ErrorKind, ParseError, parse_command
from tiling_ipc.config_router import CONFIG_KEYS, ConfigUpdate, resolve_key, route_config
from tiling_ipc.config_store import ConfigStore, InMemoryConfigStore, SpaceMode, SplitMode
from tiling_ipc.daemon import OpResult, TilingDaemon
from tiling_ipc.dispatcher import Dispatcher, SpaceHandlers, WindowHandlers
from tiling_ipc.formatter import did_you_mean, format_result, suggest
from tiling_ipc.grammar import SPACE_GRAMMAR, WINDOW_GRAMMAR, FlagGrammar, FlagSpec
from tiling_ipc.lexer import Cursor, LexerError, Token, next_token, tokenize
from tiling_ipc.settings import ConfigDefaults, DaemonSettings, configure_logging

__all__ = [
    # Lexer
    "Token",
    "Cursor",
    "LexerError",
    "next_token",
    "tokenize",
    # Arguments
    "build_arguments",
    "ArgumentOverflow",
    # Grammar
    "FlagSpec",
    "FlagGrammar",
    "WINDOW_GRAMMAR",
    "SPACE_GRAMMAR",
    # Commands
    "Command",
    "CommandChain",
    "ErrorKind",
    "ParseError",
    "parse_command",
    # Dispatcher
    "WindowHandlers",
    "SpaceHandlers",
    "Dispatcher",
    # Config
    "ConfigStore",
    "InMemoryConfigStore",
    "SpaceMode",
    "SplitMode",
    "CONFIG_KEYS",
    "ConfigUpdate",
    "resolve_key",
    "route_config",
    # Settings
    "DaemonSettings",
    "ConfigDefaults",
    "configure_logging",
    # Formatter
    "format_result",
    "suggest",
    "did_you_mean",
    # Daemon
    "OpResult",
    "TilingDaemon",
]
